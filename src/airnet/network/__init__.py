"""Network package exports."""

from .adjacency import RouteGraph, build_directed_adjacency, build_mirrored_adjacency
from .degrees import (
    HUB_DEGREE_THRESHOLD,
    calculate_degree2,
    degree_map,
    reset_degrees,
    update_degrees,
)
from .domain_types import Adjacency, Airport, Route
from .shortest_path import HopQuery, compute_distances, find_hops

__all__ = [
    "Adjacency",
    "Airport",
    "HopQuery",
    "HUB_DEGREE_THRESHOLD",
    "Route",
    "RouteGraph",
    "build_directed_adjacency",
    "build_mirrored_adjacency",
    "calculate_degree2",
    "compute_distances",
    "degree_map",
    "find_hops",
    "reset_degrees",
    "update_degrees",
]
