"""Connectivity analytics over an airline route network."""

from .network import Airport, Route, RouteGraph
from .stats import DegreeStatistics, calculate_statistics

__all__ = [
    "Airport",
    "DegreeStatistics",
    "Route",
    "RouteGraph",
    "calculate_statistics",
]
