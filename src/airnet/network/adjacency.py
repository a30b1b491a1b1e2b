"""Adjacency builders for the route network."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional

from .domain_types import Adjacency, Route
from .shortest_path import HopQuery, compute_distances, find_hops


def build_directed_adjacency(routes: Iterable[Route]) -> Adjacency:
    """Map each departure id to its destinations, one entry per route."""
    adjacency: Adjacency = {}
    for route in routes:
        adjacency.setdefault(route.departure_id, []).append(route.destination_id)
    return adjacency


def build_mirrored_adjacency(routes: Iterable[Route]) -> Adjacency:
    """Like :func:`build_directed_adjacency` but every route also adds its reverse edge."""
    adjacency: Adjacency = {}
    for route in routes:
        adjacency.setdefault(route.departure_id, []).append(route.destination_id)
        adjacency.setdefault(route.destination_id, []).append(route.departure_id)
    return adjacency


@dataclass
class RouteGraph:
    """Directed route graph used for hop-count queries."""

    adjacency: Adjacency = field(default_factory=dict)

    @classmethod
    def from_routes(cls, routes: Iterable[Route]) -> "RouteGraph":
        return cls(adjacency=build_directed_adjacency(routes))

    @property
    def num_nodes(self) -> int:
        nodes = set(self.adjacency.keys())
        for neighbors in self.adjacency.values():
            nodes.update(neighbors)
        return len(nodes)

    @property
    def num_edges(self) -> int:
        return sum(len(neighbors) for neighbors in self.adjacency.values())

    def neighbors(self, airport_id: str) -> List[str]:
        return list(self.adjacency.get(airport_id, []))

    def distances_from(self, source_id: str) -> Dict[str, int]:
        """Return hop counts from ``source_id`` to every reachable airport."""
        return compute_distances(self.adjacency, source_id)

    def hops_between(self, source_id: str, destination_id: str) -> Optional[int]:
        return self.query(source_id, destination_id).hops

    def query(self, source_id: str, destination_id: str) -> HopQuery:
        return find_hops(self.adjacency, source_id, destination_id)
