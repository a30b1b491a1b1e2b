"""Breadth-first hop counts over a directed adjacency."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Deque, Dict, Mapping, Optional, Sequence


def compute_distances(adjacency: Mapping[str, Sequence[str]], source_id: str) -> Dict[str, int]:
    """Return the minimum hop count from ``source_id`` to each reachable airport.

    Airports that cannot be reached are absent from the result; the source is
    always present with distance 0, even when it has no outgoing routes.
    """
    distances: Dict[str, int] = {source_id: 0}
    queue: Deque[str] = deque([source_id])
    while queue:
        current = queue.popleft()
        for neighbor in adjacency.get(current, ()):
            if neighbor not in distances:
                distances[neighbor] = distances[current] + 1
                queue.append(neighbor)
    return distances


@dataclass(frozen=True)
class HopQuery:
    """Outcome of a single source/destination hop-count lookup.

    ``distances`` keeps the full BFS map from ``source`` so callers can report
    other destinations without searching again.
    """

    source: str
    destination: str
    hops: Optional[int] = None
    distances: Dict[str, int] = field(default_factory=dict, compare=False, repr=False)

    @property
    def reachable(self) -> bool:
        return self.hops is not None

    def describe(self) -> str:
        if self.hops is None:
            return "Route not found."
        return f"{self.source} -> {self.destination}: {self.hops} switches"


def find_hops(
    adjacency: Mapping[str, Sequence[str]], source_id: str, destination_id: str
) -> HopQuery:
    distances = compute_distances(adjacency, source_id)
    return HopQuery(
        source=source_id,
        destination=destination_id,
        hops=distances.get(destination_id),
        distances=distances,
    )
