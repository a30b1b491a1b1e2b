"""Core dataclasses shared across the network package."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional

# Airport id -> neighbor ids, one entry per route instance in input order.
Adjacency = Dict[str, List[str]]


@dataclass
class Airport:
    """Airport node with the connectivity counters filled in by the analyzer."""

    id: str
    name: str
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    degree: int = 0
    degree2: int = 0

    @property
    def has_coordinates(self) -> bool:
        return self.latitude is not None and self.longitude is not None


@dataclass(frozen=True)
class Route:
    """Directed connection between two airports."""

    departure_id: str
    destination_id: str
