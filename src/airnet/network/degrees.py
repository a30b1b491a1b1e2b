"""First- and second-degree connectivity counters for airports."""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Dict, Iterable, Mapping, MutableMapping, Sequence, Set

from .domain_types import Airport, Route

logger = logging.getLogger(__name__)

HUB_DEGREE_THRESHOLD = 100

_DEGREE_FIELDS = ("degree", "degree2")


def update_degrees(
    airports: MutableMapping[str, Airport],
    routes: Iterable[Route],
    *,
    hub_threshold: int = HUB_DEGREE_THRESHOLD,
) -> Dict[str, Airport]:
    """Increment ``degree`` on both endpoints of every route.

    Returns the airports whose running degree reached ``hub_threshold``. Each
    entry is a snapshot copied at the moment of crossing, so its ``degree`` is
    the threshold-crossing value rather than the final one.
    """
    hubs: Dict[str, Airport] = {}
    unknown: Set[str] = set()
    for route in routes:
        for airport_id in (route.departure_id, route.destination_id):
            airport = airports.get(airport_id)
            if airport is None:
                unknown.add(airport_id)
                continue
            airport.degree += 1
            if airport.degree >= hub_threshold and airport_id not in hubs:
                hubs[airport_id] = replace(airport)
    if unknown:
        logger.debug("Skipped %d route endpoint ids missing from the airport table", len(unknown))
    logger.info("%d airports reached a degree of %d", len(hubs), hub_threshold)
    return hubs


def calculate_degree2(
    airports: MutableMapping[str, Airport], adjacency: Mapping[str, Sequence[str]]
) -> None:
    """Set ``degree2`` to the number of distinct airports exactly two hops away.

    ``adjacency`` is expected to be the mirrored variant. Airports that are
    already direct neighbors, and the airport itself, are not counted.
    """
    for airport_id, airport in airports.items():
        direct = adjacency.get(airport_id, [])
        second: Set[str] = set()
        for neighbor in direct:
            for candidate in adjacency.get(neighbor, []):
                if candidate != airport_id and candidate not in direct:
                    second.add(candidate)
        airport.degree2 = len(second)


def degree_map(airports: Mapping[str, Airport], field: str = "degree") -> Dict[str, int]:
    """Collect ``{airport id: degree}`` for either counter."""
    if field not in _DEGREE_FIELDS:
        raise ValueError(f"Unknown degree field {field!r}; expected one of {_DEGREE_FIELDS}")
    return {airport_id: int(getattr(airport, field)) for airport_id, airport in airports.items()}


def reset_degrees(airports: MutableMapping[str, Airport]) -> None:
    """Zero both counters so a fresh analysis does not add to a previous one."""
    for airport in airports.values():
        airport.degree = 0
        airport.degree2 = 0
