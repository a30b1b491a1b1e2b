"""Loaders for the airport and route CSV exports.

Airports CSV::

    Label,ID,Latitude,Longitude
    Goroka Airport,1,-6.081689834590001,145.391998291

Routes CSV::

    Departure,Destination
    2965,2990

Coordinates are optional. Ids and labels are always read as strings; only empty
cells count as missing, so values such as ``NA`` or ``null`` are kept verbatim.
"""

from __future__ import annotations

import logging
import math
from pathlib import Path
from typing import Dict, List, Optional, Sequence

import pandas as pd

from airnet.network.domain_types import Airport, Route

logger = logging.getLogger(__name__)

AIRPORT_COLUMNS: Sequence[str] = ["Label", "ID", "Latitude", "Longitude"]
AIRPORT_OPTIONAL_COLUMNS = {"Latitude", "Longitude"}
ROUTE_COLUMNS: Sequence[str] = ["Departure", "Destination"]


def load_airports(path: str | Path) -> Dict[str, Airport]:
    """Return airports keyed by id with both degree counters at zero."""
    df = _read_csv(
        path, AIRPORT_COLUMNS, optional=AIRPORT_OPTIONAL_COLUMNS, text_columns=["Label", "ID"]
    )
    airports: Dict[str, Airport] = {}
    for row in df.itertuples(index=False):
        airport_id = _normalize_id(getattr(row, "ID"))
        if not airport_id:
            continue
        name = getattr(row, "Label")
        airports[airport_id] = Airport(
            id=airport_id,
            name="" if _is_missing(name) else str(name),
            latitude=_to_coordinate(getattr(row, "Latitude", None)),
            longitude=_to_coordinate(getattr(row, "Longitude", None)),
        )
    if not airports:
        logger.warning("Airport table at %s is empty", path)
    logger.info("Loaded %d airports from %s", len(airports), path)
    return airports


def load_routes(path: str | Path) -> List[Route]:
    """Return routes in file order."""
    df = _read_csv(path, ROUTE_COLUMNS, text_columns=ROUTE_COLUMNS)
    routes: List[Route] = []
    for row in df.itertuples(index=False):
        departure = _normalize_id(getattr(row, "Departure"))
        destination = _normalize_id(getattr(row, "Destination"))
        if not departure or not destination:
            continue
        routes.append(Route(departure_id=departure, destination_id=destination))
    if not routes:
        logger.warning("Route table at %s is empty", path)
    logger.info("Loaded %d routes from %s", len(routes), path)
    return routes


def _read_csv(
    path: str | Path,
    columns: Sequence[str],
    *,
    optional: Sequence[str] = (),
    text_columns: Sequence[str] = (),
) -> pd.DataFrame:
    csv_path = Path(path)
    if not csv_path.exists():
        raise FileNotFoundError(f"CSV not found at {csv_path}")
    header = pd.read_csv(csv_path, nrows=0)
    available = set(header.columns)
    missing = [c for c in columns if c not in available and c not in optional]
    if missing:
        raise ValueError(f"{csv_path} is missing required columns: {', '.join(missing)}")
    return pd.read_csv(
        csv_path,
        usecols=[c for c in columns if c in available],
        dtype={column: str for column in text_columns},
        keep_default_na=False,
        na_values=[""],
        skipinitialspace=True,
    )


def _is_missing(value: object) -> bool:
    return value is None or (isinstance(value, float) and pd.isna(value))


def _normalize_id(value: object) -> str:
    if _is_missing(value):
        return ""
    return str(value).strip()


def _to_coordinate(value: object) -> Optional[float]:
    if _is_missing(value) or value == "":
        return None
    try:
        numeric = float(value)
    except (TypeError, ValueError):
        return None
    return numeric if math.isfinite(numeric) else None
