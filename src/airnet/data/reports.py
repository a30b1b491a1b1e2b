"""Report writers for degree rankings."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Mapping

import pandas as pd

from airnet.network.domain_types import Airport

logger = logging.getLogger(__name__)

DEFAULT_RANKING_FILENAME = "Ranked Busiest Airports in the World by Degrees.csv"


def rank_airports(airports: Mapping[str, Airport]) -> pd.DataFrame:
    """Airports ordered by first-degree connectivity, busiest first."""
    rows = [
        {
            "ID": airport_id,
            "Name": airport.name,
            "Degree": int(airport.degree),
            "Degree2": int(airport.degree2),
        }
        for airport_id, airport in airports.items()
    ]
    df = pd.DataFrame(rows, columns=["ID", "Name", "Degree", "Degree2"])
    df.sort_values("Degree", ascending=False, inplace=True, kind="mergesort")
    df.reset_index(drop=True, inplace=True)
    return df


def write_degree_ranking(airports: Mapping[str, Airport], path: str | Path) -> Path:
    output_path = Path(path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    ranking = rank_airports(airports)
    ranking.to_csv(output_path, index=False)
    logger.info("Wrote degree ranking for %d airports to %s", len(ranking), output_path)
    return output_path
