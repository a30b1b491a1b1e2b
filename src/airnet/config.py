from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Dict, List, Mapping, Optional, Sequence

import yaml

from airnet.data.reports import DEFAULT_RANKING_FILENAME
from airnet.network.degrees import HUB_DEGREE_THRESHOLD
from airnet.stats.degree_statistics import PERCENTILE_THRESHOLDS

logger = logging.getLogger(__name__)


def _coerce_thresholds(raw: object) -> List[int]:
    """
    Validate the percentile threshold list.

    Args:
        raw: Value read from the configuration.
    Returns:
        Thresholds as ints, sorted ascending.
    """
    if isinstance(raw, (str, bytes)) or not isinstance(raw, Sequence):
        raise TypeError("'percentile_thresholds' must be a list of integers")
    if not raw:
        raise ValueError("'percentile_thresholds' cannot be empty")
    thresholds: List[int] = []
    for value in raw:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise TypeError(f"Percentile threshold must be numeric: {value!r}")
        if value < 0:
            raise ValueError(f"Percentile threshold must be non-negative: {value!r}")
        thresholds.append(int(value))
    ordered = sorted(thresholds)
    if ordered != thresholds:
        logger.warning("Percentile thresholds were not ascending; sorting %s", thresholds)
    return ordered


def _coerce_hub_threshold(raw: object) -> int:
    if isinstance(raw, bool) or not isinstance(raw, (int, float)):
        raise TypeError(f"'hub_threshold' must be an integer: {raw!r}")
    value = int(raw)
    if value <= 0:
        raise ValueError("'hub_threshold' must be positive")
    return value


def _optional_path(data: Mapping[str, object], key: str) -> Optional[str]:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, str) or not value.strip():
        raise TypeError(f"'{key}' must be a non-empty path string")
    return value.strip()


@dataclass
class AnalysisConfig:
    airports_csv: Optional[str] = None
    routes_csv: Optional[str] = None
    ranking_csv: str = DEFAULT_RANKING_FILENAME
    hub_threshold: int = HUB_DEGREE_THRESHOLD
    percentile_thresholds: List[int] = field(default_factory=lambda: list(PERCENTILE_THRESHOLDS))

    def __post_init__(self) -> None:
        self.hub_threshold = _coerce_hub_threshold(self.hub_threshold)
        self.percentile_thresholds = _coerce_thresholds(self.percentile_thresholds)

    @classmethod
    def from_mapping(cls, data: Mapping[str, object]) -> "AnalysisConfig":
        if not isinstance(data, Mapping):
            raise TypeError("Analysis config must contain a mapping at the top level")
        unknown = set(data.keys()) - {
            "airports_csv",
            "routes_csv",
            "ranking_csv",
            "hub_threshold",
            "percentile_thresholds",
        }
        if unknown:
            logger.warning("Ignoring unknown analysis config keys: %s", ", ".join(sorted(unknown)))
        kwargs: Dict[str, object] = {
            "airports_csv": _optional_path(data, "airports_csv"),
            "routes_csv": _optional_path(data, "routes_csv"),
        }
        ranking = _optional_path(data, "ranking_csv")
        if ranking is not None:
            kwargs["ranking_csv"] = ranking
        if data.get("hub_threshold") is not None:
            kwargs["hub_threshold"] = data["hub_threshold"]
        if data.get("percentile_thresholds") is not None:
            kwargs["percentile_thresholds"] = data["percentile_thresholds"]
        return cls(**kwargs)

    @classmethod
    def from_yaml(cls, path: str | Path) -> "AnalysisConfig":
        config_path = Path(path)
        if not config_path.exists():
            raise FileNotFoundError(f"Analysis config YAML not found at {config_path}")
        with config_path.open("r", encoding="utf-8") as handle:
            data = yaml.safe_load(handle) or {}
        return cls.from_mapping(data)

    def to_yaml(self, path: str | Path) -> None:
        output: Dict[str, object] = {
            "ranking_csv": self.ranking_csv,
            "hub_threshold": int(self.hub_threshold),
            "percentile_thresholds": [int(t) for t in self.percentile_thresholds],
        }
        if self.airports_csv is not None:
            output["airports_csv"] = self.airports_csv
        if self.routes_csv is not None:
            output["routes_csv"] = self.routes_csv
        dest = Path(path)
        dest.parent.mkdir(parents=True, exist_ok=True)
        with dest.open("w", encoding="utf-8") as handle:
            yaml.safe_dump(output, handle, sort_keys=True)

    def with_overrides(self, **overrides: object) -> "AnalysisConfig":
        """Return a copy where every non-``None`` override replaces the stored value."""
        changes = {key: value for key, value in overrides.items() if value is not None}
        return replace(self, **changes)


__all__ = ["AnalysisConfig"]
