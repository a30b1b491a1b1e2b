"""Descriptive statistics over a degree map."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Mapping, Sequence, Tuple

import numpy as np
import pandas as pd

PERCENTILE_THRESHOLDS: Tuple[int, ...] = (100, 250, 500, 750, 1000, 1250, 1500, 1750, 2000)

PercentileBucket = Tuple[int, float]


@dataclass(frozen=True)
class DegreeStatistics:
    """Summary of a degree distribution.

    ``median`` stays an integer: for an even number of values it is the
    floor of the mean of the two middle values. ``percentiles`` pairs each
    threshold with the share of airports (in percent) whose degree is at most
    that threshold but above the previous one.
    """

    minimum: int = 0
    maximum: int = 0
    mean: float = 0.0
    median: int = 0
    percentiles: List[PercentileBucket] = field(default_factory=list)
    count: int = 0

    @property
    def is_empty(self) -> bool:
        return self.count == 0

    def as_tuple(self) -> Tuple[int, int, float, int, List[PercentileBucket]]:
        return self.minimum, self.maximum, self.mean, self.median, list(self.percentiles)

    def to_frame(self) -> pd.DataFrame:
        """Percentile buckets as a two-column table."""
        return pd.DataFrame(self.percentiles, columns=["threshold", "percent"])


def calculate_statistics(
    degrees: Mapping[str, int], thresholds: Sequence[int] = PERCENTILE_THRESHOLDS
) -> DegreeStatistics:
    """Return min/max/mean/median and incremental percentile buckets for ``degrees``."""
    ordered_thresholds = sorted(int(t) for t in thresholds)
    if not degrees:
        return DegreeStatistics(
            percentiles=[(threshold, 0.0) for threshold in ordered_thresholds],
        )

    values = np.sort(np.fromiter((int(v) for v in degrees.values()), dtype=np.int64))
    count = int(values.size)
    mid = count // 2
    if count % 2 == 0:
        median = (int(values[mid - 1]) + int(values[mid])) // 2
    else:
        median = int(values[mid])

    return DegreeStatistics(
        minimum=int(values[0]),
        maximum=int(values[-1]),
        mean=float(values.sum()) / count,
        median=median,
        percentiles=_incremental_percentiles(values, ordered_thresholds),
        count=count,
    )


def _incremental_percentiles(
    sorted_values: np.ndarray, thresholds: Sequence[int]
) -> List[PercentileBucket]:
    total = sorted_values.size
    buckets: List[PercentileBucket] = []
    previous = 0.0
    for threshold in thresholds:
        at_or_below = int(np.searchsorted(sorted_values, threshold, side="right"))
        cumulative = at_or_below / total * 100.0
        buckets.append((threshold, cumulative - previous))
        previous = cumulative
    return buckets
