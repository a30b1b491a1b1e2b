"""Statistics package exports."""

from .degree_statistics import PERCENTILE_THRESHOLDS, DegreeStatistics, calculate_statistics

__all__ = ["DegreeStatistics", "PERCENTILE_THRESHOLDS", "calculate_statistics"]
