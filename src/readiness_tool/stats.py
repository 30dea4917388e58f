"""Estadísticas poblacionales de HRV sobre toda la serie."""

from __future__ import annotations

import statistics
from collections.abc import Sequence
from dataclasses import dataclass

from readiness_tool.model import NormalizedRecord


@dataclass(frozen=True)
class PopulationStats:
    """Whole-series mean and population standard deviation of HRV."""

    mean: float
    std: float

    def z_score(self, value: float) -> float:
        """Z-score of ``value``; a constant series divides by 1."""
        return (value - self.mean) / (self.std or 1.0)


def hrv_population_stats(records: Sequence[NormalizedRecord]) -> PopulationStats:
    """Compute mean and standard deviation (divisor = count) of ``hrv``.

    An empty sequence yields ``PopulationStats(0.0, 0.0)``.
    """
    if not records:
        return PopulationStats(mean=0.0, std=0.0)
    values = [r.hrv for r in records]
    mean = statistics.fmean(values)
    return PopulationStats(mean=mean, std=statistics.pstdev(values, mu=mean))
