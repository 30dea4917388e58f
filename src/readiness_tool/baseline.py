"""Líneas base móviles (ventana previa) de HRV y FC en reposo."""

from __future__ import annotations

import statistics
from collections.abc import Sequence
from dataclasses import dataclass

from readiness_tool.model import NormalizedRecord


@dataclass(frozen=True)
class Baseline:
    """Trailing means ending the day before the record."""

    hrv: float
    resting_heart_rate: float


def baseline_at(
    records: Sequence[NormalizedRecord], index: int, window: int = 7
) -> Baseline:
    """Baseline for ``records[index]`` from up to ``window`` prior records.

    The current record is never part of its own window. With no prior
    records the baseline is the record's own values.

    Args:
        records: Normalized records sorted by date.
        index: Position of the record to compute the baseline for.
        window: Maximum number of preceding records to average.

    Returns:
        Baseline HRV and resting heart rate.
    """
    current = records[index]
    prior = records[max(0, index - window) : index]
    if not prior:
        return Baseline(hrv=current.hrv, resting_heart_rate=current.resting_heart_rate)
    return Baseline(
        hrv=statistics.fmean(r.hrv for r in prior),
        resting_heart_rate=statistics.fmean(r.resting_heart_rate for r in prior),
    )


def rolling_baselines(
    records: Sequence[NormalizedRecord], window: int = 7
) -> list[Baseline]:
    """Baseline for every record, in sequence order."""
    return [baseline_at(records, i, window) for i in range(len(records))]
