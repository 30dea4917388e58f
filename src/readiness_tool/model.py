"""Modelos tipados para registros diarios de bienestar y readiness."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

Severity = Literal["normal", "warning", "critical"]


@dataclass(frozen=True)
class RawWellnessRecord:
    """One day of wellness data as supplied by the tracking service.

    ``None`` means "not measured". A missing training load is a rest day.
    """

    date: str
    hrv: float | None = None
    resting_heart_rate: float | None = None
    sleep_hours: float | None = None
    sleep_score: float | None = None
    training_load: float | None = 0.0


@dataclass(frozen=True)
class NormalizedRecord:
    """A day with both HRV and resting heart rate present."""

    date: str
    hrv: float
    resting_heart_rate: float
    sleep_hours: float | None
    sleep_score: float | None
    training_load: float


@dataclass(frozen=True)
class ScoredRecord(NormalizedRecord):
    """A normalized day plus its baselines, readiness and severity."""

    z_hrv: float
    baseline_hrv: float
    baseline_resting_heart_rate: float
    readiness: int
    sleep_data_missing: bool
    severity: Severity
