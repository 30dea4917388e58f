"""Puntaje compuesto de readiness (HRV, FC en reposo, sueño, tendencia)."""

from __future__ import annotations

import math
from datetime import date, timedelta

from readiness_tool.baseline import Baseline
from readiness_tool.config import DEFAULT_CONFIG, ReadinessConfig
from readiness_tool.model import NormalizedRecord


def sleep_data_missing(record: NormalizedRecord) -> bool:
    """True when neither sleep duration nor sleep score was measured."""
    return record.sleep_hours is None and record.sleep_score is None


def hrv_component(
    record: NormalizedRecord,
    baseline: Baseline,
    config: ReadinessConfig = DEFAULT_CONFIG,
) -> float:
    """Base score from the HRV ratio to baseline, superlinear in the ratio.

    A zero baseline gives a neutral ratio for zero HRV and an unbounded one
    otherwise; the clamp in ``readiness_score`` caps it.
    """
    if baseline.hrv == 0:
        ratio = 1.0 if record.hrv == 0 else math.inf
    else:
        ratio = record.hrv / baseline.hrv
    return ratio**config.hrv_exponent * 100


def rhr_penalty(
    record: NormalizedRecord,
    baseline: Baseline,
    config: ReadinessConfig = DEFAULT_CONFIG,
) -> float:
    """Penalty for resting heart rate above baseline; never a bonus."""
    diff = record.resting_heart_rate - baseline.resting_heart_rate
    if diff > config.rhr_tolerance_bpm:
        return diff * config.rhr_penalty_factor
    return 0.0


def sleep_penalty(
    record: NormalizedRecord, config: ReadinessConfig = DEFAULT_CONFIG
) -> float:
    """Short sleep and poor sleep quality penalties, applied independently."""
    if sleep_data_missing(record):
        return 0.0
    penalty = 0.0
    if record.sleep_hours is not None and record.sleep_hours < config.sleep_hours_target:
        penalty += (
            config.sleep_hours_target - record.sleep_hours
        ) * config.sleep_hours_penalty_factor
    if (
        record.sleep_score is not None
        and record.sleep_score < config.sleep_score_threshold
    ):
        penalty += config.sleep_score_penalty
    return penalty


def trend_penalty(
    record: NormalizedRecord,
    baseline: Baseline,
    previous: NormalizedRecord | None,
    config: ReadinessConfig = DEFAULT_CONFIG,
) -> float:
    """Flat penalty when HRV drops from the previous record and sits below baseline.

    ``previous`` is the preceding record in the sequence, whatever its date.
    """
    hrv_yesterday = record.hrv
    if previous is not None:
        if not config.neutral_trend_across_gaps or _is_previous_day(previous, record):
            hrv_yesterday = previous.hrv
    if record.hrv < hrv_yesterday and record.hrv < baseline.hrv:
        return config.trend_penalty
    return 0.0


def raw_score(
    record: NormalizedRecord,
    baseline: Baseline,
    previous: NormalizedRecord | None,
    config: ReadinessConfig = DEFAULT_CONFIG,
) -> float:
    """Unclamped composite score."""
    score = hrv_component(record, baseline, config)
    score -= rhr_penalty(record, baseline, config)
    score -= sleep_penalty(record, config)
    score -= trend_penalty(record, baseline, previous, config)
    return score


def readiness_score(
    record: NormalizedRecord,
    baseline: Baseline,
    previous: NormalizedRecord | None,
    config: ReadinessConfig = DEFAULT_CONFIG,
) -> int:
    """Composite score clamped to the configured range, rounded half up."""
    score = raw_score(record, baseline, previous, config)
    clamped = max(config.score_min, min(config.score_max, score))
    return int(math.floor(clamped + 0.5))


def _is_previous_day(previous: NormalizedRecord, record: NormalizedRecord) -> bool:
    try:
        prev_day = date.fromisoformat(previous.date[:10])
        day = date.fromisoformat(record.date[:10])
    except ValueError:
        # Fechas no ISO: se conserva la comparación posicional.
        return True
    return day - prev_day == timedelta(days=1)
