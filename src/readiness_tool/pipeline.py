"""Pipeline de readiness: normalizar, estadísticas, línea base, puntaje, severidad."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import asdict

import pandas as pd

from readiness_tool.baseline import rolling_baselines
from readiness_tool.config import DEFAULT_CONFIG, ReadinessConfig
from readiness_tool.model import RawWellnessRecord, ScoredRecord
from readiness_tool.normalize import normalize_records
from readiness_tool.scoring import readiness_score, sleep_data_missing
from readiness_tool.severity import classify_severity
from readiness_tool.stats import hrv_population_stats

logger = logging.getLogger(__name__)

MIN_RECORDS = 2

SCORED_COLUMNS = [
    "date",
    "hrv",
    "baseline_hrv",
    "z_hrv",
    "resting_heart_rate",
    "baseline_resting_heart_rate",
    "sleep_hours",
    "sleep_score",
    "training_load",
    "readiness",
    "severity",
    "sleep_data_missing",
]


def score_wellness(
    raw: Iterable[RawWellnessRecord],
    config: ReadinessConfig = DEFAULT_CONFIG,
) -> list[ScoredRecord]:
    """Score a daily wellness series.

    The input is not modified and no state is kept between calls.

    Args:
        raw: Daily records in any order.
        config: Algorithm tunables.

    Returns:
        One scored record per day with HRV and resting heart rate, ascending
        by date. Empty when fewer than two such days exist.
    """
    records = normalize_records(raw)
    if len(records) < MIN_RECORDS:
        logger.info(
            "Not enough scorable days (%d < %d), nothing to score",
            len(records),
            MIN_RECORDS,
        )
        return []

    stats = hrv_population_stats(records)
    baselines = rolling_baselines(records, config.baseline_window)

    out: list[ScoredRecord] = []
    for i, (record, baseline) in enumerate(zip(records, baselines)):
        previous = records[i - 1] if i > 0 else None
        readiness = readiness_score(record, baseline, previous, config)
        out.append(
            ScoredRecord(
                **asdict(record),
                z_hrv=stats.z_score(record.hrv),
                baseline_hrv=baseline.hrv,
                baseline_resting_heart_rate=baseline.resting_heart_rate,
                readiness=readiness,
                sleep_data_missing=sleep_data_missing(record),
                severity=classify_severity(readiness, config),
            )
        )
    logger.debug("Scored %d days (%s .. %s)", len(out), out[0].date, out[-1].date)
    return out


def latest(records: Sequence[ScoredRecord]) -> ScoredRecord | None:
    """Most recent scored day, or None when nothing was scored."""
    return records[-1] if records else None


def scored_to_frame(records: Sequence[ScoredRecord]) -> pd.DataFrame:
    """Convert scored records to a DataFrame ordered by date."""
    if not records:
        return pd.DataFrame(columns=SCORED_COLUMNS)
    df = pd.DataFrame([asdict(r) for r in records])
    return df[SCORED_COLUMNS].sort_values("date").reset_index(drop=True)
