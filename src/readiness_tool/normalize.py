"""Normalización de la serie diaria cruda."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from readiness_tool.model import NormalizedRecord, RawWellnessRecord

logger = logging.getLogger(__name__)


def normalize_records(raw: Iterable[RawWellnessRecord]) -> list[NormalizedRecord]:
    """Keep the scorable days, one per date, ascending by date.

    A later record for the same date replaces an earlier one before the
    presence filter runs. Days without HRV or resting heart rate are dropped.

    Args:
        raw: Daily records in any order.

    Returns:
        Normalized records sorted by date.
    """
    by_date: dict[str, RawWellnessRecord] = {}
    for record in raw:
        if record.date in by_date:
            logger.debug("Duplicate wellness date %s, keeping last", record.date)
        by_date[record.date] = record

    out: list[NormalizedRecord] = []
    for day in sorted(by_date):
        record = by_date[day]
        if record.hrv is None or record.resting_heart_rate is None:
            logger.debug("Skipping %s: missing HRV or resting HR", day)
            continue
        out.append(
            NormalizedRecord(
                date=record.date,
                hrv=float(record.hrv),
                resting_heart_rate=float(record.resting_heart_rate),
                sleep_hours=_optional_float(record.sleep_hours),
                sleep_score=_optional_float(record.sleep_score),
                training_load=float(record.training_load or 0.0),
            )
        )
    return out


def _optional_float(value: float | None) -> float | None:
    return None if value is None else float(value)
