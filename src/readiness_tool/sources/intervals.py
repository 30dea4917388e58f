"""Lectura de exportaciones JSON de wellness de intervals.icu."""

from __future__ import annotations

import json
import logging
import math
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from readiness_tool.model import RawWellnessRecord
from readiness_tool.sources.base import SourcePaths, WellnessSource

logger = logging.getLogger(__name__)

_SECONDS_PER_HOUR = 3600.0


@dataclass(frozen=True)
class IntervalsPaths(SourcePaths):
    """Paths for intervals.icu wellness exports."""

    # root: folder containing wellness*.json


class IntervalsWellnessSource(WellnessSource):
    """intervals.icu wellness JSON reader."""

    export_glob = "wellness*.json"

    def validate(self) -> None:
        """Validate that the export directory exists."""
        if not self._paths.root.exists():
            raise FileNotFoundError(str(self._paths.root))

    def load_records(self, path: Path) -> list[RawWellnessRecord]:
        """Parse a wellness export into raw daily records.

        Args:
            path: Path to JSON file.

        Returns:
            Raw records sorted by date.

        Raises:
            ValueError: If JSON shape is invalid.
        """
        text = path.read_text(encoding="utf-8")
        raw = _extract_json_list(text)
        if not isinstance(raw, list):
            raise ValueError("Wellness JSON must be a list")

        out: list[RawWellnessRecord] = []
        skipped = 0
        for item in raw:
            record = item_to_record(item)
            if record is None:
                skipped += 1
                continue
            out.append(record)
        if skipped:
            logger.warning("Skipped %d wellness items without a date", skipped)
        out.sort(key=lambda r: r.date)
        return out


def item_to_record(item: Any) -> RawWellnessRecord | None:
    """Convierte un ítem de la API en RawWellnessRecord; None si no tiene id.

    Los valores vacíos o en cero del proveedor se toman como "no medido",
    salvo la carga de entrenamiento, que vale 0.
    """
    if not isinstance(item, dict):
        return None
    day = item.get("id")
    if not isinstance(day, str) or not day.strip():
        return None
    sleep_secs = _measured(item.get("sleepSecs"))
    return RawWellnessRecord(
        date=day.strip()[:10],
        hrv=_measured(item.get("hrv")),
        resting_heart_rate=_measured(item.get("restingHR")),
        sleep_hours=None if sleep_secs is None else sleep_secs / _SECONDS_PER_HOUR,
        sleep_score=_measured(item.get("sleepScore")),
        training_load=_measured(item.get("trainingLoad")) or 0.0,
    )


def _measured(value: Any) -> float | None:
    """Número del proveedor, o None si falta, es cero o no es numérico."""
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if math.isnan(number):
        return None
    return number or None


def _extract_json_list(text: str) -> Any:
    """Extract JSON array from text, tolerating leading non-JSON (e.g. log lines)."""
    start = text.find("[")
    if start >= 0:
        return json.loads(text[start:])
    return json.loads(text)
