"""Clasificación de severidad y clave de diagnóstico."""

from __future__ import annotations

from typing import Literal

from readiness_tool.config import DEFAULT_CONFIG, ReadinessConfig
from readiness_tool.model import ScoredRecord, Severity

Diagnosis = Literal["partial", "critical", "warning", "optimal"]

_DIAGNOSIS_BY_SEVERITY: dict[str, Diagnosis] = {
    "critical": "critical",
    "warning": "warning",
    "normal": "optimal",
}


def classify_severity(
    readiness: int, config: ReadinessConfig = DEFAULT_CONFIG
) -> Severity:
    """Bucket a readiness score; lower bounds are inclusive (45 is warning)."""
    if readiness < config.critical_below:
        return "critical"
    if readiness < config.warning_below:
        return "warning"
    return "normal"


def diagnosis(record: ScoredRecord) -> Diagnosis:
    """Diagnosis key for a day; restricted-mode days are always ``partial``."""
    if record.sleep_data_missing:
        return "partial"
    return _DIAGNOSIS_BY_SEVERITY[record.severity]
