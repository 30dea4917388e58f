from __future__ import annotations

import pytest

from readiness_tool.config import ReadinessConfig
from readiness_tool.model import ScoredRecord
from readiness_tool.severity import classify_severity, diagnosis


@pytest.mark.parametrize(
    ("readiness", "expected"),
    [
        (0, "critical"),
        (44, "critical"),
        (45, "warning"),
        (64, "warning"),
        (65, "normal"),
        (66, "normal"),
        (100, "normal"),
    ],
)
def test_classify_severity_cut_points(readiness: int, expected: str) -> None:
    assert classify_severity(readiness) == expected


def test_classify_severity_custom_cut_points() -> None:
    config = ReadinessConfig(critical_below=30, warning_below=50)
    assert classify_severity(44, config) == "warning"
    assert classify_severity(50, config) == "normal"


def _scored(readiness: int, severity: str, sleep_missing: bool) -> ScoredRecord:
    return ScoredRecord(
        date="2025-12-15",
        hrv=50.0,
        resting_heart_rate=50.0,
        sleep_hours=None if sleep_missing else 8.0,
        sleep_score=None,
        training_load=0.0,
        z_hrv=0.0,
        baseline_hrv=50.0,
        baseline_resting_heart_rate=50.0,
        readiness=readiness,
        sleep_data_missing=sleep_missing,
        severity=severity,  # type: ignore[arg-type]
    )


def test_diagnosis_keys() -> None:
    assert diagnosis(_scored(30, "critical", False)) == "critical"
    assert diagnosis(_scored(50, "warning", False)) == "warning"
    assert diagnosis(_scored(90, "normal", False)) == "optimal"
    assert diagnosis(_scored(90, "normal", True)) == "partial"
