from __future__ import annotations

from readiness_tool.model import RawWellnessRecord
from readiness_tool.normalize import normalize_records


def test_normalize_empty() -> None:
    assert normalize_records([]) == []


def test_normalize_sorts_and_drops_incomplete_days() -> None:
    raw = [
        RawWellnessRecord(date="2025-12-17", hrv=40.0, resting_heart_rate=52.0),
        RawWellnessRecord(date="2025-12-15", hrv=50.0, resting_heart_rate=50.0),
        RawWellnessRecord(date="2025-12-16", hrv=None, resting_heart_rate=51.0),
        RawWellnessRecord(date="2025-12-18", hrv=45.0, resting_heart_rate=None),
    ]
    out = normalize_records(raw)
    assert [r.date for r in out] == ["2025-12-15", "2025-12-17"]


def test_normalize_zero_hrv_is_a_measurement() -> None:
    out = normalize_records(
        [RawWellnessRecord(date="2025-12-15", hrv=0.0, resting_heart_rate=50.0)]
    )
    assert len(out) == 1
    assert out[0].hrv == 0.0


def test_normalize_duplicate_date_keeps_last_supplied() -> None:
    raw = [
        RawWellnessRecord(date="2025-12-15", hrv=50.0, resting_heart_rate=50.0),
        RawWellnessRecord(date="2025-12-15", hrv=60.0, resting_heart_rate=48.0),
    ]
    out = normalize_records(raw)
    assert len(out) == 1
    assert out[0].hrv == 60.0
    assert out[0].resting_heart_rate == 48.0


def test_normalize_last_duplicate_without_hrv_drops_the_day() -> None:
    raw = [
        RawWellnessRecord(date="2025-12-15", hrv=50.0, resting_heart_rate=50.0),
        RawWellnessRecord(date="2025-12-15", hrv=None, resting_heart_rate=48.0),
    ]
    assert normalize_records(raw) == []


def test_normalize_training_load_defaults_to_zero() -> None:
    out = normalize_records(
        [
            RawWellnessRecord(
                date="2025-12-15", hrv=50.0, resting_heart_rate=50.0, training_load=None
            ),
            RawWellnessRecord(date="2025-12-16", hrv=50.0, resting_heart_rate=50.0),
        ]
    )
    assert [r.training_load for r in out] == [0.0, 0.0]


def test_normalize_does_not_mutate_input() -> None:
    raw = [
        RawWellnessRecord(date="2025-12-16", hrv=45.0, resting_heart_rate=50.0),
        RawWellnessRecord(date="2025-12-15", hrv=50.0, resting_heart_rate=50.0),
    ]
    snapshot = list(raw)
    normalize_records(raw)
    assert raw == snapshot
