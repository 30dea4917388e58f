"""Parámetros ajustables del algoritmo de readiness."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ReadinessConfig:
    """Tunables of the readiness pipeline.

    The defaults are the published constants; changing any of them changes
    every score downstream.
    """

    baseline_window: int = 7
    hrv_exponent: float = 1.4
    rhr_tolerance_bpm: float = 1.0
    rhr_penalty_factor: float = 2.5
    sleep_hours_target: float = 7.0
    sleep_hours_penalty_factor: float = 12.0
    sleep_score_threshold: float = 60.0
    sleep_score_penalty: float = 10.0
    trend_penalty: float = 8.0
    critical_below: int = 45
    warning_below: int = 65
    score_min: float = 0.0
    score_max: float = 100.0
    # False compares against the previous record even across missing days.
    neutral_trend_across_gaps: bool = False


DEFAULT_CONFIG = ReadinessConfig()
