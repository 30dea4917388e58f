"""CLI para calcular readiness desde una exportación de wellness de intervals.icu."""

from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence
from dataclasses import replace
from datetime import datetime, timedelta
from pathlib import Path

from dateutil import parser as date_parser
from dateutil import tz

from readiness_tool.config import DEFAULT_CONFIG
from readiness_tool.excel_writer import ExcelLayout, write_readiness_xlsx
from readiness_tool.model import RawWellnessRecord
from readiness_tool.pipeline import latest, score_wellness, scored_to_frame
from readiness_tool.severity import diagnosis
from readiness_tool.sources.intervals import IntervalsPaths, IntervalsWellnessSource

_LOCAL_TZ = tz.gettz("Europe/Madrid")

logger = logging.getLogger(__name__)


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Returns:
        Parsed argparse namespace.
    """
    parser = argparse.ArgumentParser(
        description="Readiness diario desde wellness de intervals.icu."
    )
    parser.add_argument(
        "--base-dir",
        default=str(Path.home() / "proyectos" / "readiness"),
        help="Directorio base (default: ~/proyectos/readiness).",
    )
    parser.add_argument(
        "--input",
        default=None,
        help="Archivo JSON de wellness (default: el más reciente en base/wellness).",
    )
    parser.add_argument(
        "--days",
        type=int,
        default=30,
        help="Días hacia atrás desde el último registro (default: 30).",
    )
    parser.add_argument(
        "--output-dir",
        default=None,
        help="Directorio de salida (default: base/salidas).",
    )
    parser.add_argument(
        "--strict-gaps",
        action="store_true",
        help="Sin penalización de tendencia cuando falta el día anterior.",
    )
    parser.add_argument("--verbose", action="store_true", help="Log DEBUG.")
    return parser.parse_args(argv)


def recent_records(
    records: Sequence[RawWellnessRecord], days: int
) -> list[RawWellnessRecord]:
    """Keep records within ``days`` of the newest parseable date.

    Records whose date cannot be parsed are kept as they are.
    """
    if days <= 0 or not records:
        return list(records)
    parsed = {r.date: _parse_day(r.date) for r in records}
    known = [d for d in parsed.values() if d is not None]
    if not known:
        return list(records)
    oldest = max(known) - timedelta(days=days)
    return [r for r in records if parsed[r.date] is None or parsed[r.date] >= oldest]


def _parse_day(value: str) -> datetime | None:
    try:
        return date_parser.isoparse(value)
    except (ValueError, OverflowError):
        logger.debug("Unparseable wellness date %r", value)
        return None


def main(argv: Sequence[str] | None = None) -> int:
    """Run the readiness CLI.

    Returns:
        Exit code (0 on success).
    """
    ns = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if ns.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    base = Path(ns.base_dir).expanduser().resolve()

    source = IntervalsWellnessSource(IntervalsPaths(root=base / "wellness"))
    if ns.input:
        wellness_file = Path(ns.input).expanduser().resolve()
    else:
        source.validate()
        wellness_file = source.newest_json()

    raw = recent_records(source.load_records(wellness_file), ns.days)
    config = replace(DEFAULT_CONFIG, neutral_trend_across_gaps=ns.strict_gaps)
    scored = score_wellness(raw, config)

    print(f"OK: Wellness file: {wellness_file}")
    print(f"OK: Days read: {len(raw)}")

    last = latest(scored)
    if last is None:
        print("Sin datos suficientes para calcular readiness (mínimo 2 días).")
        return 0

    out_dir = Path(ns.output_dir).expanduser() if ns.output_dir else base / "salidas"
    ts = datetime.now(tz=_LOCAL_TZ).strftime("%Y-%m-%d_%H-%M-%S")
    out_path = out_dir / f"readiness_diaria_{ts}.xlsx"
    write_readiness_xlsx(scored_to_frame(scored), out_path, ExcelLayout())

    print(f"OK: Days scored: {len(scored)}")
    print(
        f"OK: Latest {last.date}: readiness {last.readiness} "
        f"({last.severity}, {diagnosis(last)})"
    )
    if last.sleep_data_missing:
        print("Aviso: modo restringido, sin datos de sueño para el último día.")
    print(f"OK: Output: {out_path}")
    return 0
