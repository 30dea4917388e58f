"""Generación de Excel formateado con la serie de readiness."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import pandas as pd
from openpyxl.styles import Alignment, Border, Font, PatternFill, Side

_DIA_SEMANA: tuple[str, ...] = ("lun", "mar", "mie", "jue", "vie", "sab", "dom")

_HEADER_MAP: dict[str, str] = {
    "weekday": "Día",
    "date": "Fecha",
    "hrv": "HRV (ms)",
    "baseline_hrv": "Base HRV 7d",
    "z_hrv": "HRV (z)",
    "resting_heart_rate": "FC reposo\n(bpm)",
    "baseline_resting_heart_rate": "Base FC 7d",
    "sleep_hours": "Sueño (h)",
    "sleep_score": "Calidad\nsueño",
    "training_load": "Carga",
    "readiness": "Readiness",
    "severity": "Severidad",
    "sleep_data_missing": "Sin datos\nsueño",
}

_SEVERITY_FILLS: dict[str, str] = {
    "critical": "F8C8D0",
    "warning": "FCE7B2",
    "normal": "C8F0DC",
}

_THIN = Side(style="thin")
_BORDER = Border(left=_THIN, right=_THIN, top=_THIN, bottom=_THIN)
_CENTER = Alignment(horizontal="center", vertical="center", wrap_text=True)
_HEADER_FILL = PatternFill(fill_type="solid", start_color="D9D9D9", end_color="D9D9D9")

_COLUMN_WIDTHS: dict[str, int] = {
    "Día": 6,
    "Fecha": 12,
    "HRV (ms)": 10,
    "Base HRV 7d": 12,
    "HRV (z)": 9,
    "FC reposo\n(bpm)": 11,
    "Base FC 7d": 11,
    "Sueño (h)": 10,
    "Calidad\nsueño": 9,
    "Carga": 8,
    "Readiness": 11,
    "Severidad": 11,
    "Sin datos\nsueño": 10,
}

_NUMBER_FORMATS: dict[str, str] = {
    "Fecha": "dd/mm/yyyy",
    "HRV (ms)": "0.0",
    "Base HRV 7d": "0.0",
    "HRV (z)": "0.00",
    "FC reposo\n(bpm)": "0",
    "Base FC 7d": "0.0",
    "Sueño (h)": "0.0",
    "Calidad\nsueño": "0",
    "Carga": "0",
    "Readiness": "0",
}


@dataclass(frozen=True)
class ExcelLayout:
    """Layout/formatting configuration for the readiness sheet."""

    sheet_name: str = "Readiness diario"


def _weekday_label(day: object) -> str:
    """Etiqueta de 3 letras del día; vacía si la fecha no se pudo leer."""
    if not isinstance(day, pd.Timestamp) or pd.isna(day):
        return ""
    return _DIA_SEMANA[day.weekday()]


def _add_weekday_column(export_df: pd.DataFrame) -> pd.DataFrame:
    """Añade columna weekday (Día) a partir de date."""
    if "date" not in export_df.columns or export_df.empty:
        return export_df
    export_df = export_df.copy()
    export_df["date"] = pd.to_datetime(export_df["date"], errors="coerce")
    export_df["weekday"] = export_df["date"].map(_weekday_label)
    cols = ["weekday"] + [c for c in export_df.columns if c != "weekday"]
    return export_df[cols]


def _prepare_flags(export_df: pd.DataFrame) -> pd.DataFrame:
    """Muestra el modo restringido como "sí" y redondea el z-score."""
    export_df = export_df.copy()
    if "sleep_data_missing" in export_df.columns:
        export_df["sleep_data_missing"] = export_df["sleep_data_missing"].map(
            lambda v: "sí" if not pd.isna(v) and bool(v) else ""
        )
    if "z_hrv" in export_df.columns:
        export_df["z_hrv"] = pd.to_numeric(export_df["z_hrv"], errors="coerce").round(2)
    return export_df


def write_readiness_xlsx(
    df: pd.DataFrame, out_path: Path, layout: ExcelLayout
) -> None:
    """Write a formatted Excel file with one row per scored day.

    Args:
        df: DataFrame from ``scored_to_frame``.
        out_path: Output path for the XLSX file.
        layout: Excel layout parameters.
    """
    out_path.parent.mkdir(parents=True, exist_ok=True)

    export_df = _add_weekday_column(df)
    export_df = _prepare_flags(export_df)
    export_df = export_df.rename(columns=_HEADER_MAP)

    with pd.ExcelWriter(out_path, engine="openpyxl") as writer:
        export_df.to_excel(writer, index=False, sheet_name=layout.sheet_name)
        ws = writer.book[layout.sheet_name]
        _format_sheet(ws)


def _style_cells(ws: Any) -> None:
    """Borde y centrado en todas las celdas; cabecera gris en negrita y fija."""
    for row in ws.iter_rows():
        for cell in row:
            cell.alignment = _CENTER
            cell.border = _BORDER
            if cell.row == 1:
                cell.font = Font(bold=True)
                cell.fill = _HEADER_FILL
        if row[0].row > 1:
            ws.row_dimensions[row[0].row].height = 15
    ws.freeze_panes = "A2"


def _header_letters(ws: Any) -> dict[str, str]:
    """Cabecera -> letra de columna."""
    return {str(cell.value): cell.column_letter for cell in ws[1]}


def _apply_column_widths(ws: Any, letters: dict[str, str]) -> None:
    """Establece anchos de columna para evitar ###."""
    for header, width in _COLUMN_WIDTHS.items():
        if header in letters:
            ws.column_dimensions[letters[header]].width = width


def _apply_number_formats(ws: Any, letters: dict[str, str]) -> None:
    """Aplica formatos numéricos por cabecera."""
    for header, fmt in _NUMBER_FORMATS.items():
        if header in letters:
            for cell in ws[letters[header]][1:]:
                cell.number_format = fmt


def _apply_severity_fills(ws: Any, letters: dict[str, str]) -> None:
    """Colorea la celda de severidad según el nivel."""
    if "Severidad" not in letters:
        return
    for cell in ws[letters["Severidad"]][1:]:
        color = _SEVERITY_FILLS.get(str(cell.value))
        if color:
            cell.fill = PatternFill(fill_type="solid", start_color=color, end_color=color)


def _format_sheet(ws: Any) -> None:
    """Apply borders, header style, widths, number formats and severity colors.

    Args:
        ws: openpyxl worksheet.
    """
    _style_cells(ws)
    letters = _header_letters(ws)
    _apply_column_widths(ws, letters)
    _apply_number_formats(ws, letters)
    _apply_severity_fills(ws, letters)
