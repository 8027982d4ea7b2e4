"""Reportes de varios entrenamientos como DataFrame."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

import pandas as pd
from loguru import logger

from step_tracker.errors import TrackerError
from step_tracker.model import PhysicalProfile
from step_tracker.report import build_training_report

REPORT_COLUMNS = [
    "record",
    "activity",
    "duration_h",
    "distance_km",
    "speed_kmh",
    "calories_kcal",
    "error",
]

TOTALS_COLUMNS = [
    "activity",
    "sessions",
    "duration_h",
    "distance_km",
    "calories_kcal",
]


def read_records(path: Path) -> list[str]:
    """Return one record per non-blank line of a UTF-8 text file."""
    text = path.read_text(encoding="utf-8")
    return [line.strip() for line in text.splitlines() if line.strip()]


def reports_frame(records: Iterable[str], profile: PhysicalProfile) -> pd.DataFrame:
    """Build one row per training record.

    A record that fails keeps its row with NaN metrics and the error message, so
    the rest of the batch is unaffected.

    Args:
        records: Raw ``steps,activity,duration`` records.
        profile: Weight and height applied to every record.

    Returns:
        DataFrame with ``REPORT_COLUMNS``.
    """
    rows = [_report_row(raw, profile) for raw in records]
    if not rows:
        return pd.DataFrame(columns=REPORT_COLUMNS)
    return pd.DataFrame(rows, columns=REPORT_COLUMNS)


def activity_totals(frame: pd.DataFrame) -> pd.DataFrame:
    """Aggregate successful rows per activity (sessions/duration/distance/kcal)."""
    ok = frame[frame["error"].isna()] if not frame.empty else frame
    if ok.empty:
        return pd.DataFrame(columns=TOTALS_COLUMNS)
    totals = ok.groupby("activity", as_index=False).agg(
        sessions=("record", "count"),
        duration_h=("duration_h", "sum"),
        distance_km=("distance_km", "sum"),
        calories_kcal=("calories_kcal", "sum"),
    )
    for col in ("duration_h", "distance_km", "calories_kcal"):
        totals[col] = totals[col].round(2)
    return totals[TOTALS_COLUMNS].sort_values("activity").reset_index(drop=True)


def _report_row(raw: str, profile: PhysicalProfile) -> dict[str, object]:
    """Convierte un registro en fila; los errores quedan en la columna error."""
    try:
        report = build_training_report(raw, profile.weight_kg, profile.height_m)
    except TrackerError as exc:
        logger.debug("Skipping record in batch: {}", exc, raw_record=raw)
        return {
            "record": raw,
            "activity": None,
            "duration_h": float("nan"),
            "distance_km": float("nan"),
            "speed_kmh": float("nan"),
            "calories_kcal": float("nan"),
            "error": str(exc),
        }
    return {
        "record": raw,
        "activity": report.activity.value,
        "duration_h": report.duration_h,
        "distance_km": report.distance_km,
        "speed_kmh": report.speed_kmh,
        "calories_kcal": report.calories_kcal,
        "error": None,
    }
