"""Tests for batch training reports."""

from __future__ import annotations

from pathlib import Path

import pandas as pd
import pytest

from step_tracker.batch import (
    REPORT_COLUMNS,
    TOTALS_COLUMNS,
    activity_totals,
    read_records,
    reports_frame,
)
from step_tracker.model import PhysicalProfile

PROFILE = PhysicalProfile(weight_kg=70, height_m=1.8)


def test_read_records_skips_blank_lines(tmp_path: Path) -> None:
    path = tmp_path / "records.txt"
    path.write_text("3000,бег,30m\n\n  \n1000,ходьба,45m  \n", encoding="utf-8")
    assert read_records(path) == ["3000,бег,30m", "1000,ходьба,45m"]


def test_reports_frame_empty() -> None:
    out = reports_frame([], PROFILE)
    assert list(out.columns) == REPORT_COLUMNS
    assert out.empty


def test_reports_frame_keeps_failed_rows() -> None:
    out = reports_frame(
        ["3000,бег,30m", "1000,хоккей,45m", "3000,Walking,30m"], PROFILE
    )
    assert list(out.columns) == REPORT_COLUMNS
    assert out.loc[0, "activity"] == "running"
    assert out.loc[2, "activity"] == "walking"
    assert out["activity"].isna().tolist() == [False, True, False]
    assert out.loc[0, "calories_kcal"] == pytest.approx(170.1)
    assert out.loc[2, "calories_kcal"] == pytest.approx(85.05)
    assert pd.isna(out.loc[1, "distance_km"])
    assert "неизвестный тип тренировки" in out.loc[1, "error"]
    assert out["error"].isna().tolist() == [True, False, True]


def test_activity_totals_sums_successful_rows() -> None:
    frame = reports_frame(
        ["3000,бег,30m", "3000,running,30m", "bad", "3000,ходьба,30m"], PROFILE
    )
    totals = activity_totals(frame)
    assert list(totals.columns) == TOTALS_COLUMNS
    assert list(totals["activity"]) == ["running", "walking"]
    assert list(totals["sessions"]) == [2, 1]
    running = totals.iloc[0]
    assert running["duration_h"] == pytest.approx(1.0)
    assert running["distance_km"] == pytest.approx(4.86)
    assert running["calories_kcal"] == pytest.approx(340.2)


def test_activity_totals_without_successful_rows() -> None:
    totals = activity_totals(reports_frame(["bad", "0,бег,1h"], PROFILE))
    assert list(totals.columns) == TOTALS_COLUMNS
    assert totals.empty
    assert activity_totals(reports_frame([], PROFILE)).empty


def test_reports_frame_out_of_range_steps_gets_error_row() -> None:
    out = reports_frame(["3000,бег,30m", "9" * 400 + ",бег,1h"], PROFILE)
    assert len(out) == 2
    assert out.loc[0, "activity"] == "running"
    assert pd.isna(out.loc[1, "calories_kcal"])
    assert "вне диапазона" in out.loc[1, "error"]
