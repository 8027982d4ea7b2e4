"""Reportes diarios y de entrenamiento en texto con plantilla fija."""

from __future__ import annotations

from dataclasses import dataclass

from loguru import logger

from step_tracker.calculator import (
    calories,
    distance_km,
    mean_speed,
    walking_calories,
)
from step_tracker.errors import TrackerError
from step_tracker.model import (
    Activity,
    ActivityReport,
    DailyReport,
    PhysicalProfile,
    StepLength,
)
from step_tracker.parser import parse_daily_record, parse_training_record

DAILY_TEMPLATE = (
    "Количество шагов: {steps}.\n"
    "Дистанция составила {distance:.2f} км.\n"
    "Вы сожгли {calories:.2f} ккал.\n"
)

TRAINING_TEMPLATE = (
    "Тип тренировки: {label}\n"
    "Длительность: {duration:.2f} ч.\n"
    "Дистанция: {distance:.2f} км.\n"
    "Скорость: {speed:.2f} км/ч\n"
    "Сожгли калорий: {calories:.2f}\n"
)


@dataclass(frozen=True)
class ReportResult:
    """Rendered report text or the error that prevented it."""

    text: str = ""
    error: TrackerError | None = None

    @property
    def ok(self) -> bool:
        """True when the report was rendered."""
        return self.error is None


def build_daily_report(raw: str, weight_kg: float, height_m: float) -> DailyReport:
    """Compute the daily step summary for a ``steps,duration`` record.

    Distance always uses the fixed step length; calories use the walking
    formula, whose mean speed is derived from height.

    Raises:
        TrackerError: If the record or profile is invalid.
    """
    record = parse_daily_record(raw)
    return DailyReport(
        steps=record.steps,
        distance_km=distance_km(record.steps, height_m, StepLength.FIXED),
        calories_kcal=walking_calories(
            record.steps, weight_kg, height_m, record.duration
        ),
    )


def build_training_report(
    raw: str, weight_kg: float, height_m: float
) -> ActivityReport:
    """Compute training metrics for a ``steps,activity,duration`` record.

    Args:
        raw: Training record.
        weight_kg: Body weight.
        height_m: Body height, also used to derive the step length.

    Returns:
        Report carrying the activity label exactly as written in the record.

    Raises:
        TrackerError: If the record, label or profile is invalid.
    """
    record = parse_training_record(raw)
    activity = Activity.from_label(record.label)
    profile = PhysicalProfile(weight_kg=weight_kg, height_m=height_m)
    kcal = calories(activity, record.steps, profile, record.duration)
    return ActivityReport(
        label=record.label,
        activity=activity,
        duration_h=record.duration.total_seconds() / 3600,
        distance_km=distance_km(record.steps, height_m, StepLength.HEIGHT_BASED),
        speed_kmh=mean_speed(record.steps, height_m, record.duration),
        calories_kcal=kcal,
    )


def render_daily(report: DailyReport) -> str:
    """Render the three-line daily template."""
    return DAILY_TEMPLATE.format(
        steps=report.steps,
        distance=report.distance_km,
        calories=report.calories_kcal,
    )


def render_training(report: ActivityReport) -> str:
    """Render the five-line training template (label as written)."""
    return TRAINING_TEMPLATE.format(
        label=report.label,
        duration=report.duration_h,
        distance=report.distance_km,
        speed=report.speed_kmh,
        calories=report.calories_kcal,
    )


def daily_step_result(raw: str, weight_kg: float, height_m: float) -> ReportResult:
    """Build and render the daily report without raising ``TrackerError``."""
    try:
        report = build_daily_report(raw, weight_kg, height_m)
    except TrackerError as exc:
        return ReportResult(error=exc)
    return ReportResult(text=render_daily(report))


def daily_step_report(raw: str, weight_kg: float, height_m: float) -> str:
    """Daily step summary text, or ``""`` if the record cannot be processed.

    Failures are logged and never raised.
    """
    result = daily_step_result(raw, weight_kg, height_m)
    if result.error is not None:
        logger.warning(
            "Daily step report failed: {}",
            result.error,
            raw_record=raw,
            kind=result.error.kind.name,
        )
    return result.text


def training_report(raw: str, weight_kg: float, height_m: float) -> str:
    """Training summary text.

    Raises:
        TrackerError: If the record cannot be processed. The failure is logged
            before it propagates.
    """
    try:
        report = build_training_report(raw, weight_kg, height_m)
    except TrackerError as exc:
        logger.warning(
            "Training report failed: {}", exc, raw_record=raw, kind=exc.kind.name
        )
        raise
    return render_training(report)
