"""Modelos tipados para registros de actividad, perfil y reportes."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from enum import Enum

from step_tracker.errors import CalculationError, ErrorKind, ParseError

DEFAULT_LABEL = "ходьба"


class Activity(Enum):
    """Supported activity types."""

    WALKING = "walking"
    RUNNING = "running"

    @classmethod
    def from_label(cls, label: str) -> Activity:
        """Normalize a free-text activity label.

        Args:
            label: Label as written in the record ("Бег", "walking", ...).

        Returns:
            The matching activity.

        Raises:
            ParseError: If the label is not a known activity.
        """
        activity = _LABELS.get(label.lower())
        if activity is None:
            raise ParseError(
                ErrorKind.UNKNOWN_ACTIVITY, f"неизвестный тип тренировки: {label!r}"
            )
        return activity


_LABELS = {
    "ходьба": Activity.WALKING,
    "walking": Activity.WALKING,
    "бег": Activity.RUNNING,
    "running": Activity.RUNNING,
}


class StepLength(Enum):
    """How the length of a single step is obtained."""

    FIXED = "fixed"
    HEIGHT_BASED = "height_based"


@dataclass(frozen=True)
class ActivityRecord:
    """One validated activity session."""

    steps: int
    duration: timedelta
    label: str = DEFAULT_LABEL


@dataclass(frozen=True)
class PhysicalProfile:
    """Body measurements supplied per call."""

    weight_kg: float
    height_m: float

    def validate(self) -> None:
        """Check that weight and height are positive.

        Raises:
            CalculationError: If either value is not positive.
        """
        if self.weight_kg <= 0:
            raise CalculationError(
                ErrorKind.INVALID_PROFILE, "вес должен быть положительным"
            )
        if self.height_m <= 0:
            raise CalculationError(
                ErrorKind.INVALID_PROFILE, "рост должен быть положительным"
            )


@dataclass(frozen=True)
class ActivityReport:
    """Derived training metrics."""

    label: str
    activity: Activity
    duration_h: float
    distance_km: float
    speed_kmh: float
    calories_kcal: float


@dataclass(frozen=True)
class DailyReport:
    """Derived daily step summary."""

    steps: int
    distance_km: float
    calories_kcal: float
