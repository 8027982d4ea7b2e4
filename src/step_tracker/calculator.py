"""Fórmulas de distancia, velocidad media y calorías."""

from __future__ import annotations

from datetime import timedelta

from step_tracker.errors import CalculationError, ErrorKind
from step_tracker.model import Activity, PhysicalProfile, StepLength

FIXED_STEP_LENGTH_M = 0.65
STEP_LENGTH_COEFFICIENT = 0.45  # step length as a fraction of height
M_IN_KM = 1000
MIN_IN_H = 60
WALKING_CALORIES_COEFFICIENT = 0.5


def step_length(height_m: float, strategy: StepLength) -> float:
    """Return the length of one step in meters."""
    if strategy is StepLength.FIXED:
        return FIXED_STEP_LENGTH_M
    return height_m * STEP_LENGTH_COEFFICIENT


def distance_km(
    steps: int, height_m: float, strategy: StepLength = StepLength.HEIGHT_BASED
) -> float:
    """Distance covered by ``steps`` steps, in kilometers."""
    return steps * step_length(height_m, strategy) / M_IN_KM


def mean_speed(steps: int, height_m: float, duration: timedelta) -> float:
    """Mean speed in km/h using the height-based step.

    Returns 0.0 for a non-positive duration instead of failing.
    """
    hours = duration.total_seconds() / 3600
    if hours <= 0:
        return 0.0
    return distance_km(steps, height_m) / hours


def running_calories(
    steps: int, weight_kg: float, height_m: float, duration: timedelta
) -> float:
    """Calories burned while running.

    Args:
        steps: Number of steps.
        weight_kg: Body weight.
        height_m: Body height.
        duration: Session length.

    Returns:
        Energy in kcal: ``weight * mean_speed * minutes / 60``.

    Raises:
        CalculationError: On non-positive inputs or zero mean speed.
    """
    speed = _checked_speed(steps, weight_kg, height_m, duration)
    minutes = duration.total_seconds() / 60
    return weight_kg * speed * minutes / MIN_IN_H


def walking_calories(
    steps: int, weight_kg: float, height_m: float, duration: timedelta
) -> float:
    """Calories burned while walking (running formula scaled by 0.5).

    Raises:
        CalculationError: On non-positive inputs or zero mean speed.
    """
    speed = _checked_speed(steps, weight_kg, height_m, duration)
    minutes = duration.total_seconds() / 60
    return weight_kg * speed * minutes / MIN_IN_H * WALKING_CALORIES_COEFFICIENT


def calories(
    activity: Activity,
    steps: int,
    profile: PhysicalProfile,
    duration: timedelta,
) -> float:
    """Dispatch to the calorie formula of ``activity``."""
    formula = running_calories if activity is Activity.RUNNING else walking_calories
    return formula(steps, profile.weight_kg, profile.height_m, duration)


def _checked_speed(
    steps: int, weight_kg: float, height_m: float, duration: timedelta
) -> float:
    """Valida entradas y devuelve la velocidad media (nunca cero)."""
    if steps <= 0:
        raise CalculationError(
            ErrorKind.INVALID_INPUT, "количество шагов должно быть положительным"
        )
    PhysicalProfile(weight_kg=weight_kg, height_m=height_m).validate()
    if duration <= timedelta(0):
        raise CalculationError(
            ErrorKind.INVALID_INPUT, "продолжительность должна быть положительной"
        )
    speed = mean_speed(steps, height_m, duration)
    if speed == 0:
        raise CalculationError(ErrorKind.ZERO_SPEED, "невозможно вычислить скорость")
    return speed
