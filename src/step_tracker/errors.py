"""Errores tipados del parser y la calculadora."""

from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    """Category of a tracker failure."""

    MALFORMED_RECORD = "malformed_record"
    INVALID_STEP_COUNT = "invalid_step_count"
    INVALID_DURATION = "invalid_duration"
    UNKNOWN_ACTIVITY = "unknown_activity"
    INVALID_PROFILE = "invalid_profile"
    INVALID_INPUT = "invalid_input"
    ZERO_SPEED = "zero_speed"


class TrackerError(ValueError):
    """Base error carrying an ``ErrorKind``."""

    def __init__(self, kind: ErrorKind, message: str) -> None:
        """Create an error.

        Args:
            kind: Failure category.
            message: Human readable description.
        """
        super().__init__(message)
        self.kind = kind

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.kind.name}, {str(self)!r})"


class ParseError(TrackerError):
    """Raised when a record, duration or activity label cannot be parsed."""


class CalculationError(TrackerError):
    """Raised when metrics cannot be computed from the given inputs."""
