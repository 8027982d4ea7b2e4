"""Lectura de registros de actividad separados por comas."""

from __future__ import annotations

import re

from step_tracker.duration import parse_duration
from step_tracker.errors import ErrorKind, ParseError
from step_tracker.model import DEFAULT_LABEL, ActivityRecord

DELIMITER = ","
DAILY_FIELDS = 2
TRAINING_FIELDS = 3

_INTEGER = re.compile(r"[+-]?[0-9]+")
MAX_STEPS = 2**63 - 1


def parse_record(raw: str, fields: int) -> ActivityRecord:
    """Parse ``steps[,label],duration`` into a validated record.

    Args:
        raw: Comma separated record.
        fields: Expected number of fields (2 or 3).

    Returns:
        Fully validated record. The label is kept verbatim; it is only matched
        against known activities when a report is built.

    Raises:
        ParseError: If the record is malformed or any field is invalid.
    """
    if fields not in (DAILY_FIELDS, TRAINING_FIELDS):
        raise ValueError(f"fields must be 2 or 3, got {fields}")

    parts = raw.split(DELIMITER)
    if len(parts) != fields:
        raise ParseError(
            ErrorKind.MALFORMED_RECORD,
            f"неверный формат данных: ожидалось полей {fields}, получено {len(parts)}",
        )

    steps = _parse_steps(parts[0])
    duration = parse_duration(parts[-1])
    if duration.total_seconds() <= 0:
        raise ParseError(
            ErrorKind.INVALID_DURATION, "продолжительность должна быть положительной"
        )

    label = parts[1] if fields == TRAINING_FIELDS else DEFAULT_LABEL
    return ActivityRecord(steps=steps, duration=duration, label=label)


def parse_daily_record(raw: str) -> ActivityRecord:
    """Parse a ``steps,duration`` record (activity is walking)."""
    return parse_record(raw, DAILY_FIELDS)


def parse_training_record(raw: str) -> ActivityRecord:
    """Parse a ``steps,activity,duration`` record."""
    return parse_record(raw, TRAINING_FIELDS)


def _parse_steps(text: str) -> int:
    """Convierte el campo de pasos; debe ser un entero positivo."""
    if not _INTEGER.fullmatch(text):
        raise ParseError(
            ErrorKind.INVALID_STEP_COUNT, f"ошибка парсинга шагов: {text!r}"
        )
    steps = int(text)
    if steps > MAX_STEPS:
        raise ParseError(
            ErrorKind.INVALID_STEP_COUNT,
            f"ошибка парсинга шагов: {text!r} вне диапазона",
        )
    if steps <= 0:
        raise ParseError(
            ErrorKind.INVALID_STEP_COUNT,
            "количество шагов должно быть положительным",
        )
    return steps
