"""Parser de duraciones compuestas ("45m", "1h30m", "1.5h")."""

from __future__ import annotations

import re
from datetime import timedelta
from decimal import Decimal

from step_tracker.errors import ErrorKind, ParseError

# Longer units first so "ms" wins over "m".
_UNIT_MICROSECONDS: dict[str, Decimal] = {
    "ns": Decimal("0.001"),
    "us": Decimal(1),
    "µs": Decimal(1),  # U+00B5 micro sign
    "μs": Decimal(1),  # U+03BC greek mu
    "ms": Decimal(1_000),
    "h": Decimal(3_600_000_000),
    "m": Decimal(60_000_000),
    "s": Decimal(1_000_000),
}

_NUMBER = re.compile(r"(?P<int>[0-9]*)(?:\.(?P<frac>[0-9]*))?")
_UNIT = re.compile("|".join(re.escape(u) for u in _UNIT_MICROSECONDS))
# Largest magnitude representable as int64 nanoseconds.
_MAX_NANOSECONDS = 2**63 - 1


def parse_duration(text: str) -> timedelta:
    """Parse a signed sequence of ``<number><unit>`` components.

    Accepted units are ``ns``, ``us`` (or ``µs``), ``ms``, ``s``, ``m`` and
    ``h``. A bare ``0`` is also accepted. Sub-microsecond parts are truncated.

    Args:
        text: Duration expression such as ``"1h30m"``.

    Returns:
        The parsed duration (may be zero or negative).

    Raises:
        ParseError: With ``INVALID_DURATION`` on any grammar violation.
    """
    pos, sign = _parse_sign(text, 0)
    if text[pos:] == "0":
        return timedelta(0)
    if pos == len(text):
        raise _invalid(text, "пустая продолжительность")

    total = Decimal(0)
    while pos < len(text):
        pos, value = _parse_number(text, pos)
        pos, factor = _parse_unit(text, pos)
        total += value * factor

    limit = _MAX_NANOSECONDS + (1 if sign < 0 else 0)
    if total * 1000 > limit:
        raise _invalid(text, "слишком большая продолжительность")
    return timedelta(microseconds=int(sign * total))


def _parse_sign(text: str, pos: int) -> tuple[int, int]:
    if text[pos : pos + 1] == "-":
        return pos + 1, -1
    if text[pos : pos + 1] == "+":
        return pos + 1, 1
    return pos, 1


def _parse_number(text: str, pos: int) -> tuple[int, Decimal]:
    """Lee ``digits[.digits]``; al menos un dígito es obligatorio."""
    match = _NUMBER.match(text, pos)
    int_part = match.group("int") if match else ""
    frac_part = (match.group("frac") or "") if match else ""
    if match is None or not (int_part or frac_part):
        raise _invalid(text, f"ожидалось число в позиции {pos}")
    return match.end(), Decimal(f"{int_part or '0'}.{frac_part or '0'}")


def _parse_unit(text: str, pos: int) -> tuple[int, Decimal]:
    match = _UNIT.match(text, pos)
    if not match:
        raise _invalid(text, f"неизвестная единица времени в позиции {pos}")
    return match.end(), _UNIT_MICROSECONDS[match.group(0)]


def _invalid(text: str, reason: str) -> ParseError:
    return ParseError(
        ErrorKind.INVALID_DURATION, f"ошибка парсинга времени {text!r}: {reason}"
    )
