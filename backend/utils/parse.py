"""Coercion of untyped request values into primitives."""

import re
from typing import Any

# Leading decimal number, trailing text is ignored ("30px" reads as 30)
_LEADING_NUMBER = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def parse_string(value: Any) -> str:
    """Falsy values become an empty string."""
    if not value:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def parse_number(value: Any) -> int | float | None:
    """Parse a non-zero number, or None.

    Integral values come back as int so "30" and 30.0 both yield 30.
    """
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, str):
        match = _LEADING_NUMBER.match(value)
        if not match:
            return None
        value = match.group(1)
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return None
    if number != number or number in (float("inf"), float("-inf")) or number == 0:
        return None
    return int(number) if number.is_integer() else number


def parse_positive_number(value: Any) -> int | float | None:
    number = parse_number(value)
    if number is not None and number > 0:
        return number
    return None


def parse_boolean(value: Any, default: bool | None = None) -> bool | None:
    """Accept real booleans and the strings "true" / "false"."""
    if isinstance(value, bool):
        return value
    if value in ("true", "false"):
        return value == "true"
    return default
