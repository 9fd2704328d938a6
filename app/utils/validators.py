"""Helpers for turning raw form values into clean field values."""

import re
from typing import Optional

from app.core.exceptions import ValidationError


_LEADING_INTEGER = re.compile(r"^\s*([+-]?\d+)")


def clean_text(value: Optional[str], default: str = "") -> str:
    """Trim a text value; ``None`` or blank becomes ``default``."""
    if value is None:
        return default
    cleaned = value.strip()
    return cleaned if cleaned else default


def require_text(value: Optional[str], message: str) -> str:
    """Trim a required text value, raising ``ValidationError(message)`` when blank."""
    cleaned = clean_text(value)
    if not cleaned:
        raise ValidationError(message)
    return cleaned


def parse_year(value) -> Optional[int]:
    """
    Parse a year from a form value.

    Accepts ints and strings with a leading integer ("2020", " 1971 ", "1952 AD").
    Returns None when no integer can be read.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    match = _LEADING_INTEGER.match(str(value))
    if not match:
        return None
    return int(match.group(1))
