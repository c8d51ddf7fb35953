"""Formatting helpers shared by every external boundary."""

import re
from datetime import date, datetime, timezone
from typing import Union

from ..reference.catalog import NATIONALITY_CODES

DateLike = Union[str, date, datetime, None]

_DIGITS = re.compile(r"(\d+)")
_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def to_date(value: DateLike) -> date | None:
    """Parse an ISO date, ISO datetime or date object; anything else is None."""
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        return value.date()
    if isinstance(value, date):
        return value
    text = str(value).strip()
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass
    try:
        parsed = datetime.fromisoformat(text.replace("Z", "+00:00"))
    except ValueError:
        return None
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc)
    return parsed.date()


def format_date_ddmmyyyy(value: DateLike) -> str:
    """
    Render a date as DD/MM/YYYY using UTC fields.

    Empty, unparseable and pre-1900 inputs render as an empty string.
    """
    parsed = to_date(value)
    if parsed is None or parsed.year < 1900:
        return ""
    return f"{parsed.day:02d}/{parsed.month:02d}/{parsed.year}"


def nationality_code(nationality: str) -> str:
    """Three-letter code for a nationality; unmapped values use their first three letters."""
    return NATIONALITY_CODES.get(nationality, (nationality or "")[:3].upper())


def gender_code(gender) -> str:
    """Report gender code. The register only accepts M/F, so Other maps to F."""
    value = getattr(gender, "value", gender)
    return "M" if value == "Male" else "F"


def split_name(full_name: str) -> tuple[str, str, str]:
    """Split a full name into (first, middle, last)."""
    parts = (full_name or "").split()
    if not parts:
        return "", "", ""
    if len(parts) == 1:
        return parts[0], "", ""
    return parts[0], " ".join(parts[1:-1]), parts[-1]


def natural_key(text: str) -> tuple:
    """Sort key that orders embedded numbers numerically (RM9 < RM10)."""
    return tuple(
        (0, int(chunk), "") if chunk.isdigit() else (1, 0, chunk.lower())
        for chunk in _DIGITS.split(text or "")
        if chunk
    )


def parse_floor_number(floor: str) -> int | None:
    """Leading integer of a floor label such as '2nd Floor'."""
    match = _LEADING_INT.match(floor or "")
    return int(match.group(1)) if match else None
