from __future__ import annotations

import math
from typing import Optional

from ..core.exceptions import InvalidFormatError


def _split_hhmm(value: str) -> tuple[int, int]:
    parts = value.strip().split(":")
    if len(parts) != 2 or not all(p.isdigit() for p in parts):
        raise InvalidFormatError(f"Invalid time string: {value!r} (expected HH:MM)")
    hours, minutes = int(parts[0]), int(parts[1])
    if minutes > 59:
        raise InvalidFormatError(f"Invalid minutes in {value!r}")
    return hours, minutes


def parse_clock(value: str) -> int:
    """Parse a time of day ``HH:MM`` into minutes since midnight."""
    hours, minutes = _split_hhmm(value)
    if hours > 23:
        raise InvalidFormatError(f"Invalid hour in {value!r}")
    return hours * 60 + minutes


def parse_duration(value: Optional[str]) -> int:
    """Parse a non-negative ``HH:MM`` duration into minutes.

    Empty input means no duration (0).
    """
    if value is None or not value.strip():
        return 0
    hours, minutes = _split_hhmm(value)
    return hours * 60 + minutes


def format_duration(minutes: int) -> str:
    return f"{minutes // 60:02d}:{minutes % 60:02d}"


def minutes_to_hours(minutes: int) -> float:
    return max(minutes, 0) / 60


def format_hours(hours: float) -> str:
    """Render fractional hours as ``H:MM`` (e.g. 7.5 -> "7:30")."""
    if not hours:
        return "0:00"
    h = math.floor(hours)
    m = round((hours - h) * 60)
    if m == 60:
        h, m = h + 1, 0
    return f"{h}:{m:02d}"


def require_text(value: object, field_name: str) -> Optional[str]:
    """Form values must be text (or absent); a bare number such as 8 is not a time."""
    if value is not None and not isinstance(value, str):
        raise InvalidFormatError(f"{field_name} must be HH:MM text, got {value!r}")
    return value
