from __future__ import annotations

from datetime import date

from ..core.exceptions import ValidationError


def require_non_negative(value: float, field_name: str) -> float:
    if value is None or value < 0:
        raise ValidationError(f"{field_name} must not be negative")
    return value


def require_period(start: date, end: date) -> None:
    if start > end:
        raise ValidationError("Period start must not be after period end")
