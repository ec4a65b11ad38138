from __future__ import annotations

from datetime import date, datetime
from typing import Optional

from ..core.constants import PAY_PERIOD_START_DAY
from ..core.exceptions import InvalidFormatError


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except (TypeError, ValueError):
        raise InvalidFormatError(f"Invalid date: {value!r} (expected YYYY-MM-DD)") from None


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def _shift_month(year: int, month: int, delta: int) -> tuple[int, int]:
    index = year * 12 + (month - 1) + delta
    return index // 12, index % 12 + 1


def default_pay_period(today: Optional[date] = None) -> tuple[date, date]:
    """Pay period containing ``today``: the 21st of one month to the 20th of the next."""
    today = today or now_local().date()
    year, month = today.year, today.month
    if today.day < PAY_PERIOD_START_DAY:
        year, month = _shift_month(year, month, -1)
    end_year, end_month = _shift_month(year, month, 1)
    return (
        date(year, month, PAY_PERIOD_START_DAY),
        date(end_year, end_month, PAY_PERIOD_START_DAY - 1),
    )
