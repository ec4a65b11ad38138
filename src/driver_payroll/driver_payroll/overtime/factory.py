from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import DayType
from ..core.exceptions import ValidationError
from .break_policies.additive_deficit import AdditiveDeficitBreakPolicy
from .break_policies.base import BreakPolicy
from .break_policies.signed_delta import SignedDeltaBreakPolicy
from .strategies.base import CategoryStrategy
from .strategies.rest_day_strategy import HolidayStrategy, LegalHolidayStrategy
from .strategies.saturday_strategy import SaturdayStrategy
from .strategies.weekday_strategy import WeekdayStrategy

_BREAK_POLICIES = {
    SignedDeltaBreakPolicy.name: SignedDeltaBreakPolicy,
    AdditiveDeficitBreakPolicy.name: AdditiveDeficitBreakPolicy,
}


@dataclass
class CategoryStrategyFactory:
    """Factory Pattern: choose the category strategy for a day type."""

    def for_day_type(self, day_type: DayType) -> CategoryStrategy:
        if day_type == DayType.LEGAL_HOLIDAY:
            return LegalHolidayStrategy()
        if day_type == DayType.HOLIDAY:
            return HolidayStrategy()
        if day_type == DayType.SATURDAY:
            return SaturdayStrategy()
        return WeekdayStrategy()


def get_break_policy(name: str) -> BreakPolicy:
    try:
        return _BREAK_POLICIES[name.strip().lower()]()
    except KeyError:
        raise ValidationError(f"Unknown break policy: {name!r}") from None
