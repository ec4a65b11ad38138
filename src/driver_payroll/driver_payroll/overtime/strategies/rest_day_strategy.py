from __future__ import annotations

from ...core.enums import DayType, OvertimeCategory
from ..intervals import late_night_minutes
from ..model import ShiftTimeline
from .base import CategoryStrategy


class RestDayStrategy(CategoryStrategy):
    """All duty time on a rest day is overtime, split into late-night and the rest."""

    category: OvertimeCategory
    late_night_category: OvertimeCategory

    def assign(self, timeline: ShiftTimeline) -> dict[OvertimeCategory, int]:
        late = late_night_minutes(timeline)
        return {
            self.category: max(timeline.duty_minutes - late, 0) + timeline.transfer_minutes,
            self.late_night_category: late,
        }


class HolidayStrategy(RestDayStrategy):
    day_type = DayType.HOLIDAY
    category = OvertimeCategory.HOLIDAY
    late_night_category = OvertimeCategory.HOLIDAY_LATE_NIGHT


class LegalHolidayStrategy(RestDayStrategy):
    day_type = DayType.LEGAL_HOLIDAY
    category = OvertimeCategory.LEGAL_HOLIDAY
    late_night_category = OvertimeCategory.LEGAL_HOLIDAY_LATE_NIGHT
