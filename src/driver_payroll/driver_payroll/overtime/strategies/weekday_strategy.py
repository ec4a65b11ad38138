from __future__ import annotations

from ...core.enums import DayType, OvertimeCategory
from ..intervals import late_night_minutes
from ..model import ShiftTimeline
from .base import CategoryStrategy


class WeekdayStrategy(CategoryStrategy):
    """Weekday rules.

    Long shift (duty time over 8h + 1h): overtime is paid as late-night first,
    up to the late-night minutes actually worked, and the rest as early.

    Otherwise the shift is standard time and has no overtime: late-night
    minutes inside it are inner late-night. Transfer time is always early.
    """

    day_type = DayType.WEEKDAY

    def assign(self, timeline: ShiftTimeline) -> dict[OvertimeCategory, int]:
        late = late_night_minutes(timeline)

        if timeline.is_long:
            overtime = timeline.overtime_minutes
            late_overtime = min(late, overtime)
            return {
                OvertimeCategory.LATE_NIGHT: late_overtime,
                OvertimeCategory.EARLY: overtime - late_overtime + timeline.transfer_minutes,
            }

        return {
            OvertimeCategory.INNER_LATE_NIGHT: late,
            OvertimeCategory.EARLY: timeline.transfer_minutes,
        }
