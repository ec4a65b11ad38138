from __future__ import annotations

from ...core.enums import DayType, OvertimeCategory
from ..intervals import late_night_minutes
from ..model import ShiftTimeline
from .base import CategoryStrategy


class SaturdayStrategy(CategoryStrategy):
    """Saturday has no early category: all duty time and transfer time is Saturday time.

    On a long shift (duty time over 8h + 1h) only the late-night minutes covered
    by the overtime earn the Saturday late-night rate.
    """

    day_type = DayType.SATURDAY

    def assign(self, timeline: ShiftTimeline) -> dict[OvertimeCategory, int]:
        late = late_night_minutes(timeline)
        if timeline.is_long:
            late = min(late, timeline.overtime_minutes)

        return {
            OvertimeCategory.SATURDAY: max(timeline.duty_minutes - late, 0) + timeline.transfer_minutes,
            OvertimeCategory.SATURDAY_LATE_NIGHT: late,
        }
