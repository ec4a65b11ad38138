from __future__ import annotations

from typing import Optional, Union

from ..common.time_utils import parse_clock, parse_duration, require_text
from ..core.constants import MINUTES_PER_DAY
from ..core.enums import DayType
from .break_policies.base import BreakPolicy
from .break_policies.signed_delta import SignedDeltaBreakPolicy
from .factory import CategoryStrategyFactory
from .model import BreakAdjustment, CategoryBreakdown, ShiftInput, ShiftTimeline


class OvertimeEngine:
    """Splits one day's shift into pay-category hours.

    Stateless apart from its configuration; safe to share between threads.
    One engine always applies the same break policy.
    """

    def __init__(
        self,
        policy: Optional[BreakPolicy] = None,
        *,
        strategy_factory: Optional[CategoryStrategyFactory] = None,
    ):
        self._policy = policy or SignedDeltaBreakPolicy()
        self._factory = strategy_factory or CategoryStrategyFactory()

    @property
    def policy(self) -> BreakPolicy:
        return self._policy

    def timeline(self, shift: ShiftInput) -> ShiftTimeline:
        span = (shift.end_minute - shift.start_minute) % MINUTES_PER_DAY
        if span == 0:
            # Same start and end is a full day, not an empty shift.
            span = MINUTES_PER_DAY
        return ShiftTimeline(
            start=shift.start_minute,
            span=span,
            effective_break=self._policy.effective_break(shift.break_adjustment),
            break_adjustment=shift.break_adjustment,
            transfer_minutes=shift.transfer_minutes,
        )

    def compute(self, shift: ShiftInput) -> CategoryBreakdown:
        strategy = self._factory.for_day_type(shift.day_type)
        minutes = strategy.assign(self.timeline(shift))
        return CategoryBreakdown.from_minutes(minutes)


def compute_breakdown(
    start_time: Optional[str],
    end_time: Optional[str],
    break_adjustment: Union[str, BreakAdjustment, None] = None,
    transfer_duration: Optional[str] = None,
    day_type: DayType = DayType.WEEKDAY,
    *,
    policy: Optional[BreakPolicy] = None,
) -> Optional[CategoryBreakdown]:
    """Compute the category breakdown from form text such as ``"08:00"``.

    Returns None when start or end time is missing; raises InvalidFormatError
    when a value is not ``HH:MM``.
    """
    start_time = require_text(start_time, "start_time")
    end_time = require_text(end_time, "end_time")
    transfer_duration = require_text(transfer_duration, "transfer_duration")
    if not start_time or not start_time.strip() or not end_time or not end_time.strip():
        return None

    if not isinstance(break_adjustment, BreakAdjustment):
        break_adjustment = BreakAdjustment.parse(break_adjustment)

    shift = ShiftInput(
        start_minute=parse_clock(start_time),
        end_minute=parse_clock(end_time),
        break_adjustment=break_adjustment,
        transfer_minutes=parse_duration(transfer_duration),
        day_type=DayType(day_type),
    )
    return OvertimeEngine(policy).compute(shift)
