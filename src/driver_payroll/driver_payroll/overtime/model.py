from __future__ import annotations

from dataclasses import asdict, dataclass, field, fields
from datetime import date
from typing import Mapping, Optional

from ..common.time_utils import format_duration, minutes_to_hours, parse_clock, parse_duration, require_text
from ..core.constants import (
    MINUTES_PER_DAY,
    REFERENCE_BREAK_MINUTES,
    STANDARD_WITH_BREAK_MINUTES,
    STANDARD_WORK_MINUTES,
)
from ..core.enums import BreakSign, DayType, OvertimeCategory
from ..core.exceptions import InvalidFormatError, ValidationError


@dataclass(frozen=True)
class BreakAdjustment:
    """Signed deviation of the actual break from the 60-minute reference break."""

    sign: BreakSign = BreakSign.SURPLUS
    minutes: int = 0

    def __post_init__(self):
        if self.minutes < 0:
            raise ValidationError("Break adjustment magnitude must not be negative")

    @property
    def is_deficit(self) -> bool:
        return self.sign == BreakSign.DEFICIT

    @classmethod
    def parse(cls, value: Optional[str]) -> "BreakAdjustment":
        """Parse ``+HH:MM``, ``-HH:MM`` or ``HH:MM``; empty input is a zero surplus."""
        value = require_text(value, "break_time")
        if value is None or not value.strip():
            return cls()
        text = value.strip()
        sign = BreakSign.SURPLUS
        if text[0] in ("+", "-"):
            sign = BreakSign(text[0])
            text = text[1:]
        if not text:
            raise InvalidFormatError(f"Invalid break adjustment: {value!r}")
        return cls(sign=sign, minutes=parse_duration(text))

    def __str__(self) -> str:
        return f"{self.sign.value}{format_duration(self.minutes)}"


@dataclass(frozen=True)
class ShiftInput:
    """One work day as entered by the dispatcher. Clock values are minutes since midnight."""

    start_minute: int
    end_minute: int
    break_adjustment: BreakAdjustment = field(default_factory=BreakAdjustment)
    transfer_minutes: int = 0
    day_type: DayType = DayType.WEEKDAY

    def __post_init__(self):
        for name in ("start_minute", "end_minute"):
            value = getattr(self, name)
            if not 0 <= value < MINUTES_PER_DAY:
                raise ValidationError(f"{name} out of range: {value}")
        if self.transfer_minutes < 0:
            raise ValidationError("Transfer time must not be negative")

    @classmethod
    def from_text(
        cls,
        start_time: str,
        end_time: str,
        break_time: Optional[str] = None,
        transfer_time: Optional[str] = None,
        day_type: DayType = DayType.WEEKDAY,
    ) -> "ShiftInput":
        return cls(
            start_minute=parse_clock(start_time),
            end_minute=parse_clock(end_time),
            break_adjustment=BreakAdjustment.parse(break_time),
            transfer_minutes=parse_duration(transfer_time),
            day_type=DayType(day_type),
        )


@dataclass(frozen=True)
class ShiftTimeline:
    """A shift laid out on an absolute minute axis starting at midnight of the work day.

    ``end`` may exceed 1440 when the shift crosses midnight.
    """

    start: int
    span: int
    effective_break: int
    break_adjustment: BreakAdjustment
    transfer_minutes: int = 0

    @property
    def end(self) -> int:
        return self.start + self.span

    @property
    def worked_minutes(self) -> int:
        return max(self.span - self.effective_break, 0)

    @property
    def duty_minutes(self) -> int:
        """Shift span corrected only by the deviation from the reference break."""
        return max(self.span - self.effective_break + REFERENCE_BREAK_MINUTES, 0)

    @property
    def overtime_minutes(self) -> int:
        return max(0, self.worked_minutes - STANDARD_WORK_MINUTES)

    @property
    def is_long(self) -> bool:
        """Duty time over 8h plus the reference break, i.e. the shift has overtime."""
        return self.duty_minutes > STANDARD_WITH_BREAK_MINUTES

    @property
    def break_interval(self) -> Optional[tuple[int, int]]:
        """Deficit break anchored at the end of the shift, if any."""
        if not self.break_adjustment.is_deficit or not self.break_adjustment.minutes:
            return None
        return max(self.start, self.end - self.break_adjustment.minutes), self.end


@dataclass(frozen=True)
class CategoryBreakdown:
    """Hours per pay category for one work day."""

    late_night: float = 0.0
    inner_late_night: float = 0.0
    early: float = 0.0
    saturday: float = 0.0
    saturday_late_night: float = 0.0
    holiday: float = 0.0
    holiday_late_night: float = 0.0
    legal_holiday: float = 0.0
    legal_holiday_late_night: float = 0.0

    @classmethod
    def from_minutes(cls, minutes: Mapping[OvertimeCategory, int]) -> "CategoryBreakdown":
        return cls(**{category.value: minutes_to_hours(value) for category, value in minutes.items()})

    @classmethod
    def from_row(cls, row: Mapping[str, object]) -> "CategoryBreakdown":
        return cls(**{f.name: float(row.get(f"{f.name}_hours") or 0) for f in fields(cls)})

    def hours(self, category: OvertimeCategory) -> float:
        return getattr(self, category.value)

    @property
    def total_hours(self) -> float:
        return sum(self.hours(c) for c in OvertimeCategory)

    def non_zero_categories(self) -> set[OvertimeCategory]:
        return {c for c in OvertimeCategory if self.hours(c)}

    def to_dict(self) -> dict[str, float]:
        return asdict(self)


@dataclass(frozen=True)
class DailyOvertimeRecord:
    """Stored result for one driver and work date, with the raw inputs for display."""

    driver_id: int
    work_date: date
    breakdown: CategoryBreakdown
    start_time: Optional[str] = None
    end_time: Optional[str] = None
    break_time: Optional[str] = None
    transfer_time: Optional[str] = None
    vacuum_count: int = 0
    car_stay_count: int = 0
    boarding_count: int = 0
    training_count: int = 0
    guidance_count: int = 0
    record_id: Optional[int] = None
