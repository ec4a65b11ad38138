from __future__ import annotations

from enum import Enum

from .exceptions import ValidationError


class DayType(str, Enum):
    """Kind of work day; selects which category family a shift is paid in."""

    WEEKDAY = "weekday"
    SATURDAY = "saturday"
    HOLIDAY = "holiday"
    LEGAL_HOLIDAY = "legal_holiday"

    @classmethod
    def from_flags(cls, *, is_saturday: bool = False, is_holiday: bool = False, is_legal_holiday: bool = False) -> "DayType":
        """Map the three day-type checkboxes of the input form to one value."""
        selected = [
            day_type
            for day_type, flag in (
                (cls.SATURDAY, is_saturday),
                (cls.HOLIDAY, is_holiday),
                (cls.LEGAL_HOLIDAY, is_legal_holiday),
            )
            if flag
        ]
        if len(selected) > 1:
            raise ValidationError("Only one of saturday/holiday/legal holiday may be selected")
        return selected[0] if selected else cls.WEEKDAY


class BreakSign(str, Enum):
    """Direction of the deviation from the 60-minute reference break.

    SURPLUS: the break was shorter than 60 minutes, time is added back to work.
    DEFICIT: the break ran over 60 minutes.
    """

    SURPLUS = "+"
    DEFICIT = "-"


class OvertimeCategory(str, Enum):
    """Pay categories produced by the overtime engine.

    Values match the column names of ``daily_overtime_records``.
    """

    LATE_NIGHT = "late_night"
    INNER_LATE_NIGHT = "inner_late_night"
    EARLY = "early"
    SATURDAY = "saturday"
    SATURDAY_LATE_NIGHT = "saturday_late_night"
    HOLIDAY = "holiday"
    HOLIDAY_LATE_NIGHT = "holiday_late_night"
    LEGAL_HOLIDAY = "legal_holiday"
    LEGAL_HOLIDAY_LATE_NIGHT = "legal_holiday_late_night"

    @property
    def rate_label(self) -> str:
        """Key of the matching row in ``overtime_rates.overtime_type``."""
        return _RATE_LABELS[self]

    @property
    def day_type(self) -> DayType:
        return _FAMILIES[self]


_RATE_LABELS = {
    OvertimeCategory.LATE_NIGHT: "深夜時間",
    OvertimeCategory.INNER_LATE_NIGHT: "内深夜時間",
    OvertimeCategory.EARLY: "早出時間",
    # Saturday and holiday share one rate row.
    OvertimeCategory.SATURDAY: "土・祝時間",
    OvertimeCategory.SATURDAY_LATE_NIGHT: "土・祝深夜時間",
    OvertimeCategory.HOLIDAY: "土・祝時間",
    OvertimeCategory.HOLIDAY_LATE_NIGHT: "土・祝深夜時間",
    OvertimeCategory.LEGAL_HOLIDAY: "法定休日",
    OvertimeCategory.LEGAL_HOLIDAY_LATE_NIGHT: "法定休日深夜",
}

_FAMILIES = {
    OvertimeCategory.LATE_NIGHT: DayType.WEEKDAY,
    OvertimeCategory.INNER_LATE_NIGHT: DayType.WEEKDAY,
    OvertimeCategory.EARLY: DayType.WEEKDAY,
    OvertimeCategory.SATURDAY: DayType.SATURDAY,
    OvertimeCategory.SATURDAY_LATE_NIGHT: DayType.SATURDAY,
    OvertimeCategory.HOLIDAY: DayType.HOLIDAY,
    OvertimeCategory.HOLIDAY_LATE_NIGHT: DayType.HOLIDAY,
    OvertimeCategory.LEGAL_HOLIDAY: DayType.LEGAL_HOLIDAY,
    OvertimeCategory.LEGAL_HOLIDAY_LATE_NIGHT: DayType.LEGAL_HOLIDAY,
}


class AllowanceType(str, Enum):
    """Per-event allowances; values are the ``allowance_rates.allowance_type`` keys."""

    VACUUM = "バキューム"
    CAR_STAY = "車泊"
    BOARDING = "乗船"
    TRAINING = "研修/会議"
    GUIDANCE = "指導"
