from __future__ import annotations

import pytest

from src.driver_payroll.driver_payroll.core.enums import DayType, OvertimeCategory
from src.driver_payroll.driver_payroll.core.exceptions import InvalidFormatError, ValidationError
from src.driver_payroll.driver_payroll.overtime.model import BreakAdjustment, CategoryBreakdown, ShiftInput


def test_day_type_flags_are_exclusive():
    assert DayType.from_flags() == DayType.WEEKDAY
    assert DayType.from_flags(is_legal_holiday=True) == DayType.LEGAL_HOLIDAY

    with pytest.raises(ValidationError):
        DayType.from_flags(is_saturday=True, is_holiday=True)


def test_shift_input_rejects_out_of_range_minutes():
    with pytest.raises(ValidationError):
        ShiftInput(start_minute=1440, end_minute=60)

    with pytest.raises(ValidationError):
        ShiftInput(start_minute=0, end_minute=60, transfer_minutes=-1)


def test_breakdown_from_row_reads_hour_columns():
    row = {"early_hours": 1.5, "late_night_hours": None, "saturday_hours": "2.25"}

    breakdown = CategoryBreakdown.from_row(row)

    assert breakdown.early == 1.5
    assert breakdown.late_night == 0.0
    assert breakdown.saturday == 2.25
    assert breakdown.total_hours == pytest.approx(3.75)
    assert breakdown.non_zero_categories() == {OvertimeCategory.EARLY, OvertimeCategory.SATURDAY}


def test_rate_labels_are_shared_by_saturday_and_holiday():
    assert OvertimeCategory.SATURDAY.rate_label == OvertimeCategory.HOLIDAY.rate_label
    assert OvertimeCategory.LEGAL_HOLIDAY.rate_label == "法定休日"


def test_numeric_break_adjustment_is_a_format_error():
    with pytest.raises(InvalidFormatError):
        BreakAdjustment.parse(30)
