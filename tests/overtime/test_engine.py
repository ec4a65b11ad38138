from __future__ import annotations

import pytest

from src.driver_payroll.driver_payroll.core.enums import DayType, OvertimeCategory
from src.driver_payroll.driver_payroll.core.exceptions import InvalidFormatError
from src.driver_payroll.driver_payroll.overtime.break_policies.additive_deficit import AdditiveDeficitBreakPolicy
from src.driver_payroll.driver_payroll.overtime.engine import OvertimeEngine, compute_breakdown
from src.driver_payroll.driver_payroll.overtime.model import ShiftInput


def test_standard_day_has_no_overtime():
    result = compute_breakdown("08:00", "17:00", "+00:00", None, DayType.WEEKDAY)

    assert result.early == 0
    assert result.late_night == 0
    assert result.total_hours == 0


def test_long_weekday_overtime_and_transfer_are_early():
    result = compute_breakdown("08:00", "20:00", "+00:00", "00:30", DayType.WEEKDAY)

    assert result.early == pytest.approx(3.5)
    assert result.late_night == 0
    assert result.inner_late_night == 0


def test_legal_holiday_pays_whole_shift():
    result = compute_breakdown("08:00", "18:00", "+00:00", None, DayType.LEGAL_HOLIDAY)

    assert result.legal_holiday == pytest.approx(10.0)
    assert result.legal_holiday_late_night == 0


def test_legal_holiday_surplus_break_adds_time():
    result = compute_breakdown("08:00", "18:00", "+00:30", None, DayType.LEGAL_HOLIDAY)

    assert result.legal_holiday == pytest.approx(10.5)


def test_overnight_weekday_shift_is_inner_late_night():
    result = compute_breakdown("22:00", "05:00", None, None, DayType.WEEKDAY)

    # Daytime-origin start: the window opens at 22:15.
    assert result.inner_late_night == pytest.approx(6.75)
    assert result.late_night == 0
    assert result.early == 0


def test_early_origin_start_uses_22_00_window():
    result = compute_breakdown("03:00", "12:00", "+00:00", None, DayType.WEEKDAY)

    assert result.inner_late_night == pytest.approx(2.0)
    assert result.early == 0


def test_half_hour_of_overtime_is_early():
    result = compute_breakdown("06:00", "15:30", "+00:00", None, DayType.WEEKDAY)

    assert result.early == pytest.approx(0.5)
    assert result.inner_late_night == 0


def test_overtime_is_paid_as_late_night_first():
    result = compute_breakdown("04:30", "14:00", "+00:00", None, DayType.WEEKDAY)

    # 30 minutes of overtime, 30 minutes worked before 05:00.
    assert result.late_night == pytest.approx(0.5)
    assert result.inner_late_night == 0
    assert result.early == 0


def test_nine_hours_duty_is_the_long_shift_boundary():
    result = compute_breakdown("05:30", "15:30", "+00:00", None, DayType.WEEKDAY)

    assert result.early == pytest.approx(1.0)
    assert result.inner_late_night == 0


def test_early_origin_long_shift_pays_late_night_overtime():
    result = compute_breakdown("04:00", "14:00", "+00:00", None, DayType.WEEKDAY)

    assert result.late_night == pytest.approx(1.0)
    assert result.early == 0
    assert result.inner_late_night == 0


def test_deficit_break_at_end_is_excluded_from_late_night():
    result = compute_breakdown("14:00", "23:30", "-00:30", None, DayType.WEEKDAY)

    # Overtime of 1h: 45 minutes after 22:15, the rest before it.
    assert result.late_night == pytest.approx(0.75)
    assert result.early == pytest.approx(0.25)
    assert result.inner_late_night == 0


def test_full_day_shift_when_start_equals_end():
    result = compute_breakdown("08:00", "08:00", "+00:00", None, DayType.WEEKDAY)

    assert result.late_night == pytest.approx(6.75)
    assert result.early == pytest.approx(8.25)


def test_break_policy_changes_deficit_handling():
    signed = compute_breakdown("08:00", "19:00", "-00:30", None, DayType.WEEKDAY)
    additive = compute_breakdown(
        "08:00", "19:00", "-00:30", None, DayType.WEEKDAY, policy=AdditiveDeficitBreakPolicy()
    )

    assert signed.early == pytest.approx(2.5)
    assert additive.early == pytest.approx(1.5)


def test_saturday_long_shift_caps_late_night_at_overtime():
    result = compute_breakdown("14:00", "01:00", "+00:00", None, DayType.SATURDAY)

    assert result.saturday_late_night == pytest.approx(2.0)
    assert result.saturday == pytest.approx(9.0)


def test_saturday_transfer_is_saturday_time():
    result = compute_breakdown("08:00", "17:00", "+00:00", "00:30", DayType.SATURDAY)

    assert result.saturday == pytest.approx(9.5)
    assert result.saturday_late_night == 0
    assert result.early == 0


def test_holiday_splits_late_night():
    result = compute_breakdown("20:00", "02:00", "+00:00", None, DayType.HOLIDAY)

    assert result.holiday == pytest.approx(2.25)
    assert result.holiday_late_night == pytest.approx(3.75)


@pytest.mark.parametrize("day_type", list(DayType))
def test_only_the_day_type_family_is_non_zero(day_type):
    result = compute_breakdown("14:00", "03:00", "-00:15", "01:00", day_type)

    assert result.non_zero_categories()
    assert all(c.day_type == day_type for c in result.non_zero_categories())


@pytest.mark.parametrize("start,end", [("", "17:00"), ("08:00", None), ("  ", "  ")])
def test_missing_start_or_end_gives_no_result(start, end):
    assert compute_breakdown(start, end) is None


@pytest.mark.parametrize("value", ["8", "8:0:0", "aa:bb", "24:00", "08:60", 8, 8.5])
def test_malformed_time_raises(value):
    with pytest.raises(InvalidFormatError):
        compute_breakdown(value, "17:00")


def test_engine_is_idempotent():
    engine = OvertimeEngine()
    shift = ShiftInput.from_text("21:00", "09:30", "-00:20", "00:10", DayType.WEEKDAY)

    assert engine.compute(shift) == engine.compute(shift)


def test_categories_are_never_negative():
    # A tiny shift with a large deficit break.
    result = compute_breakdown("08:00", "08:30", "-02:00", None, DayType.HOLIDAY, policy=AdditiveDeficitBreakPolicy())

    assert all(result.hours(c) >= 0 for c in OvertimeCategory)
    assert result.holiday == 0


@pytest.mark.parametrize("day_type", [DayType.HOLIDAY, DayType.LEGAL_HOLIDAY])
def test_rest_day_total_is_duty_plus_transfer(day_type):
    result = compute_breakdown("21:00", "07:30", "+00:15", "00:45", day_type)

    # 10.5h span, 45 minutes break, plus the 1h reference break and 45 minutes transfer.
    assert result.total_hours == pytest.approx(10.5 - 0.75 + 1.0 + 0.75)


@pytest.mark.parametrize(
    "start,end,break_time,transfer,expected_minutes",
    [
        ("08:00", "20:00", "+00:00", "00:30", 180 + 30),
        ("14:00", "03:00", "-00:15", "01:00", 285 + 60),
        ("21:00", "09:30", "-00:20", "00:10", 250 + 10),
    ],
)
def test_long_weekday_total_is_overtime_plus_transfer(start, end, break_time, transfer, expected_minutes):
    result = compute_breakdown(start, end, break_time, transfer, DayType.WEEKDAY)

    assert result.total_hours == pytest.approx(expected_minutes / 60)


@pytest.mark.parametrize(
    "start,end,break_time,transfer,expected_minutes",
    [
        ("14:00", "01:00", "+00:00", None, 660),
        ("08:00", "17:00", "+00:00", "00:30", 540 + 30),
        ("21:00", "09:30", "-00:20", "00:10", 790 + 10),
    ],
)
def test_saturday_total_is_duty_plus_transfer(start, end, break_time, transfer, expected_minutes):
    result = compute_breakdown(start, end, break_time, transfer, DayType.SATURDAY)

    assert result.total_hours == pytest.approx(expected_minutes / 60)


def test_standard_weekday_total_is_inner_late_night_plus_transfer():
    result = compute_breakdown("22:00", "05:00", "+00:00", "00:20", DayType.WEEKDAY)

    assert result.total_hours == pytest.approx((405 + 20) / 60)
