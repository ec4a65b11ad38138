from __future__ import annotations

from datetime import date

import pytest

from src.driver_payroll.driver_payroll.common.datetime_utils import default_pay_period, parse_iso_date
from src.driver_payroll.driver_payroll.common.time_utils import (
    format_duration,
    format_hours,
    minutes_to_hours,
    parse_clock,
    parse_duration,
)
from src.driver_payroll.driver_payroll.core.exceptions import InvalidFormatError


@pytest.mark.parametrize(
    "hours,expected",
    [
        (7.5, "7:30"),
        (0, "0:00"),
        (0.25, "0:15"),
        (10.0, "10:00"),
        (1.9999, "2:00"),
        (2 + 1 / 60, "2:01"),
    ],
)
def test_format_hours(hours, expected):
    assert format_hours(hours) == expected


def test_parse_clock_and_duration():
    assert parse_clock("00:00") == 0
    assert parse_clock("23:59") == 23 * 60 + 59
    assert parse_duration("30:15") == 30 * 60 + 15
    assert parse_duration(None) == 0
    assert parse_duration("  ") == 0


@pytest.mark.parametrize("value", ["8", "", "08:5a", "-1:00", "08:00:00"])
def test_parse_clock_rejects_malformed(value):
    with pytest.raises(InvalidFormatError):
        parse_clock(value)


def test_minutes_to_hours_clamps_negative():
    assert minutes_to_hours(90) == 1.5
    assert minutes_to_hours(-15) == 0


def test_format_duration_pads():
    assert format_duration(5) == "00:05"
    assert format_duration(125) == "02:05"


@pytest.mark.parametrize(
    "today,expected",
    [
        (date(2026, 3, 5), (date(2026, 2, 21), date(2026, 3, 20))),
        (date(2026, 3, 21), (date(2026, 3, 21), date(2026, 4, 20))),
        (date(2026, 12, 25), (date(2026, 12, 21), date(2027, 1, 20))),
        (date(2026, 1, 20), (date(2025, 12, 21), date(2026, 1, 20))),
    ],
)
def test_default_pay_period_runs_21st_to_20th(today, expected):
    assert default_pay_period(today) == expected


def test_parse_iso_date():
    assert parse_iso_date("2026-03-21") == date(2026, 3, 21)

    with pytest.raises(InvalidFormatError):
        parse_iso_date("21/03/2026")
