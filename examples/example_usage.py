"""Use the overtime engine and services directly, without Flask.

The engine needs no database; the history call reads the configured one.
"""

import importlib

from config import get_settings_module

from src.driver_payroll.driver_payroll.common.datetime_utils import default_pay_period
from src.driver_payroll.driver_payroll.common.time_utils import format_hours
from src.driver_payroll.driver_payroll.container import build_container
from src.driver_payroll.driver_payroll.core.enums import DayType
from src.driver_payroll.driver_payroll.overtime.engine import compute_breakdown


def main():
    breakdown = compute_breakdown("08:00", "20:00", "+00:00", "00:30", DayType.WEEKDAY)
    for category in breakdown.non_zero_categories():
        print(category.rate_label, format_hours(breakdown.hours(category)))

    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG, break_policy=settings.BREAK_POLICY)
    start, end = default_pay_period()
    print(container.overtime_service.history(driver_id=1, start=start, end=end, limit=5))


if __name__ == "__main__":
    main()
