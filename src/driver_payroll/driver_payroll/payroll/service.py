from __future__ import annotations

import logging
from collections import defaultdict
from datetime import date, timedelta
from typing import Optional, Sequence

from ..common.validators import require_non_negative, require_period
from ..core.enums import AllowanceType, OvertimeCategory
from ..core.exceptions import NotFoundError
from ..drivers.model import Driver
from ..drivers.repository import DriverRepository
from ..overtime.model import DailyOvertimeRecord
from ..overtime.repository import OvertimeRecordRepository
from ..rates.service import RateSnapshot, RateTable
from .calculator.base import PayrollCalculator
from .calculator.standard_calculator import StandardPayrollCalculator
from .model import CarStayMatrix, CarStayRow, MonthlyRecord, MonthlyReport
from .repository import MonthlyRecordRepository

logger = logging.getLogger(__name__)

_COUNT_FIELDS = {
    AllowanceType.VACUUM: "vacuum_count",
    AllowanceType.CAR_STAY: "car_stay_count",
    AllowanceType.BOARDING: "boarding_count",
    AllowanceType.TRAINING: "training_count",
    AllowanceType.GUIDANCE: "guidance_count",
}


def _dispatch_key(driver: Driver) -> tuple:
    return (driver.dispatch_order is None, driver.dispatch_order or 0, driver.display_order, driver.driver_id)


class MonthlyReportService:
    def __init__(
        self,
        records: OvertimeRecordRepository,
        drivers: DriverRepository,
        monthly: MonthlyRecordRepository,
        rates: RateTable,
        *,
        calculator: Optional[PayrollCalculator] = None,
    ):
        self._records = records
        self._drivers = drivers
        self._monthly = monthly
        self._rates = rates
        self._calculator = calculator or StandardPayrollCalculator()

    def build_driver_report(self, *, driver_id: int, start: date, end: date) -> MonthlyReport:
        require_period(start, end)
        driver = self._drivers.get_by_id(driver_id)
        if not driver:
            raise NotFoundError(f"Driver {driver_id} does not exist")

        records = self._records.list_for_period(start=start, end=end, driver_id=driver_id)
        return self._build(driver, records, start=start, end=end, rates=self._rates.snapshot(end))

    def build_all_drivers_report(self, *, start: date, end: date) -> list[MonthlyReport]:
        """One report per driver with records in the period, in dispatch order."""
        require_period(start, end)
        by_driver: dict[int, list[DailyOvertimeRecord]] = defaultdict(list)
        for r in self._records.list_for_period(start=start, end=end):
            by_driver[r.driver_id].append(r)
        if not by_driver:
            return []

        drivers = []
        for driver_id in by_driver:
            driver = self._drivers.get_by_id(driver_id)
            if driver is None:
                logger.warning("Skipping overtime records of unknown driver %s", driver_id)
                continue
            drivers.append(driver)

        rates = self._rates.snapshot(end)
        return [
            self._build(d, by_driver[d.driver_id], start=start, end=end, rates=rates)
            for d in sorted(drivers, key=_dispatch_key)
        ]

    def car_stay_matrix(self, *, start: date, end: date) -> CarStayMatrix:
        """Car-stay counts of the active drivers for every day of [start, end]."""
        require_period(start, end)
        dates = [start + timedelta(days=i) for i in range((end - start).days + 1)]
        drivers = list(self._drivers.list_active())
        counts: dict[int, dict[date, int]] = {d.driver_id: {} for d in drivers}
        for r in self._records.list_for_period(start=start, end=end):
            if r.driver_id in counts and r.car_stay_count:
                counts[r.driver_id][r.work_date] = r.car_stay_count

        return CarStayMatrix(
            period_start=start,
            period_end=end,
            dates=dates,
            rows=[CarStayRow(d.driver_id, d.name, counts[d.driver_id]) for d in drivers],
        )

    def save_monthly_input(
        self,
        *,
        driver_id: int,
        period_start: date,
        period_end: date,
        phone_allowance: float = 0.0,
        revenue_sales: float = 0.0,
        accident_free_amount: float = 0.0,
    ) -> int:
        require_period(period_start, period_end)
        if not self._drivers.get_by_id(driver_id):
            raise NotFoundError(f"Driver {driver_id} does not exist")

        record = MonthlyRecord(
            driver_id=int(driver_id),
            period_start=period_start,
            period_end=period_end,
            phone_allowance=require_non_negative(float(phone_allowance), "phone_allowance"),
            revenue_sales=require_non_negative(float(revenue_sales), "revenue_sales"),
            accident_free_amount=require_non_negative(float(accident_free_amount), "accident_free_amount"),
        )
        return self._monthly.upsert(record)

    def _build(
        self,
        driver: Driver,
        records: Sequence[DailyOvertimeRecord],
        *,
        start: date,
        end: date,
        rates: RateSnapshot,
    ) -> MonthlyReport:
        hours = {c: sum(r.breakdown.hours(c) for r in records) for c in OvertimeCategory}
        counts = {t: sum(getattr(r, f) for r in records) for t, f in _COUNT_FIELDS.items()}
        monthly = self._monthly.get_for_driver_in_range(driver_id=driver.driver_id, start=start, end=end)

        return MonthlyReport(
            driver_id=driver.driver_id,
            driver_name=driver.name,
            period_start=start,
            period_end=end,
            hours=hours,
            amounts={c: self._calculator.overtime_amount(c, h, rates) for c, h in hours.items()},
            allowance_counts=counts,
            allowance_amounts={t: self._calculator.allowance_amount(t, n, rates) for t, n in counts.items()},
            phone_allowance=monthly.phone_allowance if monthly else 0.0,
            revenue_sales=monthly.revenue_sales if monthly else 0.0,
            accident_free_amount=monthly.accident_free_amount if monthly else 0.0,
        )
