from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date
from typing import Optional

from ..common.time_utils import format_hours, require_text
from ..common.validators import require_period
from ..core.constants import DEFAULT_HISTORY_LIMIT
from ..core.enums import DayType, OvertimeCategory
from ..core.exceptions import NotFoundError, ValidationError
from ..drivers.repository import DriverRepository
from .engine import OvertimeEngine
from .model import BreakAdjustment, CategoryBreakdown, DailyOvertimeRecord, ShiftInput
from .repository import OvertimeRecordRepository

logger = logging.getLogger(__name__)


class OvertimeService:
    def __init__(
        self,
        records: OvertimeRecordRepository,
        drivers: DriverRepository,
        *,
        engine: Optional[OvertimeEngine] = None,
    ):
        self._records = records
        self._drivers = drivers
        self._engine = engine or OvertimeEngine()

    def calculate(
        self,
        *,
        start_time: Optional[str],
        end_time: Optional[str],
        break_time: Optional[str] = None,
        transfer_time: Optional[str] = None,
        day_type: DayType = DayType.WEEKDAY,
    ) -> Optional[CategoryBreakdown]:
        """Breakdown for the given form values, or None while start/end are still empty."""
        start_time = require_text(start_time, "start_time")
        end_time = require_text(end_time, "end_time")
        break_time = require_text(break_time, "break_time")
        transfer_time = require_text(transfer_time, "transfer_time")
        if not (start_time or "").strip() or not (end_time or "").strip():
            return None
        shift = ShiftInput.from_text(start_time, end_time, break_time, transfer_time, day_type)
        return self._engine.compute(shift)

    def save(
        self,
        *,
        driver_id: int,
        work_date: date,
        start_time: Optional[str],
        end_time: Optional[str],
        break_time: Optional[str] = None,
        transfer_time: Optional[str] = None,
        day_type: DayType = DayType.WEEKDAY,
        vacuum_count: int = 0,
        car_stay_count: int = 0,
        boarding_count: int = 0,
        training_count: int = 0,
        guidance_count: int = 0,
    ) -> DailyOvertimeRecord:
        """Calculate and store the record for (driver, work date); an existing one is replaced."""
        if not self._drivers.get_by_id(driver_id):
            raise NotFoundError(f"Driver {driver_id} does not exist")

        breakdown = self.calculate(
            start_time=start_time,
            end_time=end_time,
            break_time=break_time,
            transfer_time=transfer_time,
            day_type=day_type,
        )
        if breakdown is None:
            raise ValidationError("Start time and end time are required")

        counts = dict(
            vacuum_count=vacuum_count,
            car_stay_count=car_stay_count,
            boarding_count=boarding_count,
            training_count=training_count,
            guidance_count=guidance_count,
        )
        for name, value in counts.items():
            if int(value) < 0:
                raise ValidationError(f"{name} must not be negative")

        record = DailyOvertimeRecord(
            driver_id=int(driver_id),
            work_date=work_date,
            breakdown=breakdown,
            start_time=start_time.strip(),
            end_time=end_time.strip(),
            break_time=str(BreakAdjustment.parse(break_time)),
            transfer_time=(transfer_time or "").strip() or None,
            **{name: int(value) for name, value in counts.items()},
        )
        replaced = self._records.get_for_driver_and_date(driver_id, work_date) is not None
        record_id = self._records.upsert(record)
        logger.info(
            "%s overtime record %s for driver %s on %s (%.2fh, policy=%s)",
            "Replaced" if replaced else "Saved",
            record_id,
            driver_id,
            work_date,
            breakdown.total_hours,
            self._engine.policy.name,
        )
        return replace(record, record_id=record_id)

    def delete(self, *, record_id: int) -> None:
        if not self._records.delete(record_id=int(record_id)):
            raise NotFoundError(f"Overtime record {record_id} does not exist")

    def history(self, *, driver_id: int, start: date, end: date, limit: int = DEFAULT_HISTORY_LIMIT) -> list[dict]:
        require_period(start, end)
        rows = self._records.list_for_period(start=start, end=end, driver_id=driver_id)
        return [self._to_ui(r) for r in list(rows)[:limit]]

    def _to_ui(self, r: DailyOvertimeRecord) -> dict:
        return {
            "record_id": r.record_id,
            "driver_id": r.driver_id,
            "work_date": r.work_date.strftime("%Y-%m-%d"),
            "start_time": r.start_time or "-",
            "end_time": r.end_time or "-",
            "break_time": r.break_time or "",
            "transfer_time": r.transfer_time or "",
            "hours": {c.value: format_hours(r.breakdown.hours(c)) for c in OvertimeCategory},
            "total_hours": format_hours(r.breakdown.total_hours),
            "car_stay_count": r.car_stay_count,
        }
