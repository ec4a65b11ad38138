from __future__ import annotations

from datetime import date

from ..common.validators import require_period
from .model import Driver
from .repository import DriverRepository


class DriverService:
    def __init__(self, drivers: DriverRepository):
        self._drivers = drivers

    def roster(self, *, start: date, end: date) -> list[Driver]:
        """Active drivers employed at some point in [start, end], in dispatch order."""
        require_period(start, end)
        return [d for d in self._drivers.list_active() if d.employed_during(start, end)]

    @staticmethod
    def to_ui(d: Driver) -> dict:
        return {
            "driver_id": d.driver_id,
            "name": d.name,
            "employee_number": d.employee_number or "",
            "hire_date": d.hire_date.strftime("%Y-%m-%d"),
            "termination_date": d.termination_date.strftime("%Y-%m-%d") if d.termination_date else None,
        }
