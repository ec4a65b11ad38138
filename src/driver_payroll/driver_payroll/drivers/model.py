from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass(frozen=True)
class Driver:
    """Roster entry for one driver."""

    driver_id: int
    name: str
    hire_date: date
    employee_number: Optional[str] = None
    termination_date: Optional[date] = None
    is_active: bool = True
    display_order: int = 0
    dispatch_order: Optional[int] = None

    def employed_during(self, start: date, end: date) -> bool:
        if self.hire_date > end:
            return False
        return self.termination_date is None or self.termination_date >= start
