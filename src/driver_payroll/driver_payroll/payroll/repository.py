from __future__ import annotations

from datetime import date
from typing import Optional, Protocol

from .model import MonthlyRecord


class MonthlyRecordRepository(Protocol):
    def get_for_driver_in_range(self, *, driver_id: int, start: date, end: date) -> Optional[MonthlyRecord]:
        """The earliest record whose period_start falls in [start, end]."""

        raise NotImplementedError

    def upsert(self, record: MonthlyRecord) -> int:
        """Create or replace the record for (driver_id, period_start)."""

        raise NotImplementedError
