from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import DailyOvertimeRecord


class OvertimeRecordRepository(Protocol):
    def get_for_driver_and_date(self, driver_id: int, work_date: date) -> Optional[DailyOvertimeRecord]:
        raise NotImplementedError

    def upsert(self, record: DailyOvertimeRecord) -> int:
        """Create or replace the record for (driver_id, work_date).

        Returns record_id.
        """

        raise NotImplementedError

    def list_for_period(
        self,
        *,
        start: date,
        end: date,
        driver_id: Optional[int] = None,
    ) -> Sequence[DailyOvertimeRecord]:
        raise NotImplementedError

    def delete(self, *, record_id: int) -> bool:
        raise NotImplementedError
