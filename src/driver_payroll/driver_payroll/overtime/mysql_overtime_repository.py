from __future__ import annotations

from dataclasses import fields
from datetime import date
from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import CategoryBreakdown, DailyOvertimeRecord
from .repository import OvertimeRecordRepository

_HOUR_COLUMNS = [f"{f.name}_hours" for f in fields(CategoryBreakdown)]
_RAW_COLUMNS = ["start_time", "end_time", "break_time", "transfer_time"]
_COUNT_COLUMNS = ["vacuum_count", "car_stay_count", "boarding_count", "training_count", "guidance_count"]
_WRITE_COLUMNS = ["driver_id", "work_date", *_HOUR_COLUMNS, *_RAW_COLUMNS, *_COUNT_COLUMNS]
_SELECT = ", ".join(["record_id", *_WRITE_COLUMNS])


def _to_record(r: dict) -> DailyOvertimeRecord:
    return DailyOvertimeRecord(
        record_id=int(r["record_id"]),
        driver_id=int(r["driver_id"]),
        work_date=r["work_date"],
        breakdown=CategoryBreakdown.from_row(r),
        **{c: r.get(c) for c in _RAW_COLUMNS},
        **{c: int(r.get(c) or 0) for c in _COUNT_COLUMNS},
    )


def _to_params(record: DailyOvertimeRecord) -> tuple:
    return (
        int(record.driver_id),
        record.work_date,
        *record.breakdown.to_dict().values(),
        *(getattr(record, c) for c in _RAW_COLUMNS),
        *(int(getattr(record, c)) for c in _COUNT_COLUMNS),
    )


class MySQLOvertimeRecordRepository(OvertimeRecordRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_for_driver_and_date(self, driver_id: int, work_date: date) -> Optional[DailyOvertimeRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_SELECT} FROM daily_overtime_records WHERE driver_id=%s AND work_date=%s",
                (int(driver_id), work_date),
            )
            r = fetchone(cur)
            return _to_record(r) if r else None

    def upsert(self, record: DailyOvertimeRecord) -> int:
        placeholders = ",".join(["%s"] * len(_WRITE_COLUMNS))
        updates = ", ".join(f"{c}=VALUES({c})" for c in _WRITE_COLUMNS[2:])
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                INSERT INTO daily_overtime_records({", ".join(_WRITE_COLUMNS)})
                VALUES({placeholders})
                ON DUPLICATE KEY UPDATE {updates}
                """,
                _to_params(record),
            )

            # If it was an update, lastrowid can be 0; fetch record_id.
            if cur.lastrowid:
                return int(cur.lastrowid)

            cur.execute(
                "SELECT record_id FROM daily_overtime_records WHERE driver_id=%s AND work_date=%s",
                (int(record.driver_id), record.work_date),
            )
            r = fetchone(cur)
            return int(r["record_id"]) if r else 0

    def list_for_period(
        self,
        *,
        start: date,
        end: date,
        driver_id: Optional[int] = None,
    ) -> Sequence[DailyOvertimeRecord]:
        clauses = ["work_date BETWEEN %s AND %s"]
        params: list[object] = [start, end]
        if driver_id is not None:
            clauses.append("driver_id=%s")
            params.append(int(driver_id))

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_SELECT}
                FROM daily_overtime_records
                WHERE {" AND ".join(clauses)}
                ORDER BY work_date ASC, driver_id ASC
                """,
                tuple(params),
            )
            return [_to_record(r) for r in fetchall(cur)]

    def delete(self, *, record_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM daily_overtime_records WHERE record_id=%s", (int(record_id),))
            return cur.rowcount > 0
