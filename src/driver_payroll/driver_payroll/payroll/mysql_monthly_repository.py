from __future__ import annotations

from datetime import date
from typing import Optional

from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_float, db_cursor, fetchone
from .model import MonthlyRecord
from .repository import MonthlyRecordRepository


class MySQLMonthlyRecordRepository(MonthlyRecordRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_for_driver_in_range(self, *, driver_id: int, start: date, end: date) -> Optional[MonthlyRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT monthly_record_id, driver_id, period_start, period_end,
                       phone_allowance, revenue_sales, accident_free_amount
                FROM monthly_records
                WHERE driver_id=%s AND period_start BETWEEN %s AND %s
                ORDER BY period_start ASC
                LIMIT 1
                """,
                (int(driver_id), start, end),
            )
            r = fetchone(cur)
            if not r:
                return None
            return MonthlyRecord(
                monthly_record_id=int(r["monthly_record_id"]),
                driver_id=int(r["driver_id"]),
                period_start=r["period_start"],
                period_end=r["period_end"],
                phone_allowance=as_float(r["phone_allowance"]),
                revenue_sales=as_float(r["revenue_sales"]),
                accident_free_amount=as_float(r["accident_free_amount"]),
            )

    def upsert(self, record: MonthlyRecord) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO monthly_records(
                    driver_id, period_start, period_end, phone_allowance, revenue_sales, accident_free_amount
                )
                VALUES(%s,%s,%s,%s,%s,%s)
                ON DUPLICATE KEY UPDATE
                    period_end=VALUES(period_end),
                    phone_allowance=VALUES(phone_allowance),
                    revenue_sales=VALUES(revenue_sales),
                    accident_free_amount=VALUES(accident_free_amount)
                """,
                (
                    int(record.driver_id),
                    record.period_start,
                    record.period_end,
                    record.phone_allowance,
                    record.revenue_sales,
                    record.accident_free_amount,
                ),
            )
            if cur.lastrowid:
                return int(cur.lastrowid)

            cur.execute(
                "SELECT monthly_record_id FROM monthly_records WHERE driver_id=%s AND period_start=%s",
                (int(record.driver_id), record.period_start),
            )
            r = fetchone(cur)
            return int(r["monthly_record_id"]) if r else 0
