from __future__ import annotations

from datetime import date
from typing import Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_float, db_cursor, fetchall
from .model import AllowanceRate, OvertimeRate
from .repository import RateRepository


class MySQLRateRepository(RateRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_overtime_rates(self, *, as_of: date) -> Sequence[OvertimeRate]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT rate_id, overtime_type, hourly_rate, effective_date
                FROM overtime_rates
                WHERE effective_date <= %s
                ORDER BY effective_date DESC
                """,
                (as_of,),
            )
            return [
                OvertimeRate(
                    rate_id=int(r["rate_id"]),
                    overtime_type=r["overtime_type"],
                    hourly_rate=as_float(r["hourly_rate"]),
                    effective_date=r["effective_date"],
                )
                for r in fetchall(cur)
            ]

    def list_allowance_rates(self, *, as_of: date) -> Sequence[AllowanceRate]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT rate_id, allowance_type, amount, effective_date
                FROM allowance_rates
                WHERE effective_date <= %s
                ORDER BY effective_date DESC
                """,
                (as_of,),
            )
            return [
                AllowanceRate(
                    rate_id=int(r["rate_id"]),
                    allowance_type=r["allowance_type"],
                    amount=as_float(r["amount"]),
                    effective_date=r["effective_date"],
                )
                for r in fetchall(cur)
            ]
