from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Driver
from .repository import DriverRepository

_COLUMNS = """
    driver_id, name, employee_number, hire_date, termination_date,
    is_active, display_order, dispatch_order
"""


def _to_driver(r: dict) -> Driver:
    return Driver(
        driver_id=int(r["driver_id"]),
        name=r["name"],
        employee_number=r.get("employee_number"),
        hire_date=r["hire_date"],
        termination_date=r.get("termination_date"),
        is_active=bool(r.get("is_active", 1)),
        display_order=int(r.get("display_order") or 0),
        dispatch_order=int(r["dispatch_order"]) if r.get("dispatch_order") is not None else None,
    )


class MySQLDriverRepository(DriverRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, driver_id: int) -> Optional[Driver]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM drivers WHERE driver_id=%s", (int(driver_id),))
            r = fetchone(cur)
            return _to_driver(r) if r else None

    def list_active(self) -> Sequence[Driver]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM drivers
                WHERE is_active=1
                ORDER BY dispatch_order IS NULL, dispatch_order ASC, display_order ASC, driver_id ASC
                """
            )
            return [_to_driver(r) for r in fetchall(cur)]
