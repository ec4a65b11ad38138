from __future__ import annotations

from dataclasses import dataclass

from .database.connection import DBConfig, DatabaseConnection
from .drivers.mysql_driver_repository import MySQLDriverRepository
from .drivers.service import DriverService
from .overtime.engine import OvertimeEngine
from .overtime.factory import get_break_policy
from .overtime.mysql_overtime_repository import MySQLOvertimeRecordRepository
from .overtime.service import OvertimeService
from .payroll.mysql_monthly_repository import MySQLMonthlyRecordRepository
from .payroll.service import MonthlyReportService
from .rates.mysql_rate_repository import MySQLRateRepository
from .rates.service import RateTable


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection

    drivers_repo: MySQLDriverRepository
    overtime_repo: MySQLOvertimeRecordRepository
    rates_repo: MySQLRateRepository
    monthly_repo: MySQLMonthlyRecordRepository

    driver_service: DriverService
    engine: OvertimeEngine
    rate_table: RateTable
    overtime_service: OvertimeService
    report_service: MonthlyReportService


def build_container(*, db_config: dict, break_policy: str = "signed_delta") -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))

    drivers_repo = MySQLDriverRepository(conn)
    overtime_repo = MySQLOvertimeRecordRepository(conn)
    rates_repo = MySQLRateRepository(conn)
    monthly_repo = MySQLMonthlyRecordRepository(conn)

    driver_service = DriverService(drivers_repo)
    engine = OvertimeEngine(get_break_policy(break_policy))
    rate_table = RateTable(rates_repo)
    overtime_service = OvertimeService(overtime_repo, drivers_repo, engine=engine)
    report_service = MonthlyReportService(overtime_repo, drivers_repo, monthly_repo, rate_table)

    return Container(
        conn=conn,
        drivers_repo=drivers_repo,
        overtime_repo=overtime_repo,
        rates_repo=rates_repo,
        monthly_repo=monthly_repo,
        driver_service=driver_service,
        engine=engine,
        rate_table=rate_table,
        overtime_service=overtime_service,
        report_service=report_service,
    )
