from __future__ import annotations

from datetime import date
from types import SimpleNamespace

import pytest
from flask import Flask

from src.driver_payroll.driver_payroll.drivers.model import Driver
from src.driver_payroll.driver_payroll.overtime.controller import register as register_overtime
from src.driver_payroll.driver_payroll.overtime.service import OvertimeService
from src.driver_payroll.driver_payroll.payroll.model import CarStayMatrix, CarStayRow
from src.driver_payroll.driver_payroll.payroll.controller import register as register_payroll


class FakeDriversRepo:
    def get_by_id(self, driver_id):
        if int(driver_id) == 1:
            return Driver(driver_id=1, name="Sato", hire_date=date(2020, 4, 1))
        return None


class FakeOvertimeRepo:
    def __init__(self):
        self.saved = []

    def get_for_driver_and_date(self, driver_id, work_date):
        return next((r for r in self.saved if (r.driver_id, r.work_date) == (driver_id, work_date)), None)

    def upsert(self, record):
        self.saved.append(record)
        return len(self.saved)

    def list_for_period(self, *, start, end, driver_id=None):
        return [r for r in self.saved if start <= r.work_date <= end]

    def delete(self, *, record_id):
        return False


class BrokenReportService:
    def build_driver_report(self, *, driver_id, start, end):
        raise RuntimeError("database is down")


@pytest.fixture
def client():
    app = Flask(__name__)
    container = SimpleNamespace(
        overtime_service=OvertimeService(FakeOvertimeRepo(), FakeDriversRepo()),
        report_service=BrokenReportService(),
    )
    register_overtime(app, container)
    register_payroll(app, container)
    return app.test_client()


def test_calculate_endpoint(client):
    resp = client.post(
        "/api/overtime/calculate",
        json={"start_time": "08:00", "end_time": "20:00", "break_time": "+00:00", "transfer_time": "00:30"},
    )

    body = resp.get_json()
    assert resp.status_code == 200
    assert body["result"]["hours"]["early"] == 3.5
    assert body["result"]["formatted"]["early"] == "3:30"


def test_calculate_endpoint_without_times_returns_no_result(client):
    resp = client.post("/api/overtime/calculate", json={"start_time": "08:00"})

    assert resp.status_code == 200
    assert resp.get_json()["result"] is None


def test_calculate_endpoint_maps_format_error_to_400(client):
    resp = client.post("/api/overtime/calculate", json={"start_time": "8", "end_time": "17:00"})

    assert resp.status_code == 400
    assert resp.get_json()["success"] is False


def test_conflicting_day_type_flags_are_rejected(client):
    resp = client.post(
        "/api/overtime/calculate",
        json={"start_time": "08:00", "end_time": "17:00", "is_saturday": True, "is_holiday": True},
    )

    assert resp.status_code == 400


def test_save_endpoint(client):
    resp = client.put(
        "/api/overtime/records",
        json={
            "driver_id": 1,
            "work_date": "2026-03-02",
            "start_time": "08:00",
            "end_time": "18:00",
            "day_type": "legal_holiday",
            "is_car_stay": True,
        },
    )

    body = resp.get_json()
    assert resp.status_code == 200
    assert body["record_id"] == 1
    assert body["result"]["formatted"]["legal_holiday"] == "10:00"


def test_save_endpoint_unknown_driver_is_404(client):
    resp = client.put(
        "/api/overtime/records",
        json={"driver_id": 3, "work_date": "2026-03-02", "start_time": "08:00", "end_time": "17:00"},
    )

    assert resp.status_code == 404


def test_delete_missing_record_is_404(client):
    assert client.delete("/api/overtime/records/42").status_code == 404


def test_unexpected_error_is_500(client):
    resp = client.get("/api/reports/monthly?driver_id=1&start=2026-02-21&end=2026-03-20")

    assert resp.status_code == 500
    assert resp.get_json()["message"] == "Internal server error"


def test_numeric_time_value_is_rejected_with_400(client):
    resp = client.post("/api/overtime/calculate", json={"start_time": 8, "end_time": "17:00"})

    assert resp.status_code == 400
    assert "start_time" in resp.get_json()["message"]


class CarStayReportService:
    def car_stay_matrix(self, *, start, end):
        row = CarStayRow(driver_id=1, driver_name="Sato", counts={start: 1})
        return CarStayMatrix(period_start=start, period_end=end, dates=[start, end], rows=[row])


def test_car_stay_report_endpoint():
    app = Flask(__name__)
    register_payroll(app, SimpleNamespace(report_service=CarStayReportService()))

    resp = app.test_client().get("/api/reports/car-stay?start=2026-02-21&end=2026-02-22")

    report = resp.get_json()["report"]
    assert resp.status_code == 200
    assert report["dates"] == ["2026-02-21", "2026-02-22"]
    assert report["rows"][0]["counts"] == [1, 0]
    assert report["day_totals"] == [1, 0]
    assert report["grand_total"] == 1
