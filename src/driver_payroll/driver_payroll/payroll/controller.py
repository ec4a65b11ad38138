from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.api import date_arg, int_arg, json_body, json_endpoint
from ..common.datetime_utils import default_pay_period
from ..container import Container


def register(app: Flask, container: Container) -> None:
    service = container.report_service

    def _period():
        default_start, default_end = default_pay_period()
        return (
            date_arg(request.args.get("start"), "start", default=default_start),
            date_arg(request.args.get("end"), "end", default=default_end),
        )

    @app.route("/api/reports/monthly", methods=["GET"], endpoint="api_monthly_report")
    @json_endpoint
    def api_monthly_report():
        start, end = _period()
        report = service.build_driver_report(
            driver_id=int_arg(request.args.get("driver_id"), "driver_id"),
            start=start,
            end=end,
        )
        return jsonify({"success": True, "report": report.to_dict()})

    @app.route("/api/reports/monthly/all", methods=["GET"], endpoint="api_monthly_report_all")
    @json_endpoint
    def api_monthly_report_all():
        start, end = _period()
        reports = service.build_all_drivers_report(start=start, end=end)
        return jsonify({"success": True, "reports": [r.to_dict() for r in reports]})

    @app.route("/api/reports/car-stay", methods=["GET"], endpoint="api_car_stay_report")
    @json_endpoint
    def api_car_stay_report():
        start, end = _period()
        matrix = service.car_stay_matrix(start=start, end=end)
        return jsonify({"success": True, "report": matrix.to_dict()})

    @app.route("/api/monthly-records", methods=["PUT"], endpoint="api_monthly_input")
    @json_endpoint
    def api_monthly_input():
        data = json_body()
        default_start, default_end = default_pay_period()
        record_id = service.save_monthly_input(
            driver_id=int_arg(data.get("driver_id"), "driver_id"),
            period_start=date_arg(data.get("period_start"), "period_start", default=default_start),
            period_end=date_arg(data.get("period_end"), "period_end", default=default_end),
            phone_allowance=float(data.get("phone_allowance") or 0),
            revenue_sales=float(data.get("revenue_sales") or 0),
            accident_free_amount=float(data.get("accident_free_amount") or 0),
        )
        return jsonify({"success": True, "monthly_record_id": record_id})
