from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.api import date_arg, day_type_from, int_arg, json_body, json_endpoint
from ..common.datetime_utils import default_pay_period
from ..common.time_utils import format_hours
from ..container import Container
from .model import CategoryBreakdown


def _breakdown_json(breakdown: CategoryBreakdown) -> dict:
    hours = breakdown.to_dict()
    return {
        "hours": hours,
        "formatted": {name: format_hours(value) for name, value in hours.items()},
        "total_hours": format_hours(breakdown.total_hours),
    }


def register(app: Flask, container: Container) -> None:
    service = container.overtime_service

    @app.route("/api/overtime/calculate", methods=["POST"], endpoint="api_overtime_calculate")
    @json_endpoint
    def api_overtime_calculate():
        data = json_body()
        breakdown = service.calculate(
            start_time=data.get("start_time"),
            end_time=data.get("end_time"),
            break_time=data.get("break_time"),
            transfer_time=data.get("transfer_time"),
            day_type=day_type_from(data),
        )
        result = _breakdown_json(breakdown) if breakdown else None
        return jsonify({"success": True, "result": result})

    @app.route("/api/overtime/records", methods=["PUT"], endpoint="api_overtime_save")
    @json_endpoint
    def api_overtime_save():
        data = json_body()
        record = service.save(
            driver_id=int_arg(data.get("driver_id"), "driver_id"),
            work_date=date_arg(data.get("work_date"), "work_date"),
            start_time=data.get("start_time"),
            end_time=data.get("end_time"),
            break_time=data.get("break_time"),
            transfer_time=data.get("transfer_time"),
            day_type=day_type_from(data),
            vacuum_count=int_arg(data.get("vacuum_count"), "vacuum_count", default=0),
            car_stay_count=1 if data.get("is_car_stay") else int_arg(data.get("car_stay_count"), "car_stay_count", default=0),
            boarding_count=int_arg(data.get("boarding_count"), "boarding_count", default=0),
            training_count=int_arg(data.get("training_count"), "training_count", default=0),
            guidance_count=int_arg(data.get("guidance_count"), "guidance_count", default=0),
        )
        return jsonify(
            {
                "success": True,
                "message": "Saved",
                "record_id": record.record_id,
                "result": _breakdown_json(record.breakdown),
            }
        )

    @app.route("/api/overtime/records", methods=["GET"], endpoint="api_overtime_history")
    @json_endpoint
    def api_overtime_history():
        period_start, period_end = default_pay_period()
        rows = service.history(
            driver_id=int_arg(request.args.get("driver_id"), "driver_id"),
            start=date_arg(request.args.get("start"), "start", default=period_start),
            end=date_arg(request.args.get("end"), "end", default=period_end),
        )
        return jsonify({"success": True, "records": rows})

    @app.route("/api/overtime/records/<int:record_id>", methods=["DELETE"], endpoint="api_overtime_delete")
    @json_endpoint
    def api_overtime_delete(record_id: int):
        service.delete(record_id=record_id)
        return jsonify({"success": True, "message": "Deleted"})
