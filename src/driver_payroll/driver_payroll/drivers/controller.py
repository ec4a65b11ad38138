from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.api import date_arg, json_endpoint
from ..common.datetime_utils import default_pay_period
from ..container import Container


def register(app: Flask, container: Container) -> None:
    service = container.driver_service

    @app.route("/api/drivers", methods=["GET"], endpoint="api_drivers")
    @json_endpoint
    def api_drivers():
        default_start, default_end = default_pay_period()
        drivers = service.roster(
            start=date_arg(request.args.get("start"), "start", default=default_start),
            end=date_arg(request.args.get("end"), "end", default=default_end),
        )
        return jsonify({"success": True, "drivers": [service.to_ui(d) for d in drivers]})
