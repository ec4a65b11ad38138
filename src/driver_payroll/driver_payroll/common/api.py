from __future__ import annotations

import logging
from datetime import date
from functools import wraps
from typing import Optional

from flask import jsonify, request

from ..core.enums import DayType
from ..core.exceptions import NotFoundError, ValidationError
from .datetime_utils import parse_iso_date

logger = logging.getLogger(__name__)


def json_endpoint(view):
    """Map domain errors of a JSON view to {"success": False, "message": ...} responses."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        try:
            return view(*args, **kwargs)
        except NotFoundError as e:
            return jsonify({"success": False, "message": str(e)}), 404
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except Exception:
            logger.exception("Unhandled error in %s", request.path)
            return jsonify({"success": False, "message": "Internal server error"}), 500

    return wrapper


def json_body() -> dict:
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    return data


def day_type_from(data: dict) -> DayType:
    """Accept either ``day_type`` or the form's three checkbox flags."""
    if data.get("day_type"):
        try:
            return DayType(str(data["day_type"]).lower())
        except ValueError:
            raise ValidationError(f"Unknown day type: {data['day_type']!r}") from None
    return DayType.from_flags(
        is_saturday=bool(data.get("is_saturday")),
        is_holiday=bool(data.get("is_holiday")),
        is_legal_holiday=bool(data.get("is_legal_holiday")),
    )


def int_arg(value, field_name: str, *, default: Optional[int] = None) -> int:
    if value is None or value == "":
        if default is None:
            raise ValidationError(f"{field_name} is required")
        return default
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be an integer") from None


def date_arg(value: Optional[str], field_name: str, *, default: Optional[date] = None) -> date:
    if not value:
        if default is None:
            raise ValidationError(f"{field_name} is required")
        return default
    return parse_iso_date(value)
