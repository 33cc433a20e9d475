from __future__ import annotations

from typing import Optional

from flask import Flask, jsonify, request

from ..common.datetime_utils import parse_iso_date
from ..core.exceptions import ValidationError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    def _save(shift_id: Optional[int] = None):
        body = request.get_json(silent=True) or {}
        try:
            active_date = parse_iso_date(body["active_date"]) if body.get("active_date") else None
            expiry_date = parse_iso_date(body["expiry_date"]) if body.get("expiry_date") else None
            employee_id = int(body["employee_id"]) if body.get("employee_id") else None
        except ValueError:
            raise ValidationError("Invalid employee or date")

        saved_id = container.shift_service.save(
            employee_id=employee_id,
            start_time=body.get("start_time"),
            end_time=body.get("end_time"),
            active_date=active_date,
            expiry_date=expiry_date,
            shift_id=shift_id,
        )
        return jsonify({"success": True, "shift_id": saved_id})

    @app.route("/api/shifts", methods=["GET"], endpoint="list_shifts")
    def list_shifts():
        return jsonify({"success": True, "shifts": list(container.shift_service.list_for_display())})

    @app.route("/api/shifts", methods=["POST"], endpoint="create_shift")
    def create_shift():
        response = _save()
        response.status_code = 201
        return response

    @app.route("/api/shifts/<int:shift_id>", methods=["PUT"], endpoint="update_shift")
    def update_shift(shift_id: int):
        return _save(shift_id)
