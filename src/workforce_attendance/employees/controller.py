from __future__ import annotations

from datetime import date

from flask import Flask, jsonify, request

from ..common.datetime_utils import parse_iso_date
from ..container import Container
from ..core.exceptions import ValidationError


def register(app: Flask, container: Container) -> None:
    @app.route("/api/employees/active", methods=["GET"], endpoint="active_employees")
    def active_employees():
        day_s = request.args.get("date")
        try:
            day = parse_iso_date(day_s) if day_s else date.today()
        except ValueError:
            raise ValidationError("Dates must use YYYY-MM-DD")
        employees = container.employee_service.list_active_on(day)
        return jsonify(
            {
                "success": True,
                "date": day.isoformat(),
                "employees": [
                    {
                        "id": e.employee_id,
                        "person_id": e.person_code,
                        "name": e.name,
                        "department": e.department,
                    }
                    for e in employees
                ],
            }
        )
