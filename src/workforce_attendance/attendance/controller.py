from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import parse_iso_date
from ..core.enums import EntryMode
from ..core.exceptions import ValidationError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/logs", methods=["GET"], endpoint="find_log")
    def find_log():
        person_code = request.args.get("person_id")
        day_s = request.args.get("date")
        if not person_code or not day_s:
            raise ValidationError("person_id and date are required")

        try:
            day = parse_iso_date(day_s)
        except ValueError:
            raise ValidationError("Dates must use YYYY-MM-DD")

        log = container.log_service.find_log(person_code, day)
        if not log:
            return jsonify({"success": True, "log": None})
        return jsonify(
            {
                "success": True,
                "log": {
                    "id": log.entry_id,
                    "person_no": log.person_code,
                    "date": log.work_date.isoformat(),
                    "checkIn": log.check_in.isoformat() if log.check_in else None,
                    "checkOut": log.check_out.isoformat() if log.check_out else None,
                    "source": log.source.value,
                    "reason": log.reason,
                    "updated_by": log.updated_by,
                },
            }
        )

    @app.route("/api/manual-entries", methods=["POST"], endpoint="add_manual_entry")
    def add_manual_entry():
        body = request.get_json(silent=True) or {}
        try:
            mode = EntryMode(body.get("mode") or EntryMode.ADD.value)
            work_date = parse_iso_date(body["date"]) if body.get("date") else None
        except ValueError:
            raise ValidationError("Invalid mode or date")

        entry = container.manual_entry_service.submit(
            person_code=body.get("person_no"),
            work_date=work_date,
            clock_in=body.get("clock_in"),
            clock_out=body.get("clock_out"),
            reason=body.get("reason"),
            updated_by=body.get("updated_by") or app.config.get("MANUAL_ENTRY_AUTHOR", "admin"),
            mode=mode,
        )
        message = "Manual Entry Added!" if mode == EntryMode.ADD else "Log Updated Successfully!"
        return (
            jsonify(
                {
                    "success": True,
                    "message": message,
                    "checkIn": entry.manual_entry_timestamp.isoformat(),
                    "checkOut": entry.manual_exit_timestamp.isoformat(),
                }
            ),
            201,
        )
