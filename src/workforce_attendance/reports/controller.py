from __future__ import annotations

from datetime import date

from flask import Flask, jsonify, request

from ..common.datetime_utils import parse_iso_date, previous_week_range
from ..core.exceptions import ValidationError
from ..container import Container
from .export import breakdown_csv, summary_csv
from .service import ReportData


def register(app: Flask, container: Container) -> None:
    def _report_window() -> tuple[date, date]:
        default_start, default_end = previous_week_range(date.today())
        start_s = request.args.get("start")
        end_s = request.args.get("end")
        try:
            start = parse_iso_date(start_s) if start_s else default_start
            end = parse_iso_date(end_s) if end_s else default_end
        except ValueError:
            raise ValidationError("Dates must use YYYY-MM-DD")
        return start, end

    def _build() -> tuple[date, date, ReportData]:
        start, end = _report_window()
        data = container.report_service.build_attendance_report(
            start=start,
            end=end,
            department=request.args.get("department"),
            name=request.args.get("name"),
        )
        return start, end, data

    def _csv_response(payload: bytes, filename: str):
        return app.response_class(
            payload,
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )

    @app.route("/api/reports/attendance", methods=["GET"], endpoint="attendance_report")
    def attendance_report():
        start, end, data = _build()
        return jsonify(
            {
                "success": True,
                "start": start.isoformat(),
                "end": end.isoformat(),
                "breakdown": data.rows,
                "summary": data.summary,
            }
        )

    @app.route("/api/reports/attendance.csv", methods=["GET"], endpoint="attendance_report_csv")
    def attendance_report_csv():
        start, end, data = _build()
        filename = f"attendance_breakdown_{start.strftime('%Y%m%d')}_{end.strftime('%Y%m%d')}.csv"
        return _csv_response(breakdown_csv(data), filename)

    @app.route("/api/reports/summary.csv", methods=["GET"], endpoint="attendance_summary_csv")
    def attendance_summary_csv():
        start, end, data = _build()
        filename = f"attendance_summary_{start.strftime('%Y%m%d')}_{end.strftime('%Y%m%d')}.csv"
        return _csv_response(summary_csv(data), filename)
