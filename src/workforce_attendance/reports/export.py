from __future__ import annotations

import csv
import io

from .service import ReportData

BREAKDOWN_FIELDS = [
    "date",
    "day_type",
    "person_id",
    "name",
    "department",
    "shift_in",
    "shift_out",
    "actual_range",
    "status",
    "flag",
]

SUMMARY_FIELDS = [
    "person_code",
    "name",
    "department",
    "total_days",
    "present",
    "on_time",
    "absent",
    "late",
    "left_early",
    "late_and_left_early",
    "manual_edit_count",
]


def _to_csv(rows: list[dict], fieldnames: list[str]) -> bytes:
    out = io.StringIO()
    writer = csv.DictWriter(out, fieldnames=fieldnames, extrasaction="ignore")
    writer.writeheader()
    for row in rows:
        writer.writerow(row)
    # BOM so spreadsheet tools detect UTF-8 names.
    return out.getvalue().encode("utf-8-sig")


def breakdown_csv(data: ReportData) -> bytes:
    return _to_csv(data.rows, BREAKDOWN_FIELDS)


def summary_csv(data: ReportData) -> bytes:
    return _to_csv(data.summary, SUMMARY_FIELDS)
