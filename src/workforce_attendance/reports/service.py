from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Optional

from ..attendance.model import DailyBreakdown
from ..attendance.reconciler import reconcile
from ..attendance.service import AttendanceLogService
from ..core.exceptions import ValidationError
from ..daytypes.repository import DayTypeRepository
from ..employees.service import EmployeeService
from ..shifts.repository import ShiftRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReportData:
    rows: list[dict]
    summary: list[dict]


def _breakdown_row(r: DailyBreakdown) -> dict:
    return {
        "date": r.work_date.strftime("%Y-%m-%d"),
        "day_type": r.day_type,
        "person_id": r.person_code,
        "name": r.name,
        "department": r.department or "-",
        "shift_in": r.shift_start,
        "shift_out": r.shift_end,
        "actual_range": r.actual_range,
        "status": r.status.value,
        "flag": r.flag.value,
    }


class AttendanceReportService:
    def __init__(
        self,
        employees: EmployeeService,
        shifts: ShiftRepository,
        logs: AttendanceLogService,
        day_types: DayTypeRepository,
    ):
        self._employees = employees
        self._shifts = shifts
        self._logs = logs
        self._day_types = day_types

    def build_attendance_report(
        self,
        *,
        start: date,
        end: date,
        department: Optional[str] = None,
        name: Optional[str] = None,
    ) -> ReportData:
        if start > end:
            raise ValidationError("Start date must not be after end date")

        employees = self._employees.report_scope(department=department, name=name)
        # One extra day so overnight shifts on the last day find their check-out.
        logs = self._logs.fetch_logs(start, end + timedelta(days=1))
        shifts = self._shifts.list_for_range(start=start, end=end)
        day_types = self._day_types.list_range(start=start, end=end)

        result = reconcile(start, end, employees, shifts, logs, day_types)
        logger.info(
            "Attendance report %s..%s: %d employees, %d rows",
            start,
            end,
            len(result.summary),
            len(result.breakdown),
        )
        return ReportData(
            rows=[_breakdown_row(r) for r in result.breakdown],
            summary=[s.to_dict() for s in result.summary],
        )
