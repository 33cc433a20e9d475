from __future__ import annotations

from datetime import date, time

import pytest

from fakes import InMemoryDayTypes, InMemoryEmployees, InMemoryLogs, InMemoryShifts, make_employee, make_log, make_shift

from workforce_attendance.attendance.model import DayTypeEntry
from workforce_attendance.attendance.service import AttendanceLogService
from workforce_attendance.core.enums import LogSource
from workforce_attendance.core.exceptions import ValidationError
from workforce_attendance.employees.service import EmployeeService
from workforce_attendance.reports.export import breakdown_csv, summary_csv
from workforce_attendance.reports.service import AttendanceReportService

START = date(2025, 3, 3)
END = date(2025, 3, 4)


def _service(employees, shifts=(), device=(), manual=(), day_types=()):
    logs = InMemoryLogs(device=list(device), manual=list(manual))
    shifts_repo = InMemoryShifts(list(shifts))
    svc = AttendanceReportService(
        EmployeeService(InMemoryEmployees(list(employees))),
        shifts_repo,
        AttendanceLogService(logs),
        InMemoryDayTypes(list(day_types)),
    )
    return svc, logs, shifts_repo


def test_report_rows_and_summary():
    svc, _, _ = _service(
        [make_employee()],
        shifts=[make_shift(time(8, 0), time(17, 0))],
        device=[make_log(START, time(8, 5), time(17, 0))],
        day_types=[DayTypeEntry(day=END, day_type="Public Holiday")],
    )

    report = svc.build_attendance_report(start=START, end=END)

    assert report.rows[0] == {
        "date": "2025-03-03",
        "day_type": "Workday",
        "person_id": "P001",
        "name": "Somchai",
        "department": "Security",
        "shift_in": "08:00",
        "shift_out": "17:00",
        "actual_range": "08:05 - 17:00",
        "status": "Late & Early",
        "flag": "Auto",
    }
    assert report.rows[1]["status"] == "Absent"
    assert report.rows[1]["day_type"] == "Public Holiday"
    assert report.summary[0]["total_days"] == 2
    assert report.summary[0]["late_and_left_early"] == 1
    assert report.summary[0]["late"] == 0
    assert report.summary[0]["absent"] == 1


def test_report_fetches_logs_one_day_past_end():
    svc, logs, shifts_repo = _service(
        [make_employee()],
        shifts=[make_shift(time(22, 0), time(6, 0))],
        device=[make_log(END, time(21, 50), None, entry_id="1"), make_log(date(2025, 3, 5), time(6, 0), None, entry_id="2")],
    )

    report = svc.build_attendance_report(start=START, end=END)

    assert logs.last_range == (START, date(2025, 3, 5))
    assert shifts_repo.last_range == (START, END)
    assert report.rows[-1]["actual_range"] == "21:50 - 06:00 (+1)"


def test_report_skips_employees_not_onboarded_and_filters_department():
    svc, _, _ = _service(
        [
            make_employee(1, "S1", "Anan", "Security"),
            make_employee(2, "G1", "Boon", "Gardener"),
            make_employee(3, "S2", "Chai", "Security", effective_date=None),
        ]
    )

    report = svc.build_attendance_report(start=START, end=END, department="Security")

    assert [s["person_code"] for s in report.summary] == ["S1"]
    assert len(report.rows) == 2


def test_report_rejects_inverted_range():
    svc, _, _ = _service([make_employee()])

    with pytest.raises(ValidationError):
        svc.build_attendance_report(start=END, end=START)


def test_csv_exports():
    svc, _, _ = _service(
        [make_employee(name="Nguyễn")],
        shifts=[make_shift(time(8, 0), time(17, 0))],
        manual=[make_log(START, time(8, 0), time(17, 0), source=LogSource.MANUAL, entry_id="manual-1")],
    )
    report = svc.build_attendance_report(start=START, end=START)

    rows_text = breakdown_csv(report).decode("utf-8-sig").splitlines()
    summary_text = summary_csv(report).decode("utf-8-sig").splitlines()

    assert rows_text[0].startswith("date,day_type,person_id,name")
    assert rows_text[1] == "2025-03-03,Workday,P001,Nguyễn,Security,08:00,17:00,08:00 - 17:00,On Time,Manual"
    assert summary_text[0].split(",")[:4] == ["person_code", "name", "department", "total_days"]
    assert summary_text[1].endswith(",1")
