from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, time
from typing import Optional

from workforce_attendance.attendance.model import DayTypeEntry, LogEntry, ManualEntry
from workforce_attendance.core.enums import LogSource
from workforce_attendance.employees.model import Employee
from workforce_attendance.shifts.model import ShiftAssignment


def make_employee(
    employee_id: int = 1,
    person_code: str = "P001",
    name: str = "Somchai",
    department: Optional[str] = "Security",
    effective_date: Optional[date] = date(2024, 1, 1),
    resignation_date: Optional[date] = None,
) -> Employee:
    return Employee(
        employee_id=employee_id,
        person_code=person_code,
        name=name,
        department=department,
        effective_date=effective_date,
        resignation_date=resignation_date,
    )


def make_shift(
    start: time,
    end: time,
    *,
    shift_id: int = 1,
    employee_id: int = 1,
    active_date: date = date(2024, 1, 1),
    expiry_date: Optional[date] = None,
    person_code: Optional[str] = None,
) -> ShiftAssignment:
    return ShiftAssignment(
        shift_id=shift_id,
        employee_id=employee_id,
        start_time=start,
        end_time=end,
        active_date=active_date,
        expiry_date=expiry_date,
        person_code=person_code,
    )


def make_log(
    work_date: date,
    check_in: Optional[time],
    check_out: Optional[time],
    *,
    person_code: str = "P001",
    source: LogSource = LogSource.DEVICE,
    entry_id: str = "1",
    check_out_date: Optional[date] = None,
) -> LogEntry:
    return LogEntry(
        entry_id=entry_id,
        person_code=person_code,
        work_date=work_date,
        check_in=datetime.combine(work_date, check_in) if check_in else None,
        check_out=datetime.combine(check_out_date or work_date, check_out) if check_out else None,
        source=source,
        reason="forgot card" if source == LogSource.MANUAL else None,
        updated_by="admin" if source == LogSource.MANUAL else None,
    )


@dataclass
class InMemoryEmployees:
    employees: list[Employee] = field(default_factory=list)

    def list_all(self):
        return list(self.employees)

    def list_active_on(self, day: date):
        return [e for e in self.employees if e.is_active_on(day)]

    def get_by_id(self, employee_id: int):
        return next((e for e in self.employees if e.employee_id == employee_id), None)


@dataclass
class InMemoryShifts:
    shifts: list[ShiftAssignment] = field(default_factory=list)
    last_range: Optional[tuple[date, date]] = None
    _next_id: int = 100

    def list_for_range(self, *, start: date, end: date):
        self.last_range = (start, end)
        return [s for s in self.shifts if s.active_date <= end and (s.expiry_date is None or s.expiry_date >= start)]

    def list_all_with_employee(self):
        return [
            {
                "shift_id": s.shift_id,
                "employee_id": s.employee_id,
                "start_time": s.start_time.strftime("%H:%M"),
                "end_time": s.end_time.strftime("%H:%M"),
                "active_date": s.active_date.isoformat(),
                "expiry_date": s.expiry_date.isoformat() if s.expiry_date else None,
            }
            for s in self.shifts
        ]

    def has_overlap(self, *, employee_id, active_date, expiry_date, exclude_shift_id=None):
        for s in self.shifts:
            if s.employee_id != employee_id or s.shift_id == exclude_shift_id:
                continue
            if s.active_date <= expiry_date and (s.expiry_date is None or s.expiry_date >= active_date):
                return True
        return False

    def create(self, *, employee_id, start_time, end_time, active_date, expiry_date):
        self._next_id += 1
        self.shifts.append(
            ShiftAssignment(
                shift_id=self._next_id,
                employee_id=employee_id,
                start_time=start_time,
                end_time=end_time,
                active_date=active_date,
                expiry_date=expiry_date,
            )
        )
        return self._next_id

    def update(self, *, shift_id, employee_id, start_time, end_time, active_date, expiry_date):
        for i, s in enumerate(self.shifts):
            if s.shift_id == shift_id:
                self.shifts[i] = ShiftAssignment(
                    shift_id=shift_id,
                    employee_id=employee_id,
                    start_time=start_time,
                    end_time=end_time,
                    active_date=active_date,
                    expiry_date=expiry_date,
                )
                return True
        return False


@dataclass
class InMemoryLogs:
    device: list[LogEntry] = field(default_factory=list)
    manual: list[LogEntry] = field(default_factory=list)
    written: list[ManualEntry] = field(default_factory=list)
    last_range: Optional[tuple[date, date]] = None

    def list_device_logs(self, *, start: date, end: date):
        self.last_range = (start, end)
        return [l for l in self.device if start <= l.work_date <= end]

    def list_manual_entries(self, *, start: date, end: date):
        return [l for l in self.manual if start <= l.work_date <= end]

    def add_manual_entry(self, entry: ManualEntry) -> int:
        self.written.append(entry)
        self.manual.append(
            LogEntry(
                entry_id=f"manual-{len(self.written)}",
                person_code=entry.person_code,
                work_date=entry.work_date,
                check_in=entry.manual_entry_timestamp,
                check_out=entry.manual_exit_timestamp,
                source=LogSource.MANUAL,
                reason=entry.reason,
                updated_by=entry.updated_by,
            )
        )
        return len(self.written)


@dataclass
class InMemoryDayTypes:
    entries: list[DayTypeEntry] = field(default_factory=list)

    def list_range(self, *, start: date, end: date):
        return [e for e in self.entries if start <= e.day <= end]
