from __future__ import annotations

from dataclasses import asdict, dataclass, field
from datetime import date, datetime
from typing import Optional

from ..core.enums import DayStatus, EntryFlag, LogSource
from ..employees.model import Employee


@dataclass(frozen=True)
class LogEntry:
    """One clock record for a person and calendar date, from either source.

    Device and manual rows are normalized to this shape; manual rows carry a
    synthetic ``manual-<id>`` identifier plus reason/updated_by metadata.
    """

    entry_id: str
    person_code: str
    work_date: date
    check_in: Optional[datetime]
    check_out: Optional[datetime]
    source: LogSource = LogSource.DEVICE
    reason: Optional[str] = None
    updated_by: Optional[str] = None

    @property
    def is_manual(self) -> bool:
        return self.source == LogSource.MANUAL


@dataclass(frozen=True)
class DayTypeEntry:
    day: date
    day_type: str


@dataclass(frozen=True)
class ManualEntry:
    """Write payload for a manual correction."""

    person_code: str
    work_date: date
    manual_entry_timestamp: datetime
    manual_exit_timestamp: datetime
    reason: str
    updated_by: str
    updated_at: datetime


@dataclass(frozen=True)
class DailyBreakdown:
    """Read-model: one reconciled employee-day."""

    work_date: date
    day_type: str
    person_code: str
    name: str
    department: Optional[str]
    shift_start: str
    shift_end: str
    actual_range: str
    status: DayStatus
    flag: EntryFlag


@dataclass
class EmployeeSummary:
    """Per-employee counters accumulated over the report window."""

    person_code: str
    name: str
    department: Optional[str]
    total_days: int = 0
    present: int = 0
    absent: int = 0
    on_time: int = 0
    late: int = 0
    left_early: int = 0
    late_and_left_early: int = 0
    manual_edit_count: int = 0

    @classmethod
    def for_employee(cls, employee: Employee) -> "EmployeeSummary":
        return cls(person_code=employee.person_code, name=employee.name, department=employee.department)

    def record_punctuality(self, status: DayStatus) -> None:
        """Bump the counter matching a present-with-shift status."""

        if status == DayStatus.LATE_AND_EARLY:
            self.late_and_left_early += 1
        elif status == DayStatus.LATE:
            self.late += 1
        elif status == DayStatus.LEFT_EARLY:
            self.left_early += 1
        elif status == DayStatus.ON_TIME:
            self.on_time += 1

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class ReconciliationResult:
    breakdown: list[DailyBreakdown] = field(default_factory=list)
    summary: list[EmployeeSummary] = field(default_factory=list)
