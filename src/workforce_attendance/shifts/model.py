from __future__ import annotations

from dataclasses import dataclass
from datetime import date, time
from typing import Optional

from ..common.datetime_utils import minutes_of_day
from ..core.constants import MINUTES_PER_DAY
from ..employees.model import Employee


@dataclass(frozen=True)
class ShiftAssignment:
    """Domain entity: a shift assigned to one employee for a validity window.

    ``expiry_date`` is inclusive; None means the assignment runs indefinitely.
    """

    shift_id: int
    employee_id: int
    start_time: time
    end_time: time
    active_date: date
    expiry_date: Optional[date] = None
    person_code: Optional[str] = None

    @property
    def start_minutes(self) -> int:
        return minutes_of_day(self.start_time)

    @property
    def end_minutes(self) -> int:
        return minutes_of_day(self.end_time)

    @property
    def duration_minutes(self) -> int:
        return (self.end_minutes - self.start_minutes) % MINUTES_PER_DAY

    @property
    def is_overnight(self) -> bool:
        # Compares hours only: 23:30-23:05 is not overnight, 23:30-00:05 is.
        return self.start_time.hour > self.end_time.hour

    def covers(self, day: date) -> bool:
        if self.active_date > day:
            return False
        return self.expiry_date is None or self.expiry_date >= day

    def belongs_to(self, employee: Employee) -> bool:
        if self.employee_id == employee.employee_id:
            return True
        return self.person_code is not None and self.person_code == employee.person_code
