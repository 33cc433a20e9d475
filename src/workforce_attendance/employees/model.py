from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass(frozen=True)
class Employee:
    """Domain entity: an employee on the roster.

    ``effective_date`` is None until the employee is onboarded; such employees
    are left out of every attendance calculation. ``resignation_date`` is None
    for indefinite employment.
    """

    employee_id: int
    person_code: str
    name: str
    department: Optional[str]
    effective_date: Optional[date] = None
    resignation_date: Optional[date] = None

    @property
    def is_onboarded(self) -> bool:
        return self.effective_date is not None

    def is_active_on(self, day: date) -> bool:
        if self.effective_date is None or self.effective_date > day:
            return False
        return self.resignation_date is None or self.resignation_date >= day
