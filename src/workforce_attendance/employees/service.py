from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..core.constants import ALL_FILTER
from .model import Employee
from .repository import EmployeeRepository


def _matches(value: Optional[str], wanted: Optional[str]) -> bool:
    if not wanted or wanted == ALL_FILTER:
        return True
    return value == wanted


class EmployeeService:
    def __init__(self, employees: EmployeeRepository):
        self._employees = employees

    def list_active_on(self, day: date) -> Sequence[Employee]:
        return self._employees.list_active_on(day)

    def report_scope(
        self,
        *,
        department: Optional[str] = None,
        name: Optional[str] = None,
    ) -> list[Employee]:
        """Employees to include in an attendance report.

        Employees without an effective date are not onboarded yet and are
        excluded. ``None`` or ``"All"`` disables a filter. Store order is kept.
        """

        return [
            e
            for e in self._employees.list_all()
            if e.is_onboarded and _matches(e.department, department) and _matches(e.name, name)
        ]
