from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import Employee


class EmployeeRepository(Protocol):
    """Repository interface for the employee roster.

    Services depend on this interface, not on a concrete database.
    """

    def list_all(self) -> Sequence[Employee]:
        """All employees ordered by name."""

        raise NotImplementedError

    def list_active_on(self, day: date) -> Sequence[Employee]:
        raise NotImplementedError

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        raise NotImplementedError
