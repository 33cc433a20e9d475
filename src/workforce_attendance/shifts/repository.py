from __future__ import annotations

from datetime import date, time
from typing import Optional, Protocol, Sequence

from .model import ShiftAssignment


class ShiftRepository(Protocol):
    def list_for_range(self, *, start: date, end: date) -> Sequence[ShiftAssignment]:
        """Assignments whose validity window intersects [start, end]."""

        raise NotImplementedError

    def list_all_with_employee(self) -> Sequence[dict]:
        """All assignments joined with employee display fields, newest first."""

        raise NotImplementedError

    def has_overlap(
        self,
        *,
        employee_id: int,
        active_date: date,
        expiry_date: date,
        exclude_shift_id: Optional[int] = None,
    ) -> bool:
        raise NotImplementedError

    def create(
        self,
        *,
        employee_id: int,
        start_time: time,
        end_time: time,
        active_date: date,
        expiry_date: Optional[date],
    ) -> int:
        raise NotImplementedError

    def update(
        self,
        *,
        shift_id: int,
        employee_id: int,
        start_time: time,
        end_time: time,
        active_date: date,
        expiry_date: Optional[date],
    ) -> bool:
        raise NotImplementedError
