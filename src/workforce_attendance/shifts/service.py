from __future__ import annotations

import logging
from datetime import date
from typing import Optional, Sequence

from ..common.datetime_utils import parse_hhmm
from ..common.validators import require_hhmm
from ..core.constants import OPEN_ENDED_EXPIRY
from ..core.exceptions import ValidationError
from ..employees.repository import EmployeeRepository
from .repository import ShiftRepository

logger = logging.getLogger(__name__)


class ShiftService:
    def __init__(self, shifts: ShiftRepository, employees: EmployeeRepository):
        self._shifts = shifts
        self._employees = employees

    def list_for_display(self) -> Sequence[dict]:
        return self._shifts.list_all_with_employee()

    def save(
        self,
        *,
        employee_id: Optional[int],
        start_time: Optional[str],
        end_time: Optional[str],
        active_date: Optional[date],
        expiry_date: Optional[date] = None,
        shift_id: Optional[int] = None,
    ) -> int:
        """Create a shift assignment, or update ``shift_id`` when given.

        Returns the shift id.
        """

        if not employee_id or not start_time or not end_time or not active_date:
            raise ValidationError("Please fill all required fields")

        start = parse_hhmm(require_hhmm(start_time, "start_time"))
        end = parse_hhmm(require_hhmm(end_time, "end_time"))

        if expiry_date is not None and expiry_date < active_date:
            raise ValidationError("Expiry date cannot be before the active date")

        employee = self._employees.get_by_id(int(employee_id))
        if employee:
            if employee.effective_date and active_date < employee.effective_date:
                raise ValidationError(
                    f"Cannot assign shift before employee's start date ({employee.effective_date.isoformat()})."
                )
            if employee.resignation_date and active_date > employee.resignation_date:
                raise ValidationError(f"Employee resigned on {employee.resignation_date.isoformat()}.")

        if self._shifts.has_overlap(
            employee_id=int(employee_id),
            active_date=active_date,
            expiry_date=expiry_date or OPEN_ENDED_EXPIRY,
            exclude_shift_id=shift_id,
        ):
            raise ValidationError("Date range overlaps with another existing shift.")

        if shift_id:
            if not self._shifts.update(
                shift_id=int(shift_id),
                employee_id=int(employee_id),
                start_time=start,
                end_time=end,
                active_date=active_date,
                expiry_date=expiry_date,
            ):
                raise ValidationError("Shift not found")
            logger.info("Updated shift %s for employee %s", shift_id, employee_id)
            return int(shift_id)

        new_id = self._shifts.create(
            employee_id=int(employee_id),
            start_time=start,
            end_time=end,
            active_date=active_date,
            expiry_date=expiry_date,
        )
        logger.info("Created shift %s for employee %s", new_id, employee_id)
        return new_id
