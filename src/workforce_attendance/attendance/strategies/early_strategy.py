from __future__ import annotations

from datetime import datetime
from typing import Optional

from ...core.enums import DayStatus
from ...shifts.model import ShiftAssignment
from .base import AttendanceStrategy, StatusDecision


class EarlyLeaveStrategy(AttendanceStrategy):
    """Worked less than the shift duration."""

    def decide_day(
        self,
        *,
        shift: ShiftAssignment,
        actual_in: Optional[datetime],
        actual_out: Optional[datetime],
    ) -> StatusDecision:
        return StatusDecision(status=DayStatus.LEFT_EARLY)
