from __future__ import annotations

from datetime import datetime
from typing import Optional

from ...core.enums import DayStatus
from ...shifts.model import ShiftAssignment
from .base import AttendanceStrategy, StatusDecision


class LateAndEarlyStrategy(AttendanceStrategy):
    """Late clock-in and a short day."""

    def decide_day(
        self,
        *,
        shift: ShiftAssignment,
        actual_in: Optional[datetime],
        actual_out: Optional[datetime],
    ) -> StatusDecision:
        return StatusDecision(status=DayStatus.LATE_AND_EARLY)
