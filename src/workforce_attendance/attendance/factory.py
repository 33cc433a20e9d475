from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..common.datetime_utils import minutes_of_day
from ..core.constants import EARLY_MORNING_CUTOFF_MINUTES, MINUTES_PER_DAY, NOON_MINUTES
from ..shifts.model import ShiftAssignment
from .strategies.absent_strategy import AbsentStrategy
from .strategies.base import AttendanceStrategy
from .strategies.early_strategy import EarlyLeaveStrategy
from .strategies.late_early_strategy import LateAndEarlyStrategy
from .strategies.late_strategy import LateStrategy
from .strategies.normal_strategy import NormalStrategy


def is_late(shift: ShiftAssignment, actual_in: datetime) -> bool:
    in_minutes = minutes_of_day(actual_in)
    # Afternoon/night shift with a clock-in shortly after midnight.
    if shift.start_minutes > NOON_MINUTES and in_minutes < EARLY_MORNING_CUTOFF_MINUTES:
        in_minutes += MINUTES_PER_DAY
    return in_minutes > shift.start_minutes


def is_early_leave(shift: ShiftAssignment, actual_in: datetime, actual_out: Optional[datetime]) -> bool:
    if actual_out is None:
        return False
    worked = (minutes_of_day(actual_out) - minutes_of_day(actual_in)) % MINUTES_PER_DAY
    return worked < shift.duration_minutes


@dataclass
class AttendanceStrategyFactory:
    """Factory Pattern: choose appropriate strategy based on rules."""

    def for_day(
        self,
        *,
        shift: ShiftAssignment,
        actual_in: Optional[datetime],
        actual_out: Optional[datetime],
    ) -> AttendanceStrategy:
        if actual_in is None:
            return AbsentStrategy()

        late = is_late(shift, actual_in)
        early = is_early_leave(shift, actual_in, actual_out)
        if late and early:
            return LateAndEarlyStrategy()
        if late:
            return LateStrategy()
        if early:
            return EarlyLeaveStrategy()
        return NormalStrategy()
