from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ...core.enums import DayStatus
from ...shifts.model import ShiftAssignment


@dataclass(frozen=True)
class StatusDecision:
    status: DayStatus
    counts_present: bool = True


class AttendanceStrategy(ABC):
    """Strategy Pattern: encapsulate how we decide the status of a shift day."""

    @abstractmethod
    def decide_day(
        self,
        *,
        shift: ShiftAssignment,
        actual_in: Optional[datetime],
        actual_out: Optional[datetime],
    ) -> StatusDecision:
        raise NotImplementedError
