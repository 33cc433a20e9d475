from __future__ import annotations

from datetime import date
from typing import Protocol, Sequence

from ..attendance.model import DayTypeEntry


class DayTypeRepository(Protocol):
    def list_range(self, *, start: date, end: date) -> Sequence[DayTypeEntry]:
        """Calendar entries for [start, end]; dates may be missing."""

        raise NotImplementedError
