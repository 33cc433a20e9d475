from __future__ import annotations

from datetime import date
from typing import Protocol, Sequence

from .model import LogEntry, ManualEntry


class AttendanceLogRepository(Protocol):
    def list_device_logs(self, *, start: date, end: date) -> Sequence[LogEntry]:
        """Hardware scans with a work date in [start, end]."""

        raise NotImplementedError

    def list_manual_entries(self, *, start: date, end: date) -> Sequence[LogEntry]:
        """Manual corrections with a work date in [start, end]."""

        raise NotImplementedError

    def add_manual_entry(self, entry: ManualEntry) -> int:
        raise NotImplementedError
