from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Optional

from ..common.datetime_utils import now_local, parse_hhmm
from ..common.validators import require_hhmm, require_non_empty
from ..core.enums import EntryMode
from ..core.exceptions import ValidationError
from .model import LogEntry, ManualEntry
from .reconciler import index_logs
from .repository import AttendanceLogRepository

logger = logging.getLogger(__name__)


class AttendanceLogService:
    def __init__(self, logs: AttendanceLogRepository):
        self._logs = logs

    def fetch_logs(self, start: date, end: date) -> list[LogEntry]:
        """Device logs followed by manual entries for [start, end].

        Both sources are returned as-is; precedence between them is applied
        when the logs are indexed for reconciliation.
        """

        device = list(self._logs.list_device_logs(start=start, end=end))
        manual = list(self._logs.list_manual_entries(start=start, end=end))
        logger.debug("Fetched %d device and %d manual logs for %s..%s", len(device), len(manual), start, end)
        return device + manual

    def find_log(self, person_code: str, work_date: date) -> Optional[LogEntry]:
        """The record currently in effect for one person and day."""

        return index_logs(self.fetch_logs(work_date, work_date)).get((person_code, work_date))


class ManualEntryService:
    def __init__(self, logs: AttendanceLogRepository, log_service: Optional[AttendanceLogService] = None):
        self._logs = logs
        self._log_service = log_service or AttendanceLogService(logs)

    def submit(
        self,
        *,
        person_code: Optional[str],
        work_date: Optional[date],
        clock_in: Optional[str],
        clock_out: Optional[str],
        reason: Optional[str],
        updated_by: str,
        mode: EntryMode = EntryMode.ADD,
        now: Optional[datetime] = None,
    ) -> ManualEntry:
        if not person_code or not work_date or not clock_in or not clock_out or not reason or not reason.strip():
            raise ValidationError("Please fill all fields.")

        start = parse_hhmm(require_hhmm(clock_in, "clock_in"))
        end = parse_hhmm(require_hhmm(clock_out, "clock_out"))

        existing = self._log_service.find_log(person_code, work_date)
        if mode == EntryMode.ADD and existing:
            raise ValidationError("Cannot Add: Record already exists. Please switch to Edit tab.")
        if mode == EntryMode.EDIT and not existing:
            raise ValidationError("No existing log found to edit for this date.")

        entry = ManualEntry(
            person_code=person_code,
            work_date=work_date,
            manual_entry_timestamp=datetime.combine(work_date, start),
            manual_exit_timestamp=datetime.combine(work_date, end),
            reason=reason.strip(),
            updated_by=require_non_empty(updated_by, "updated_by"),
            updated_at=now or now_local(),
        )
        self._logs.add_manual_entry(entry)
        logger.info("Manual entry (%s) saved for %s on %s by %s", mode.value, person_code, work_date, entry.updated_by)
        return entry
