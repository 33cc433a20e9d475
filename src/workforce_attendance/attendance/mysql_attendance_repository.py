from __future__ import annotations

from datetime import date
from typing import Sequence

from ..core.enums import LogSource
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, normalize_mysql_date, normalize_mysql_datetime
from .model import LogEntry, ManualEntry
from .repository import AttendanceLogRepository


class MySQLAttendanceLogRepository(AttendanceLogRepository):
    """Device scans live in ``door3_raw``; corrections in ``door3_manual_edits``."""

    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_device_logs(self, *, start: date, end: date) -> Sequence[LogEntry]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT id, person_no, date, full_entry_timestamp, full_exit_timestamp
                FROM door3_raw
                WHERE date BETWEEN %s AND %s
                ORDER BY date ASC, id ASC
                """,
                (start, end),
            )
            return [
                LogEntry(
                    entry_id=str(r["id"]),
                    person_code=str(r["person_no"]),
                    work_date=normalize_mysql_date(r["date"]),
                    check_in=normalize_mysql_datetime(r.get("full_entry_timestamp")),
                    check_out=normalize_mysql_datetime(r.get("full_exit_timestamp")),
                    source=LogSource.DEVICE,
                )
                for r in fetchall(cur)
            ]

    def list_manual_entries(self, *, start: date, end: date) -> Sequence[LogEntry]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT id, person_no, date, manual_entry_timestamp, manual_exit_timestamp, edit_reason, updated_by
                FROM door3_manual_edits
                WHERE date BETWEEN %s AND %s
                ORDER BY date ASC, id ASC
                """,
                (start, end),
            )
            return [
                LogEntry(
                    entry_id=f"manual-{r['id']}",
                    person_code=str(r["person_no"]),
                    work_date=normalize_mysql_date(r["date"]),
                    check_in=normalize_mysql_datetime(r.get("manual_entry_timestamp")),
                    check_out=normalize_mysql_datetime(r.get("manual_exit_timestamp")),
                    source=LogSource.MANUAL,
                    reason=r.get("edit_reason"),
                    updated_by=r.get("updated_by"),
                )
                for r in fetchall(cur)
            ]

    def add_manual_entry(self, entry: ManualEntry) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO door3_manual_edits(
                    person_no, date, manual_entry_timestamp, manual_exit_timestamp,
                    edit_reason, updated_by, updated_at
                )
                VALUES(%s,%s,%s,%s,%s,%s,%s)
                """,
                (
                    entry.person_code,
                    entry.work_date,
                    entry.manual_entry_timestamp,
                    entry.manual_exit_timestamp,
                    entry.reason,
                    entry.updated_by,
                    entry.updated_at,
                ),
            )
            return int(cur.lastrowid or 0)
