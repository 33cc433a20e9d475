from __future__ import annotations

from datetime import date, datetime, time, timedelta

import pytest

from workforce_attendance.attendance.model import ManualEntry
from workforce_attendance.attendance.mysql_attendance_repository import MySQLAttendanceLogRepository
from workforce_attendance.core.enums import LogSource
from workforce_attendance.database.mysql_base import normalize_mysql_datetime, normalize_mysql_time
from workforce_attendance.daytypes.mysql_day_type_repository import MySQLDayTypeRepository
from workforce_attendance.employees.mysql_employee_repository import MySQLEmployeeRepository
from workforce_attendance.shifts.mysql_shift_repository import MySQLShiftRepository


class FakeCursor:
    def __init__(self, results):
        self._results = list(results)
        self._current = []
        self.executed = []
        self.lastrowid = 0
        self.rowcount = 0

    def execute(self, sql, params=()):
        self.executed.append((" ".join(sql.split()), params))
        self._current = self._results.pop(0) if self._results else []
        self.rowcount = len(self._current)

    def fetchall(self):
        return self._current

    def fetchone(self):
        return self._current[0] if self._current else None

    def close(self):
        pass


class FakeConnection:
    def __init__(self, cursor):
        self._cursor = cursor
        self.committed = False
        self.rolled_back = False

    def cursor(self, dictionary=True):
        return self._cursor

    def commit(self):
        self.committed = True

    def rollback(self):
        self.rolled_back = True

    def close(self):
        pass


class FakeConnectionFactory:
    def __init__(self, *results):
        self.cursor = FakeCursor(results)
        self.conn = FakeConnection(self.cursor)

    def connect(self):
        return self.conn


def test_normalize_time_variants():
    assert normalize_mysql_time(timedelta(hours=22, minutes=30)) == time(22, 30)
    assert normalize_mysql_time("06:05:00") == time(6, 5)
    assert normalize_mysql_time(None) is None
    with pytest.raises(TypeError):
        normalize_mysql_time(3.5)


def test_normalize_datetime_variants():
    assert normalize_mysql_datetime("2025-03-03T08:05:00") == datetime(2025, 3, 3, 8, 5)
    assert normalize_mysql_datetime("2025-03-03 08:05:00+07:00") == datetime(2025, 3, 3, 8, 5)
    assert normalize_mysql_datetime("") is None


def test_employee_rows_are_mapped():
    factory = FakeConnectionFactory(
        [
            {"id": 7, "person_id": 1001, "name": "Anan", "department": "Security",
             "effective_date": date(2025, 1, 1), "resignation_date": None},
        ]
    )

    employees = MySQLEmployeeRepository(factory).list_all()

    assert employees[0].person_code == "1001"
    assert employees[0].effective_date == date(2025, 1, 1)
    assert factory.conn.committed


def test_shift_range_query_and_mapping():
    factory = FakeConnectionFactory(
        [
            {"id": 3, "employee_id": 7, "person_id": "1001", "start_time": timedelta(hours=22),
             "end_time": timedelta(hours=6), "active_date": date(2025, 1, 1), "expiry_date": None},
        ]
    )

    shifts = MySQLShiftRepository(factory).list_for_range(start=date(2025, 3, 3), end=date(2025, 3, 9))

    sql, params = factory.cursor.executed[0]
    assert params == (date(2025, 3, 9), date(2025, 3, 3))
    assert "s.expiry_date IS NULL OR s.expiry_date >= %s" in sql
    assert shifts[0].is_overnight
    assert shifts[0].person_code == "1001"


def test_shift_overlap_query_excludes_current_shift():
    factory = FakeConnectionFactory([])

    overlap = MySQLShiftRepository(factory).has_overlap(
        employee_id=7, active_date=date(2025, 1, 1), expiry_date=date(2099, 12, 31), exclude_shift_id=3
    )

    sql, params = factory.cursor.executed[0]
    assert overlap is False
    assert sql.endswith("AND id <> %s")
    assert params == (7, date(2099, 12, 31), date(2025, 1, 1), 3)


def test_logs_are_normalized_per_source():
    factory = FakeConnectionFactory(
        [{"id": 1, "person_no": "1001", "date": date(2025, 3, 3),
          "full_entry_timestamp": "2025-03-03T08:05:00", "full_exit_timestamp": None}],
        [{"id": 9, "person_no": "1001", "date": "2025-03-03",
          "manual_entry_timestamp": datetime(2025, 3, 3, 8, 0), "manual_exit_timestamp": datetime(2025, 3, 3, 17, 0),
          "edit_reason": "forgot card", "updated_by": "admin"}],
    )
    repo = MySQLAttendanceLogRepository(factory)

    device = repo.list_device_logs(start=date(2025, 3, 3), end=date(2025, 3, 4))
    manual = repo.list_manual_entries(start=date(2025, 3, 3), end=date(2025, 3, 4))

    assert device[0].source == LogSource.DEVICE
    assert device[0].check_in == datetime(2025, 3, 3, 8, 5)
    assert device[0].check_out is None
    assert manual[0].entry_id == "manual-9"
    assert manual[0].work_date == date(2025, 3, 3)
    assert manual[0].reason == "forgot card"


def test_manual_entry_insert():
    factory = FakeConnectionFactory()
    entry = ManualEntry(
        person_code="1001",
        work_date=date(2025, 3, 3),
        manual_entry_timestamp=datetime(2025, 3, 3, 8, 0),
        manual_exit_timestamp=datetime(2025, 3, 3, 17, 0),
        reason="forgot card",
        updated_by="admin",
        updated_at=datetime(2025, 3, 4, 9, 0),
    )

    MySQLAttendanceLogRepository(factory).add_manual_entry(entry)

    sql, params = factory.cursor.executed[0]
    assert sql.startswith("INSERT INTO door3_manual_edits")
    assert params[0] == "1001"
    assert params[4:6] == ("forgot card", "admin")


def test_day_types_mapped():
    factory = FakeConnectionFactory([{"date": date(2025, 4, 13), "day_type": "Songkran Holiday"}])

    entries = MySQLDayTypeRepository(factory).list_range(start=date(2025, 4, 1), end=date(2025, 4, 30))

    assert entries[0].day_type == "Songkran Holiday"


def test_cursor_rolls_back_on_error():
    class Boom(FakeCursor):
        def execute(self, sql, params=()):
            raise RuntimeError("db down")

    factory = FakeConnectionFactory()
    factory.cursor = Boom([])
    factory.conn = FakeConnection(factory.cursor)

    with pytest.raises(RuntimeError):
        MySQLDayTypeRepository(factory).list_range(start=date(2025, 4, 1), end=date(2025, 4, 30))

    assert factory.conn.rolled_back
