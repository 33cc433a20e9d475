from __future__ import annotations

from datetime import date
from typing import Sequence

from ..attendance.model import DayTypeEntry
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, normalize_mysql_date
from .repository import DayTypeRepository


class MySQLDayTypeRepository(DayTypeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_range(self, *, start: date, end: date) -> Sequence[DayTypeEntry]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT date, day_type FROM date_dim WHERE date BETWEEN %s AND %s ORDER BY date",
                (start, end),
            )
            return [
                DayTypeEntry(day=normalize_mysql_date(r["date"]), day_type=str(r["day_type"]))
                for r in fetchall(cur)
            ]
