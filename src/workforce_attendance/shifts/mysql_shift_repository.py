from __future__ import annotations

from datetime import date, time
from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, normalize_mysql_date, normalize_mysql_time
from .model import ShiftAssignment
from .repository import ShiftRepository


class MySQLShiftRepository(ShiftRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_for_range(self, *, start: date, end: date) -> Sequence[ShiftAssignment]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT s.id, s.employee_id, e.person_id, s.start_time, s.end_time, s.active_date, s.expiry_date
                FROM shifts s
                LEFT JOIN employees e ON e.id = s.employee_id
                WHERE s.active_date <= %s
                  AND (s.expiry_date IS NULL OR s.expiry_date >= %s)
                ORDER BY s.id
                """,
                (end, start),
            )
            return [
                ShiftAssignment(
                    shift_id=int(r["id"]),
                    employee_id=int(r["employee_id"]),
                    person_code=str(r["person_id"]) if r.get("person_id") is not None else None,
                    start_time=normalize_mysql_time(r["start_time"]),
                    end_time=normalize_mysql_time(r["end_time"]),
                    active_date=normalize_mysql_date(r["active_date"]),
                    expiry_date=normalize_mysql_date(r.get("expiry_date")),
                )
                for r in fetchall(cur)
            ]

    def list_all_with_employee(self) -> Sequence[dict]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT s.id, s.employee_id, s.start_time, s.end_time, s.active_date, s.expiry_date,
                       e.name, e.department, e.person_id
                FROM shifts s
                LEFT JOIN employees e ON e.id = s.employee_id
                ORDER BY s.active_date DESC
                """
            )
            out: list[dict] = []
            for r in fetchall(cur):
                expiry = normalize_mysql_date(r.get("expiry_date"))
                out.append(
                    {
                        "shift_id": int(r["id"]),
                        "employee_id": int(r["employee_id"]),
                        "name": r.get("name"),
                        "department": r.get("department"),
                        "person_id": r.get("person_id"),
                        "start_time": normalize_mysql_time(r["start_time"]).strftime("%H:%M"),
                        "end_time": normalize_mysql_time(r["end_time"]).strftime("%H:%M"),
                        "active_date": normalize_mysql_date(r["active_date"]).isoformat(),
                        "expiry_date": expiry.isoformat() if expiry else None,
                    }
                )
            return out

    def has_overlap(
        self,
        *,
        employee_id: int,
        active_date: date,
        expiry_date: date,
        exclude_shift_id: Optional[int] = None,
    ) -> bool:
        # (StartA <= EndB) AND (EndA >= StartB), open-ended rows never end.
        sql = """
            SELECT id FROM shifts
            WHERE employee_id=%s
              AND active_date <= %s
              AND (expiry_date IS NULL OR expiry_date >= %s)
        """
        params: list[object] = [int(employee_id), expiry_date, active_date]
        if exclude_shift_id:
            sql += " AND id <> %s"
            params.append(int(exclude_shift_id))

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(sql, tuple(params))
            return len(fetchall(cur)) > 0

    def create(
        self,
        *,
        employee_id: int,
        start_time: time,
        end_time: time,
        active_date: date,
        expiry_date: Optional[date],
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO shifts(employee_id, start_time, end_time, active_date, expiry_date)
                VALUES(%s,%s,%s,%s,%s)
                """,
                (int(employee_id), start_time, end_time, active_date, expiry_date),
            )
            return int(cur.lastrowid or 0)

    def update(
        self,
        *,
        shift_id: int,
        employee_id: int,
        start_time: time,
        end_time: time,
        active_date: date,
        expiry_date: Optional[date],
    ) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE shifts
                SET employee_id=%s, start_time=%s, end_time=%s, active_date=%s, expiry_date=%s
                WHERE id=%s
                """,
                (int(employee_id), start_time, end_time, active_date, expiry_date, int(shift_id)),
            )
            if cur.rowcount > 0:
                return True
            cur.execute("SELECT id FROM shifts WHERE id=%s", (int(shift_id),))
            return fetchone(cur) is not None
