from __future__ import annotations

from datetime import date
from typing import Any, Dict, Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, normalize_mysql_date
from .model import Employee
from .repository import EmployeeRepository

_COLUMNS = "id, person_id, name, department, effective_date, resignation_date"


def _to_employee(r: Dict[str, Any]) -> Employee:
    return Employee(
        employee_id=int(r["id"]),
        person_code=str(r["person_id"]),
        name=r["name"],
        department=r.get("department"),
        effective_date=normalize_mysql_date(r.get("effective_date")),
        resignation_date=normalize_mysql_date(r.get("resignation_date")),
    )


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM employees ORDER BY name")
            return [_to_employee(r) for r in fetchall(cur)]

    def list_active_on(self, day: date) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM employees
                WHERE effective_date IS NOT NULL
                  AND effective_date <= %s
                  AND (resignation_date IS NULL OR resignation_date >= %s)
                ORDER BY name
                """,
                (day, day),
            )
            return [_to_employee(r) for r in fetchall(cur)]

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM employees WHERE id=%s", (int(employee_id),))
            r = fetchone(cur)
            return _to_employee(r) if r else None
