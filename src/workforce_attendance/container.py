from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .attendance.mysql_attendance_repository import MySQLAttendanceLogRepository
from .attendance.repository import AttendanceLogRepository
from .attendance.service import AttendanceLogService, ManualEntryService
from .database.connection import DBConfig, DatabaseConnection
from .daytypes.mysql_day_type_repository import MySQLDayTypeRepository
from .daytypes.repository import DayTypeRepository
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.repository import EmployeeRepository
from .employees.service import EmployeeService
from .reports.service import AttendanceReportService
from .shifts.mysql_shift_repository import MySQLShiftRepository
from .shifts.repository import ShiftRepository
from .shifts.service import ShiftService


@dataclass(frozen=True)
class Container:
    employees_repo: EmployeeRepository
    shifts_repo: ShiftRepository
    logs_repo: AttendanceLogRepository
    day_types_repo: DayTypeRepository

    employee_service: EmployeeService
    shift_service: ShiftService
    log_service: AttendanceLogService
    manual_entry_service: ManualEntryService
    report_service: AttendanceReportService

    conn: Optional[DatabaseConnection] = None


def wire(
    *,
    employees_repo: EmployeeRepository,
    shifts_repo: ShiftRepository,
    logs_repo: AttendanceLogRepository,
    day_types_repo: DayTypeRepository,
    conn: Optional[DatabaseConnection] = None,
) -> Container:
    employee_service = EmployeeService(employees_repo)
    log_service = AttendanceLogService(logs_repo)
    return Container(
        employees_repo=employees_repo,
        shifts_repo=shifts_repo,
        logs_repo=logs_repo,
        day_types_repo=day_types_repo,
        employee_service=employee_service,
        shift_service=ShiftService(shifts_repo, employees_repo),
        log_service=log_service,
        manual_entry_service=ManualEntryService(logs_repo, log_service),
        report_service=AttendanceReportService(employee_service, shifts_repo, log_service, day_types_repo),
        conn=conn,
    )


def build_container(*, db_config: dict) -> Container:
    config = DBConfig(
        host=str(db_config["host"]),
        port=int(db_config.get("port", 3306)),
        user=str(db_config["user"]),
        password=str(db_config["password"]),
        database=str(db_config["database"]),
    )
    conn = DatabaseConnection.get_instance(config)

    return wire(
        employees_repo=MySQLEmployeeRepository(conn),
        shifts_repo=MySQLShiftRepository(conn),
        logs_repo=MySQLAttendanceLogRepository(conn),
        day_types_repo=MySQLDayTypeRepository(conn),
        conn=conn,
    )
