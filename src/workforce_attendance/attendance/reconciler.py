"""Attendance reconciliation.

Merges device and manual clock records with shift assignments and the
day-type calendar into a per-day breakdown plus per-employee counters. The
module is pure: no I/O, no state kept between calls.
"""

from __future__ import annotations

import logging
from datetime import date, datetime, timedelta
from typing import Iterable, Optional, Sequence, Tuple

from ..common.datetime_utils import format_hhmm, iter_days
from ..core.constants import DEFAULT_DAY_TYPE, HOLIDAY_MARKER
from ..core.enums import DayStatus, EntryFlag
from ..employees.model import Employee
from ..shifts.model import ShiftAssignment
from .factory import AttendanceStrategyFactory
from .model import DailyBreakdown, DayTypeEntry, EmployeeSummary, LogEntry, ReconciliationResult

logger = logging.getLogger(__name__)

LogKey = Tuple[str, date]

_DEFAULT_FACTORY = AttendanceStrategyFactory()


def index_logs(logs: Iterable[LogEntry]) -> dict[LogKey, LogEntry]:
    """Key logs by (person_code, date).

    A manual entry replaces a device entry or an earlier manual entry for the
    same key, so the latest correction (manual rows arrive in id order) is the
    one in effect. Among device entries the first seen wins.
    """

    index: dict[LogKey, LogEntry] = {}
    for entry in logs:
        key = (entry.person_code, entry.work_date)
        current = index.get(key)
        if current is None or entry.is_manual:
            index[key] = entry
    return index


def find_shift(employee: Employee, day: date, shifts: Sequence[ShiftAssignment]) -> Optional[ShiftAssignment]:
    matches = [s for s in shifts if s.belongs_to(employee) and s.covers(day)]
    if not matches:
        return None
    if len(matches) > 1:
        logger.warning(
            "Employee %s has %d shift assignments covering %s; using shift %s",
            employee.person_code,
            len(matches),
            day.isoformat(),
            matches[0].shift_id,
        )
    return matches[0]


def _actual_range(actual_in: datetime, actual_out: Optional[datetime], *, overnight: bool) -> str:
    text = f"{format_hhmm(actual_in)} - {format_hhmm(actual_out)}"
    if overnight:
        text += " (+1)"
    return text


def reconcile(
    start: date,
    end: date,
    employees: Sequence[Employee],
    shifts: Sequence[ShiftAssignment],
    logs: Sequence[LogEntry],
    day_types: Sequence[DayTypeEntry],
    *,
    strategy_factory: Optional[AttendanceStrategyFactory] = None,
) -> ReconciliationResult:
    """Reconcile attendance for every employee and every day in [start, end].

    ``employees`` is expected to be filtered to the report scope already.
    ``logs`` should cover ``end + 1`` as well so overnight shifts ending on
    the day after the window can find their check-out.
    """

    factory = strategy_factory or _DEFAULT_FACTORY
    log_index = index_logs(logs)
    day_type_by_date = {}
    for entry in day_types:
        day_type_by_date.setdefault(entry.day, entry.day_type)

    breakdown: list[DailyBreakdown] = []
    summaries: list[EmployeeSummary] = []

    for employee in employees:
        summary = EmployeeSummary.for_employee(employee)
        summaries.append(summary)

        for day in iter_days(start, end):
            summary.total_days += 1

            day_type = day_type_by_date.get(day, DEFAULT_DAY_TYPE)
            status = DayStatus.HOLIDAY if HOLIDAY_MARKER in day_type else DayStatus.DAY_OFF
            flag = EntryFlag.AUTO
            actual_range = "-"

            shift = find_shift(employee, day, shifts)
            log = log_index.get((employee.person_code, day))
            next_log = log_index.get((employee.person_code, day + timedelta(days=1)))

            if shift:
                overnight = shift.is_overnight
                actual_in: Optional[datetime] = None
                actual_out: Optional[datetime] = None
                if overnight:
                    if log:
                        actual_in = log.check_out or log.check_in
                    if next_log:
                        actual_out = next_log.check_in
                elif log:
                    actual_in = log.check_in
                    actual_out = log.check_out

                if (log and log.is_manual) or (overnight and next_log and next_log.is_manual):
                    flag = EntryFlag.MANUAL

                decision = factory.for_day(shift=shift, actual_in=actual_in, actual_out=actual_out).decide_day(
                    shift=shift, actual_in=actual_in, actual_out=actual_out
                )
                status = decision.status
                if decision.counts_present:
                    summary.present += 1
                    if flag == EntryFlag.MANUAL:
                        summary.manual_edit_count += 1
                    summary.record_punctuality(status)
                    actual_range = _actual_range(actual_in, actual_out, overnight=overnight)
                else:
                    summary.absent += 1
            elif log:
                status = DayStatus.EXTRA
                summary.present += 1
                if log.is_manual:
                    flag = EntryFlag.MANUAL
                actual_range = f"{format_hhmm(log.check_in)} - {format_hhmm(log.check_out)}"

            breakdown.append(
                DailyBreakdown(
                    work_date=day,
                    day_type=day_type,
                    person_code=employee.person_code,
                    name=employee.name,
                    department=employee.department,
                    shift_start=format_hhmm(shift.start_time, missing="-") if shift else "-",
                    shift_end=format_hhmm(shift.end_time, missing="-") if shift else "-",
                    actual_range=actual_range,
                    status=status,
                    flag=flag,
                )
            )

    breakdown.sort(key=lambda r: r.work_date)
    return ReconciliationResult(breakdown=breakdown, summary=summaries)
