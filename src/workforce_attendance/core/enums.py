from __future__ import annotations

from enum import Enum


class DayStatus(str, Enum):
    """Classification of one employee-day in the reconciled report."""

    ON_TIME = "On Time"
    LATE = "Late"
    LEFT_EARLY = "Left Early"
    LATE_AND_EARLY = "Late & Early"
    ABSENT = "Absent"
    HOLIDAY = "Holiday"
    DAY_OFF = "Day Off"
    EXTRA = "Extra"


class LogSource(str, Enum):
    """Where a clock record came from."""

    DEVICE = "device"
    MANUAL = "manual"


class EntryFlag(str, Enum):
    AUTO = "Auto"
    MANUAL = "Manual"


class EntryMode(str, Enum):
    """Manual entry form mode: insert a missing record or correct an existing one."""

    ADD = "add"
    EDIT = "edit"
