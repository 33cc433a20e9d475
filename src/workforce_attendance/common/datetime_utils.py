from __future__ import annotations

from datetime import date, datetime, time, timedelta
from typing import Iterator, Optional, Tuple


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def parse_hhmm(value: str) -> time:
    """Parse ``HH:MM`` or ``HH:MM:SS`` into a time of day."""
    parts = value.strip().split(":")
    hours = int(parts[0])
    minutes = int(parts[1])
    seconds = int(parts[2]) if len(parts) >= 3 and parts[2] else 0
    return time(hour=hours, minute=minutes, second=seconds)


def minutes_of_day(value: time | datetime) -> int:
    """Minutes since midnight; seconds are ignored."""
    return value.hour * 60 + value.minute


def format_hhmm(value: Optional[time | datetime], *, missing: str = "?") -> str:
    if value is None:
        return missing
    return value.strftime("%H:%M")


def iter_days(start: date, end: date) -> Iterator[date]:
    """Yield every calendar day from start to end, both inclusive."""
    day = start
    while day <= end:
        yield day
        day += timedelta(days=1)


def previous_week_range(today: date) -> Tuple[date, date]:
    """Monday..Sunday of the week before the one containing ``today``."""
    current_monday = today - timedelta(days=today.weekday())
    prev_monday = current_monday - timedelta(days=7)
    return prev_monday, prev_monday + timedelta(days=6)


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()
