"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from datetime import date

MINUTES_PER_DAY = 1440

# A shift starting after noon with a clock-in before 08:00 is treated as a
# clock-in recorded just after midnight.
NOON_MINUTES = 720
EARLY_MORNING_CUTOFF_MINUTES = 480

DEFAULT_DAY_TYPE = "Workday"
HOLIDAY_MARKER = "Holiday"

# Stand-in for an open-ended expiry date when checking shift overlaps.
OPEN_ENDED_EXPIRY = date(2099, 12, 31)

ALL_FILTER = "All"
