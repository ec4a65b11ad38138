"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
All clock values are minutes since midnight.
"""

MINUTES_PER_DAY = 24 * 60

REFERENCE_BREAK_MINUTES = 60
STANDARD_WORK_MINUTES = 8 * 60
STANDARD_WITH_BREAK_MINUTES = STANDARD_WORK_MINUTES + REFERENCE_BREAK_MINUTES

LATE_NIGHT_START = 22 * 60
LATE_NIGHT_START_DAYTIME_ORIGIN = 22 * 60 + 15
LATE_NIGHT_END = 5 * 60

PAY_PERIOD_START_DAY = 21
DEFAULT_HISTORY_LIMIT = 31
