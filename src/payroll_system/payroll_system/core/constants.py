"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

HOURS_PER_FULL_DAY = 8
HOURS_PER_HALF_DAY = 4
DEFAULT_CURRENCY = "RM"
MAX_HOURLY_RATE = 1_000_000
EXPORT_FILENAME = "attendance.xlsx"
