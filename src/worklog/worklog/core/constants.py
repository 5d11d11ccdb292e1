"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from .enums import Weekday

DEFAULT_DAY_RESET_HOUR = 5
DEFAULT_WEEK_START_DAY = Weekday.MONDAY
DEFAULT_REPEATED_START_POLICY = "last_wins"
DEFAULT_DANGLING_START_POLICY = "status"
DEFAULT_STATUS_LOG_LIMIT = 50
