"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from datetime import timedelta

HEADER_ROW = 1
FIRST_DATA_ROW = 2

ADDRESS_COL = 1
TOTAL_HOURS_COL = 2
MISSED_HOURS_COL = 3
HOUR_REQUIREMENT_COL = 4
CHECK_IN_COL = 5
TIMEOUT_COL = 6
CURRENT_WEEK_COL = 7

HEADERS = ("Address", "Total Hours", "Missed Hours", "Hour Requirement", "Check In", "Timeouts")

CHECK_IN_FORMAT = "%Y-%m-%d %H:%M:%S"
WEEK_LABEL_FORMAT = "%Y-%m-%d"
HUMAN_CHECK_IN_FORMAT = "%a %I:%M:%S %p"

WEEK_LENGTH = timedelta(days=7)

DEFAULT_HOUR_REQUIREMENT = "6:00:00"
DEFAULT_TIMEOUT_THRESHOLD_MINUTES = 120
DEFAULT_TIMEOUT_RETURN_MINUTES = 30
DEFAULT_MISSED_TIME_MULTIPLIER = 2

ADMIN_SOURCE = "admin"
EXEMPT_SOURCE = "exempt"
TIMEOUT_METADATA = "Timeout"
TIMEOUT_RESET_METADATA = "Admin timeout reset"
