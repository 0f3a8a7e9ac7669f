"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from datetime import time

SESSION_KEY = "currentUser"

DEFAULT_LATE_CUTOFF = time(9, 30)
DEFAULT_HTTP_TIMEOUT = 20
DEFAULT_ATTENDANCE_REFRESH_SECONDS = 60
DEFAULT_ADMIN_REFRESH_SECONDS = 300

REPORT_DAYS = 7
HISTORY_LIMIT = 7
DETAIL_ATTENDANCE_LIMIT = 10
DETAIL_TASK_LIMIT = 5

TASK_ID_PREFIX = "task_"

EMPTY_TIME = "--:--"
EMPTY_TIMESTAMP = "--:--:--"
EMPTY_HOURS = "N/A"

DEPARTMENTS = ("IT", "HR", "Finance", "Marketing", "Sales", "Operations")
