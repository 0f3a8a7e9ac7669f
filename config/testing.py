SECRET_KEY = "test-secret"

API_CONFIG = {
    "url": "http://sheets.test/exec",
    "timeout": 5,
}

LATE_CUTOFF = "09:30"

ATTENDANCE_REFRESH_SECONDS = 60
ADMIN_REFRESH_SECONDS = 300

LOG_LEVEL = "WARNING"

DEBUG = False
TESTING = True
