import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

API_CONFIG = {
    "url": os.getenv("SHEETS_API_URL", ""),
    "timeout": float(os.getenv("SHEETS_API_TIMEOUT", "20")),
}

LATE_CUTOFF = os.getenv("LATE_CUTOFF", "09:30")

ATTENDANCE_REFRESH_SECONDS = int(os.getenv("ATTENDANCE_REFRESH_SECONDS", "60"))
ADMIN_REFRESH_SECONDS = int(os.getenv("ADMIN_REFRESH_SECONDS", "300"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

DEBUG = False
