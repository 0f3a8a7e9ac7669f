import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

API_CONFIG = {
    "url": os.getenv("SHEETS_API_URL", "http://localhost:8080/exec"),
    "timeout": float(os.getenv("SHEETS_API_TIMEOUT", "20")),
}

# Check-ins strictly after this time of day count as late arrivals.
LATE_CUTOFF = os.getenv("LATE_CUTOFF", "09:30")

ATTENDANCE_REFRESH_SECONDS = int(os.getenv("ATTENDANCE_REFRESH_SECONDS", "60"))
ADMIN_REFRESH_SECONDS = int(os.getenv("ADMIN_REFRESH_SECONDS", "300"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

DEBUG = True
