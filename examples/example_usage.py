"""Example: using the service layer without Flask.

Prints one employee's week straight from the endpoint configured in settings.
"""

import importlib
import sys
from datetime import date

from config import get_settings_module

from src.attendance_dashboard.attendance_dashboard.container import build_container
from src.attendance_dashboard.attendance_dashboard.core.enums import Period
from src.attendance_dashboard.attendance_dashboard.reports import aggregator


def main(user_id: str = "EMP001"):
    settings = importlib.import_module(get_settings_module())
    container = build_container(api_config=settings.API_CONFIG)

    records = container.attendance_repo.list_for_user(user_id, Period.WEEKLY)
    stats = aggregator.weekly_hours(records)
    print(f"{user_id}: {stats.days_present} days, {stats.total_hours:.1f}h total, {stats.avg_hours_per_day:.1f}h/day")
    print(aggregator.daily_hours(records, date.today()))


if __name__ == "__main__":
    main(*sys.argv[1:2])
