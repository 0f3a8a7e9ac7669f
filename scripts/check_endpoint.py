from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.attendance_dashboard.attendance_dashboard.container import build_container
from src.attendance_dashboard.attendance_dashboard.core.enums import Period
from src.attendance_dashboard.attendance_dashboard.core.exceptions import DomainError


def main() -> int:
    settings = importlib.import_module(get_settings_module())
    container = build_container(api_config=dict(settings.API_CONFIG))

    try:
        employees = container.employees_repo.list_all()
        attendance = container.attendance_repo.list_all(Period.WEEKLY)
        tasks = container.tasks_repo.list_all()
    except DomainError as e:
        print(f"FAILED: {settings.API_CONFIG.get('url')} -> {e}")
        return 1

    print(
        f"OK: {settings.API_CONFIG.get('url')} "
        f"(employees={len(employees)}, attendance(weekly)={len(attendance)}, tasks={len(tasks)})"
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
