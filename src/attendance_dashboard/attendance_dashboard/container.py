from __future__ import annotations

from dataclasses import dataclass
from datetime import time
from typing import Optional

import requests

from .api.client import ApiConfig, SheetsApiClient
from .attendance.service import AttendanceService
from .attendance.sheets_attendance_repository import SheetsAttendanceRepository
from .core.constants import DEFAULT_HTTP_TIMEOUT, DEFAULT_LATE_CUTOFF
from .employees.service import EmployeeService
from .employees.sheets_employee_repository import SheetsEmployeeRepository
from .reports.service import DashboardService
from .tasks.service import TaskService
from .tasks.sheets_task_repository import SheetsTaskRepository
from .users.service import AuthService


@dataclass(frozen=True)
class Container:
    api: SheetsApiClient

    employees_repo: SheetsEmployeeRepository
    attendance_repo: SheetsAttendanceRepository
    tasks_repo: SheetsTaskRepository

    auth_service: AuthService
    employee_service: EmployeeService
    attendance_service: AttendanceService
    task_service: TaskService
    dashboard_service: DashboardService


def build_container(
    *,
    api_config: dict,
    late_cutoff: time = DEFAULT_LATE_CUTOFF,
    http_session: Optional[requests.Session] = None,
) -> Container:
    config = ApiConfig(
        url=str(api_config["url"]),
        timeout=float(api_config.get("timeout") or DEFAULT_HTTP_TIMEOUT),
    )
    api = SheetsApiClient(config, session=http_session)

    employees_repo = SheetsEmployeeRepository(api)
    attendance_repo = SheetsAttendanceRepository(api)
    tasks_repo = SheetsTaskRepository(api)

    return Container(
        api=api,
        employees_repo=employees_repo,
        attendance_repo=attendance_repo,
        tasks_repo=tasks_repo,
        auth_service=AuthService(api),
        employee_service=EmployeeService(employees_repo),
        attendance_service=AttendanceService(attendance_repo),
        task_service=TaskService(tasks_repo),
        dashboard_service=DashboardService(attendance_repo, tasks_repo, employees_repo, late_cutoff=late_cutoff),
    )
