from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, time
from typing import Callable, Optional, Sequence, TypeVar

from ..attendance.repository import AttendanceRepository
from ..attendance.service import pick_today
from ..core.constants import DEFAULT_LATE_CUTOFF
from ..core.enums import Period
from ..core.exceptions import NetworkError, ServerRejectionError
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from ..tasks.repository import TaskRepository
from ..users.model import SessionUser
from . import aggregator as agg
from . import renderer as view

T = TypeVar("T")


@dataclass
class EmployeeDashboard:
    today: dict
    history: list[dict]
    weekly_cards: list[dict]
    weekly_chart: dict
    tasks: list[dict]
    notices: list[str] = field(default_factory=list)


@dataclass
class AdminDashboard:
    stats: list[dict]
    employees: list[dict]
    attendance_chart: dict
    department_chart: dict
    task_chart: dict
    notices: list[str] = field(default_factory=list)


@dataclass
class FilteredReport:
    period: Period
    employee_id: Optional[str]
    overview: list[dict]
    attendance: list[dict]
    tasks: list[dict]
    task_chart: dict
    employee_options: list[dict]
    notices: list[str] = field(default_factory=list)


@dataclass
class EmployeeDetail:
    employee: Employee
    presence: list[dict]
    attendance: list[dict]
    tasks: list[dict]
    notices: list[str] = field(default_factory=list)


class DashboardService:
    """Read side: fetch rows, aggregate, render.

    Each section loads on its own; when one fetch fails the section falls back
    to its empty state and the failure message is returned in ``notices``.
    """

    def __init__(
        self,
        attendance: AttendanceRepository,
        tasks: TaskRepository,
        employees: EmployeeRepository,
        *,
        late_cutoff: time = DEFAULT_LATE_CUTOFF,
    ):
        self._attendance = attendance
        self._tasks = tasks
        self._employees = employees
        self._late_cutoff = late_cutoff

    @staticmethod
    def _load(loader: Callable[[], Sequence[T]], notices: list[str]) -> list[T]:
        try:
            return list(loader())
        except (NetworkError, ServerRejectionError) as e:
            if str(e) not in notices:
                notices.append(str(e))
            return []

    def employee_dashboard(self, user: SessionUser, today: date) -> EmployeeDashboard:
        notices: list[str] = []
        daily = self._load(lambda: self._attendance.list_for_user(user.user_id, Period.DAILY), notices)
        week = self._load(lambda: self._attendance.list_for_user(user.user_id, Period.WEEKLY), notices)
        tasks = self._load(lambda: self._tasks.list_for_user(user.user_id), notices)

        today_rec = pick_today(daily, today)
        tasks = sorted(tasks, key=lambda t: t.last_updated or datetime.min, reverse=True)

        return EmployeeDashboard(
            today=view.check_in_state(today_rec),
            history=view.attendance_history_rows(week),
            weekly_cards=view.weekly_stat_cards(agg.weekly_hours(week)),
            weekly_chart=view.weekly_hours_chart(agg.daily_hours(week, today)),
            tasks=view.task_cards(tasks),
            notices=notices,
        )

    def admin_stats(self, today: date, *, notices: Optional[list[str]] = None) -> dict:
        """Stat cards and charts; also serves the periodic JSON refresh."""
        notices = notices if notices is not None else []
        employees = self._load(self._employees.list_all, notices)
        attendance = self._load(lambda: self._attendance.list_all(Period.WEEKLY), notices)
        tasks = self._load(self._tasks.list_all, notices)

        todays = [r for r in attendance if r.work_date == today]
        stats = view.admin_stat_cards(
            total=len(employees),
            present=agg.present_today(employees, attendance, today),
            absent=agg.absent_today(employees, attendance, today),
            late=agg.late_arrivals(todays, self._late_cutoff),
        )
        return {
            "stats": stats,
            "employees": view.employee_rows(employees, attendance, today),
            "attendance_chart": view.daily_attendance_chart(
                agg.daily_presence(attendance, today), employee_count=len(employees)
            ),
            "department_chart": view.department_chart(agg.department_histogram(employees)),
            "task_chart": view.task_status_chart(agg.task_status_histogram(tasks)),
        }

    def admin_dashboard(self, today: date) -> AdminDashboard:
        notices: list[str] = []
        data = self.admin_stats(today, notices=notices)
        return AdminDashboard(notices=notices, **data)

    def admin_filtered(self, period: Period, employee_id: Optional[str] = None) -> FilteredReport:
        notices: list[str] = []
        employees = self._load(self._employees.list_all, notices)
        if employee_id:
            attendance = self._load(lambda: self._attendance.list_for_user(employee_id, period), notices)
            tasks = self._load(lambda: self._tasks.list_for_user(employee_id), notices)
        else:
            attendance = self._load(lambda: self._attendance.list_all(period), notices)
            tasks = self._load(self._tasks.list_all, notices)

        rows = view.period_attendance_rows(attendance)

        return FilteredReport(
            period=period,
            employee_id=employee_id,
            overview=view.overview_cards(agg.attendance_overview(attendance)),
            attendance=rows,
            tasks=view.detail_task_rows(tasks, limit=len(tasks)),
            task_chart=view.task_status_chart(agg.task_status_histogram(tasks)),
            employee_options=[{"id": e.employee_id, "name": e.name} for e in employees],
            notices=notices,
        )

    def employee_detail(self, employee: Employee, today: date) -> EmployeeDetail:
        notices: list[str] = []
        attendance = self._load(lambda: self._attendance.list_for_user(employee.employee_id, Period.MONTHLY), notices)
        tasks = self._load(lambda: self._tasks.list_for_user(employee.employee_id), notices)
        recent = sorted(attendance, key=lambda r: r.work_date, reverse=True)

        return EmployeeDetail(
            employee=employee,
            presence=view.presence_strip(agg.presence_by_day(employee.employee_id, attendance, today)),
            attendance=view.detail_attendance_rows(recent),
            tasks=view.detail_task_rows(tasks),
            notices=notices,
        )
