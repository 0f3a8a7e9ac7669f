"""View builders: typed aggregator output in, template-ready dicts out.

Templates only loop over what these return, so a missing check-in/out is
already the ``--:--`` sentinel by the time it reaches Jinja.
"""
from __future__ import annotations

from datetime import date
from typing import Iterable, Mapping, Optional, Sequence

from ..attendance.model import AttendanceRecord
from ..common.datetime_utils import calculate_hours, format_day_label, format_time_only, format_timestamp
from ..core.constants import DETAIL_ATTENDANCE_LIMIT, DETAIL_TASK_LIMIT, HISTORY_LIMIT
from ..core.enums import TaskStatus
from ..employees.model import Employee
from ..tasks.model import Task
from .aggregator import AttendanceOverview, WeeklyHours, record_for

PALETTE = ["#4b6cb7", "#2ecc71", "#e74c3c", "#f39c12", "#9b59b6", "#3498db", "#1abc9c", "#34495e"]

TASK_STATUS_COLORS = {
    TaskStatus.NOT_STARTED.value: "#95a5a6",
    TaskStatus.IN_PROGRESS.value: "#f39c12",
    TaskStatus.COMPLETED.value: "#2ecc71",
}

_TASK_ACTIONS = (
    (TaskStatus.NOT_STARTED, "Reset", "btn-outline"),
    (TaskStatus.IN_PROGRESS, "Start", "btn-warning"),
    (TaskStatus.COMPLETED, "Complete", "btn-success"),
)


def css_slug(value: str) -> str:
    return value.lower().replace(" ", "-")


def attendance_history_rows(records: Iterable[AttendanceRecord], *, limit: int = HISTORY_LIMIT) -> list[dict]:
    ordered = sorted(records, key=lambda r: r.work_date, reverse=True)[:limit]
    return [
        {
            "date": format_day_label(r.work_date),
            "check_in": format_time_only(r.check_in),
            "check_out": format_time_only(r.check_out),
            "hours": calculate_hours(r.check_in, r.check_out),
        }
        for r in ordered
    ]


def detail_attendance_rows(records: Iterable[AttendanceRecord], *, limit: int = DETAIL_ATTENDANCE_LIMIT) -> list[dict]:
    rows = []
    for r in list(records)[:limit]:
        rows.append(
            {
                "date": r.work_date.strftime("%m/%d/%Y"),
                "check_in": format_time_only(r.check_in),
                "check_out": format_time_only(r.check_out),
                "status": r.status,
                "css_class": "active" if r.status == "Present" else "inactive",
            }
        )
    return rows


def period_attendance_rows(records: Iterable[AttendanceRecord]) -> list[dict]:
    """Admin filter table: every record of the period, newest first."""
    ordered = sorted(records, key=lambda r: r.work_date, reverse=True)
    return [
        {
            "user_id": r.user_id,
            "date": r.work_date.strftime("%m/%d/%Y"),
            "check_in": format_time_only(r.check_in),
            "check_out": format_time_only(r.check_out),
            "hours": calculate_hours(r.check_in, r.check_out),
            "status": r.status,
        }
        for r in ordered
    ]


def detail_task_rows(tasks: Iterable[Task], *, limit: int = DETAIL_TASK_LIMIT) -> list[dict]:
    return [
        {"title": t.title, "status": t.status, "last_updated": format_timestamp(t.last_updated)}
        for t in list(tasks)[:limit]
    ]


def task_cards(tasks: Iterable[Task]) -> list[dict]:
    cards = []
    for t in tasks:
        cards.append(
            {
                "task_id": t.task_id,
                "title": t.title,
                "status": t.status,
                "css_class": css_slug(t.status),
                "updated": format_timestamp(t.last_updated),
                "actions": [
                    {"status": status.value, "label": label, "css": css}
                    for status, label, css in _TASK_ACTIONS
                    if status.value != t.status
                ],
            }
        )
    return cards


def employee_rows(employees: Iterable[Employee], attendance: Sequence[AttendanceRecord], today: date) -> list[dict]:
    rows = []
    for e in employees:
        rec = record_for(e.employee_id, attendance, today)
        rows.append(
            {
                "id": e.employee_id,
                "name": e.name,
                "email": e.email,
                "department": e.department,
                "position": e.position,
                "check_in": format_time_only(rec.check_in if rec else None),
                "check_out": format_time_only(rec.check_out if rec else None),
                "status": e.status.value,
                "status_css": "active" if e.is_active else "inactive",
            }
        )
    return rows


def presence_strip(presence: Mapping[date, bool]) -> list[dict]:
    return [
        {"day": d.strftime("%a"), "present": present, "css_class": "present" if present else "absent"}
        for d, present in presence.items()
    ]


def admin_stat_cards(*, total: int, present: int, absent: int, late: int) -> list[dict]:
    return [
        {"key": "totalEmployees", "label": "Total Employees", "value": total, "icon": "fa-users"},
        {"key": "presentToday", "label": "Present Today", "value": present, "icon": "fa-user-check"},
        {"key": "absentToday", "label": "Absent Today", "value": absent, "icon": "fa-user-times"},
        {"key": "lateToday", "label": "Late Arrivals", "value": late, "icon": "fa-clock"},
    ]


def weekly_stat_cards(stats: WeeklyHours) -> list[dict]:
    return [
        {"label": "Days Present", "value": str(stats.days_present), "icon": "fa-calendar-week"},
        {"label": "Total Hours", "value": f"{stats.total_hours:.1f}", "icon": "fa-clock"},
        {"label": "Avg Hours/Day", "value": f"{stats.avg_hours_per_day:.1f}", "icon": "fa-chart-line"},
    ]


def overview_cards(overview: AttendanceOverview) -> list[dict]:
    return [
        {"label": "Employees Present", "value": str(overview.present_employees)},
        {"label": "Total Check-ins", "value": str(overview.total_check_ins)},
        {"label": "Total Hours", "value": f"{overview.total_hours:.1f}"},
        {"label": "Avg Hours/Check-in", "value": f"{overview.avg_hours_per_check_in:.1f}"},
    ]


def check_in_state(record: Optional[AttendanceRecord]) -> dict:
    """Today card: displayed times plus which of the two buttons is enabled."""
    checked_in = record is not None and record.check_in is not None
    checked_out = record is not None and record.check_out is not None
    return {
        "check_in_time": format_time_only(record.check_in if record else None),
        "check_out_time": format_time_only(record.check_out if record else None),
        "can_check_in": not checked_in,
        "can_check_out": checked_in and not checked_out,
        "check_in_label": "Already Checked In" if checked_in else "Check In",
        "check_out_label": "Already Checked Out" if checked_out else "Check Out",
    }


def weekly_hours_chart(series: Mapping[date, float]) -> dict:
    return {
        "type": "line",
        "data": {
            "labels": [d.strftime("%a") for d in series],
            "datasets": [
                {
                    "label": "Daily Hours",
                    "data": [round(v, 2) for v in series.values()],
                    "borderColor": "rgba(67, 97, 238, 1)",
                    "backgroundColor": "rgba(67, 97, 238, 0.2)",
                    "borderWidth": 2,
                    "fill": True,
                    "tension": 0.4,
                }
            ],
        },
        "options": {
            "responsive": True,
            "maintainAspectRatio": False,
            "plugins": {"legend": {"display": False}},
            "scales": {"y": {"beginAtZero": True, "title": {"display": True, "text": "Hours"}}},
        },
    }


def daily_attendance_chart(series: Mapping[date, int], *, employee_count: int) -> dict:
    y_axis: dict = {"beginAtZero": True, "title": {"display": True, "text": "Number of Employees"}}
    if employee_count:
        y_axis["max"] = employee_count
    return {
        "type": "line",
        "data": {
            "labels": [format_day_label(d) for d in series],
            "datasets": [
                {
                    "label": "Daily Attendance",
                    "data": list(series.values()),
                    "borderColor": "#4b6cb7",
                    "backgroundColor": "rgba(75, 108, 183, 0.1)",
                    "tension": 0.3,
                    "fill": True,
                }
            ],
        },
        "options": {"responsive": True, "plugins": {"legend": {"display": True}}, "scales": {"y": y_axis}},
    }


def _doughnut(histogram: Mapping[str, int], colors: list[str]) -> dict:
    return {
        "type": "doughnut",
        "data": {
            "labels": list(histogram.keys()),
            "datasets": [{"data": list(histogram.values()), "backgroundColor": colors}],
        },
        "options": {"responsive": True, "plugins": {"legend": {"position": "right"}}},
    }


def department_chart(histogram: Mapping[str, int]) -> dict:
    colors = [PALETTE[i % len(PALETTE)] for i in range(len(histogram))]
    return _doughnut(histogram, colors)


def task_status_chart(histogram: Mapping[str, int]) -> dict:
    return _doughnut(histogram, [TASK_STATUS_COLORS.get(k, "#34495e") for k in histogram])
