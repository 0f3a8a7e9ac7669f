"""Derived attendance/task views.

Every function here is pure: it reads the rows it is given, never mutates
them, and returns a fresh value. Mappings are built in insertion order so
chart series are reproducible.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date, time, timedelta
from typing import Iterable, Optional, Sequence

from ..attendance.model import AttendanceRecord
from ..core.constants import DEFAULT_LATE_CUTOFF, REPORT_DAYS
from ..core.enums import TaskStatus
from ..employees.model import Employee
from ..tasks.model import Task


@dataclass(frozen=True)
class WeeklyHours:
    days_present: int
    total_hours: float
    avg_hours_per_day: float


@dataclass(frozen=True)
class AttendanceOverview:
    present_employees: int
    total_check_ins: int
    total_hours: float
    avg_hours_per_check_in: float


def _checked_in_on(attendance: Iterable[AttendanceRecord], day: date) -> set[str]:
    return {r.user_id for r in attendance if r.work_date == day and r.check_in is not None}


def present_today(employees: Sequence[Employee], attendance: Iterable[AttendanceRecord], today: date) -> int:
    checked_in = _checked_in_on(attendance, today)
    return len({e.employee_id for e in employees} & checked_in)


def absent_today(employees: Sequence[Employee], attendance: Iterable[AttendanceRecord], today: date) -> int:
    return max(len(employees) - present_today(employees, attendance, today), 0)


def is_late(record: AttendanceRecord, cutoff: time = DEFAULT_LATE_CUTOFF) -> bool:
    if record.check_in is None:
        return False
    # Minute precision: 09:30:59 is still on time for a 09:30 cutoff.
    return record.check_in.time().replace(second=0, microsecond=0) > cutoff


def late_arrivals(attendance: Iterable[AttendanceRecord], cutoff: time = DEFAULT_LATE_CUTOFF) -> int:
    return sum(1 for r in attendance if is_late(r, cutoff))


def weekly_hours(records: Iterable[AttendanceRecord]) -> WeeklyHours:
    hours = [r.worked_hours for r in records if r.is_complete]
    total = float(sum(hours))
    days = len(hours)
    return WeeklyHours(
        days_present=days,
        total_hours=total,
        avg_hours_per_day=total / days if days else 0.0,
    )


def attendance_overview(records: Iterable[AttendanceRecord]) -> AttendanceOverview:
    present: set[str] = set()
    check_ins = 0
    total = 0.0
    for r in records:
        if r.check_in is None:
            continue
        present.add(r.user_id)
        check_ins += 1
        if r.check_out is not None:
            total += r.worked_hours
    return AttendanceOverview(
        present_employees=len(present),
        total_check_ins=check_ins,
        total_hours=total,
        avg_hours_per_check_in=total / check_ins if check_ins else 0.0,
    )


def department_histogram(employees: Iterable[Employee]) -> dict[str, int]:
    counts: dict[str, int] = {}
    for e in employees:
        counts[e.department] = counts.get(e.department, 0) + 1
    return counts


def task_status_histogram(tasks: Iterable[Task]) -> dict[str, int]:
    """Counts over the fixed vocabulary. Tasks with any other status are not counted."""
    counts = {s.value: 0 for s in TaskStatus}
    for t in tasks:
        if t.status in counts:
            counts[t.status] += 1
    return counts


def last_days(today: date, days: int = REPORT_DAYS) -> list[date]:
    """``days`` dates ending at ``today``, oldest first."""
    return [today - timedelta(days=i) for i in reversed(range(days))]


def daily_presence(attendance: Iterable[AttendanceRecord], today: date, days: int = REPORT_DAYS) -> dict[date, int]:
    counts = {d: 0 for d in last_days(today, days)}
    for r in attendance:
        if r.check_in is not None and r.work_date in counts:
            counts[r.work_date] += 1
    return counts


def daily_hours(records: Iterable[AttendanceRecord], today: date, days: int = REPORT_DAYS) -> dict[date, float]:
    totals = {d: 0.0 for d in last_days(today, days)}
    for r in records:
        if r.is_complete and r.work_date in totals:
            totals[r.work_date] += r.worked_hours
    return totals


def presence_by_day(
    user_id: str,
    attendance: Iterable[AttendanceRecord],
    today: date,
    days: int = REPORT_DAYS,
) -> dict[date, bool]:
    present = {r.work_date for r in attendance if r.user_id == user_id and r.check_in is not None}
    return {d: d in present for d in last_days(today, days)}


def record_for(user_id: str, attendance: Iterable[AttendanceRecord], day: date) -> Optional[AttendanceRecord]:
    for r in attendance:
        if r.user_id == user_id and r.work_date == day:
            return r
    return None
