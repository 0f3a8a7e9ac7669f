from __future__ import annotations

import copy
from datetime import date, datetime, time

from src.attendance_dashboard.attendance_dashboard.attendance.model import AttendanceRecord
from src.attendance_dashboard.attendance_dashboard.core.enums import EmployeeStatus
from src.attendance_dashboard.attendance_dashboard.employees.model import Employee
from src.attendance_dashboard.attendance_dashboard.reports import aggregator as agg
from src.attendance_dashboard.attendance_dashboard.tasks.model import Task

TODAY = date(2024, 1, 3)


def _emp(emp_id: str, department: str = "IT") -> Employee:
    return Employee(
        employee_id=emp_id,
        name=emp_id,
        email=f"{emp_id.lower()}@example.com",
        department=department,
        position="Engineer",
        status=EmployeeStatus.ACTIVE,
    )


def _rec(user_id: str, day: date, check_in: time | None, check_out: time | None = None) -> AttendanceRecord:
    return AttendanceRecord(
        user_id=user_id,
        work_date=day,
        check_in=datetime.combine(day, check_in) if check_in else None,
        check_out=datetime.combine(day, check_out) if check_out else None,
        status="Present" if check_in else "Absent",
    )


def test_present_and_absent_today_count_each_employee_once():
    employees = [_emp("EMP001"), _emp("EMP002"), _emp("EMP003")]
    attendance = [
        _rec("EMP001", TODAY, time(9, 0)),
        _rec("EMP001", TODAY, time(13, 0)),
        _rec("EMP002", TODAY, None),
        _rec("EMP003", date(2024, 1, 2), time(9, 0)),
        _rec("GHOST", TODAY, time(9, 0)),
    ]

    assert agg.present_today(employees, attendance, TODAY) == 1
    assert agg.absent_today(employees, attendance, TODAY) == 2


def test_absent_today_never_negative():
    assert agg.absent_today([], [_rec("EMP001", TODAY, time(9, 0))], TODAY) == 0


def test_late_arrivals_cutoff_is_strict():
    attendance = [
        _rec("EMP001", TODAY, time(9, 31)),
        _rec("EMP002", TODAY, time(9, 30)),
        _rec("EMP003", TODAY, time(9, 30, 45)),
        _rec("EMP004", TODAY, None),
    ]

    assert agg.late_arrivals(attendance) == 1
    assert agg.late_arrivals(attendance, cutoff=time(9, 0)) == 3


def test_weekly_hours_without_complete_days_is_zero():
    records = [_rec("EMP001", TODAY, time(9, 0)), _rec("EMP001", date(2024, 1, 2), None)]

    stats = agg.weekly_hours(records)

    assert stats == agg.WeeklyHours(days_present=0, total_hours=0, avg_hours_per_day=0)
    assert agg.weekly_hours([]) == agg.WeeklyHours(0, 0.0, 0.0)


def test_weekly_hours_sums_complete_days_only():
    records = [
        _rec("EMP001", date(2024, 1, 1), time(9, 0), time(17, 0)),
        _rec("EMP001", date(2024, 1, 2), time(9, 0), time(13, 30)),
        _rec("EMP001", TODAY, time(9, 0)),
    ]

    stats = agg.weekly_hours(records)

    assert stats.days_present == 2
    assert stats.total_hours == 12.5
    assert stats.avg_hours_per_day == 6.25


def test_department_histogram_keeps_first_seen_order():
    employees = [_emp("A", "IT"), _emp("B", "IT"), _emp("C", "HR")]

    hist = agg.department_histogram(employees)

    assert hist == {"IT": 2, "HR": 1}
    assert list(hist) == ["IT", "HR"]


def test_task_status_histogram_ignores_unknown_statuses():
    tasks = [
        Task(task_id="t1", user_id="A", title="x", status="Completed"),
        Task(task_id="t2", user_id="A", title="y", status="In Progress"),
        Task(task_id="t3", user_id="A", title="z", status="Blocked"),
        Task(task_id="t4", user_id="A", title="w", status="Completed"),
    ]

    hist = agg.task_status_histogram(tasks)

    assert list(hist.items()) == [("Not Started", 0), ("In Progress", 1), ("Completed", 2)]


def test_attendance_overview_averages_over_check_ins():
    records = [
        _rec("EMP001", TODAY, time(9, 0), time(17, 0)),
        _rec("EMP001", date(2024, 1, 2), time(9, 0)),
        _rec("EMP002", TODAY, None),
    ]

    overview = agg.attendance_overview(records)

    assert overview.present_employees == 1
    assert overview.total_check_ins == 2
    assert overview.total_hours == 8.0
    assert overview.avg_hours_per_check_in == 4.0


def test_daily_series_cover_last_seven_days_oldest_first():
    records = [
        _rec("EMP001", TODAY, time(9, 0), time(17, 0)),
        _rec("EMP002", TODAY, time(10, 0)),
        _rec("EMP001", date(2023, 12, 28), time(9, 0), time(12, 0)),
        _rec("EMP001", date(2023, 12, 1), time(9, 0), time(12, 0)),
    ]

    presence = agg.daily_presence(records, TODAY)
    hours = agg.daily_hours(records, TODAY)

    assert list(presence) == [date(2023, 12, 28 + i) for i in range(4)] + [date(2024, 1, d) for d in (1, 2, 3)]
    assert presence[TODAY] == 2
    assert presence[date(2023, 12, 28)] == 1
    assert hours[TODAY] == 8.0
    assert hours[date(2023, 12, 28)] == 3.0
    assert sum(hours.values()) == 11.0


def test_presence_by_day_and_record_for():
    records = [_rec("EMP001", TODAY, time(9, 0)), _rec("EMP002", date(2024, 1, 2), time(9, 0))]

    presence = agg.presence_by_day("EMP001", records, TODAY)

    assert presence[TODAY] is True
    assert presence[date(2024, 1, 2)] is False
    assert agg.record_for("EMP002", records, date(2024, 1, 2)) is records[1]
    assert agg.record_for("EMP002", records, TODAY) is None


def test_aggregators_do_not_mutate_inputs():
    employees = [_emp("A", "IT"), _emp("B", "HR")]
    records = [_rec("A", TODAY, time(9, 45), time(17, 0))]
    before = (copy.deepcopy(employees), copy.deepcopy(records))

    agg.present_today(employees, records, TODAY)
    agg.late_arrivals(records)
    agg.weekly_hours(records)
    agg.department_histogram(employees)
    agg.daily_hours(records, TODAY)

    assert (employees, records) == before
