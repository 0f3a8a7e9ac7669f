from datetime import date, datetime

from src.attendance_dashboard.attendance_dashboard.attendance.model import AttendanceRecord
from src.attendance_dashboard.attendance_dashboard.reports import renderer as view
from src.attendance_dashboard.attendance_dashboard.tasks.model import Task


def test_history_rows_show_placeholder_for_missing_times():
    records = [
        AttendanceRecord("EMP001", date(2024, 1, 1), datetime(2024, 1, 1, 9, 0), datetime(2024, 1, 1, 17, 0)),
        AttendanceRecord("EMP001", date(2024, 1, 2), datetime(2024, 1, 2, 8, 45), None),
    ]

    rows = view.attendance_history_rows(records)

    assert rows[0] == {"date": "Tue, Jan 2", "check_in": "08:45", "check_out": "--:--", "hours": "N/A"}
    assert rows[1]["hours"] == "8.00h"


def test_history_rows_are_limited_to_seven_newest():
    records = [AttendanceRecord("EMP001", date(2024, 1, d), None, None) for d in range(1, 11)]

    rows = view.attendance_history_rows(records)

    assert len(rows) == 7
    assert rows[0]["date"] == "Wed, Jan 10"


def test_check_in_state_toggles_buttons():
    assert view.check_in_state(None)["can_check_in"] is True
    assert view.check_in_state(None)["can_check_out"] is False

    checked_in = AttendanceRecord("EMP001", date(2024, 1, 3), datetime(2024, 1, 3, 9, 5), None)
    state = view.check_in_state(checked_in)
    assert state["check_in_time"] == "09:05"
    assert state["check_out_time"] == "--:--"
    assert (state["can_check_in"], state["can_check_out"]) == (False, True)

    done = AttendanceRecord("EMP001", date(2024, 1, 3), datetime(2024, 1, 3, 9, 5), datetime(2024, 1, 3, 17, 0))
    state = view.check_in_state(done)
    assert (state["can_check_in"], state["can_check_out"]) == (False, False)
    assert state["check_out_label"] == "Already Checked Out"


def test_task_cards_offer_the_other_two_statuses():
    cards = view.task_cards([Task("task_1", "EMP001", "Write report", "In Progress")])

    card = cards[0]
    assert card["css_class"] == "in-progress"
    assert card["updated"] == "--:--:--"
    assert [a["label"] for a in card["actions"]] == ["Reset", "Complete"]


def test_task_cards_keep_unknown_status_with_all_actions():
    cards = view.task_cards([Task("task_2", "EMP001", "Legacy", "Blocked")])

    assert cards[0]["status"] == "Blocked"
    assert len(cards[0]["actions"]) == 3


def test_charts_follow_series_order():
    chart = view.department_chart({"IT": 2, "HR": 1})

    assert chart["type"] == "doughnut"
    assert chart["data"]["labels"] == ["IT", "HR"]
    assert chart["data"]["datasets"][0]["data"] == [2, 1]

    series = {date(2024, 1, 2): 3, date(2024, 1, 3): 5}
    line = view.daily_attendance_chart(series, employee_count=8)
    assert line["data"]["labels"] == ["Tue, Jan 2", "Wed, Jan 3"]
    assert line["data"]["datasets"][0]["data"] == [3, 5]
    assert line["options"]["scales"]["y"]["max"] == 8


def test_admin_stat_cards_keys():
    cards = view.admin_stat_cards(total=5, present=3, absent=2, late=1)

    assert {c["key"]: c["value"] for c in cards} == {
        "totalEmployees": 5,
        "presentToday": 3,
        "absentToday": 2,
        "lateToday": 1,
    }
