from datetime import date

import requests

EMPLOYEES = [
    ["ID", "Name", "Email", "Department", "Position", "Status"],
    ["EMP001", "John Doe", "john@example.com", "IT", "Developer", "Active"],
    ["EMP002", "Mary Major", "mary@example.com", "HR", "Manager", "Active"],
]


def _route_admin_reads(fake_http):
    today = date.today().isoformat()
    fake_http.route("sheet:Employees", EMPLOYEES)
    fake_http.route(
        "action:getAllAttendance",
        {"success": True, "data": [["EMP001", today, "09:45", "", "Present", "John Doe"]]},
    )
    fake_http.route("action:getAllTasks", {"success": True, "data": [["task_1", "EMP001", "Report", "Completed", ""]]})


def test_login_page_renders(client):
    resp = client.get("/")

    assert resp.status_code == 200
    assert b"Employee Login" in resp.data


def test_login_success_redirects_to_dashboard(client, fake_http):
    fake_http.route("action:login", {"success": True, "user": {"userId": "EMP001", "name": "John Doe", "role": "employee"}})

    resp = client.post("/", data={"user_id": "emp001"})

    assert resp.status_code == 302
    assert resp.headers["Location"].endswith("/dashboard")
    with client.session_transaction() as sess:
        assert '"userId": "EMP001"' in sess["currentUser"]


def test_login_failure_shows_message(client, fake_http):
    fake_http.route("action:login", {"success": False, "message": "User not found"})

    resp = client.post("/", data={"user_id": "EMP404"})

    assert resp.status_code == 200
    assert b"User not found" in resp.data


def test_corrupted_session_shows_login(client):
    with client.session_transaction() as sess:
        sess["currentUser"] = "{broken"

    resp = client.get("/")

    assert resp.status_code == 200
    assert b"Employee Login" in resp.data


def test_dashboard_requires_login(client):
    resp = client.get("/dashboard")

    assert resp.status_code == 302
    assert resp.headers["Location"].endswith("/")


def test_api_requires_login_as_json(client):
    resp = client.get("/api/attendance/today")

    assert resp.status_code == 401
    assert resp.get_json()["success"] is False


def test_employee_dashboard_renders_today_card(client, fake_http, login_as):
    login_as()
    today = date.today().isoformat()
    fake_http.route(
        "action:getAttendance",
        {"success": True, "data": [["EMP001", today, "08:55", "", "Present", "John Doe"]]},
    )
    fake_http.route("action:getTasks", {"success": True, "data": []})

    resp = client.get("/dashboard")

    assert resp.status_code == 200
    assert b"08:55" in resp.data
    assert b"Already Checked In" in resp.data


def test_dashboard_section_failure_becomes_notice(client, fake_http, login_as):
    login_as()
    fake_http.route("action:getAttendance", exc=requests.exceptions.ConnectionError())
    fake_http.route("action:getTasks", {"success": True, "data": []})

    resp = client.get("/dashboard")

    assert resp.status_code == 200
    assert b"Connection error. Please try again." in resp.data


def test_check_in_failure_is_flashed(client, fake_http, login_as):
    login_as()
    fake_http.route("action:checkIn", {"success": False, "message": "Already checked in today"})

    resp = client.post("/checkin")

    assert resp.status_code == 302
    with client.session_transaction() as sess:
        flashes = sess["_flashes"]
    assert ("danger", "Already checked in today") in flashes


def test_check_in_success_is_flashed(client, fake_http, login_as):
    login_as()
    fake_http.route("action:checkIn", {"success": True, "time": "2024-01-03T09:07:00"})

    client.post("/checkin")

    with client.session_transaction() as sess:
        assert ("success", "Checked in successfully at 09:07") in sess["_flashes"]


def test_today_refresh_json(client, fake_http, login_as):
    login_as()
    fake_http.route(
        "action:getAttendance",
        {"success": True, "data": [["EMP001", date.today().isoformat(), "09:00", "17:00", "Present", "John Doe"]]},
    )

    body = client.get("/api/attendance/today").get_json()

    assert body["success"] is True
    assert body["check_in_time"] == "09:00"
    assert body["can_check_out"] is False


def test_add_task_flashes_validation_error(client, fake_http, login_as):
    login_as()

    client.post("/tasks", data={"task_title": "  "})

    with client.session_transaction() as sess:
        assert ("danger", "Please enter a task title") in sess["_flashes"]
    assert fake_http.calls == []


def test_logout_clears_session(client, login_as):
    login_as()

    resp = client.get("/logout")

    assert resp.status_code == 302
    with client.session_transaction() as sess:
        assert "currentUser" not in sess


def test_employee_is_forbidden_from_admin(client, login_as):
    login_as(role="employee")

    assert client.get("/admin").status_code == 403
    assert client.get("/api/admin/stats").status_code == 403


def test_admin_dashboard_renders(client, fake_http, login_as):
    login_as("ADM001", "Admin", "admin")
    _route_admin_reads(fake_http)

    resp = client.get("/admin")

    assert resp.status_code == 200
    assert b"Mary Major" in resp.data


def test_admin_stats_json(client, fake_http, login_as):
    login_as("ADM001", "Admin", "admin")
    _route_admin_reads(fake_http)

    body = client.get("/api/admin/stats").get_json()

    assert body["success"] is True
    assert {c["key"]: c["value"] for c in body["stats"]} == {
        "totalEmployees": 2,
        "presentToday": 1,
        "absentToday": 1,
        "lateToday": 1,
    }
    assert body["department_chart"]["data"]["labels"] == ["IT", "HR"]
    assert "employees" not in body


def test_admin_stats_reports_failed_sections(client, fake_http, login_as):
    login_as("ADM001", "Admin", "admin")
    fake_http.route("sheet:Employees", EMPLOYEES)
    fake_http.route("action:getAllAttendance", {"success": True, "data": []})
    fake_http.route("action:getAllTasks", {"ok": True}, status_code=503)

    body = client.get("/api/admin/stats").get_json()

    assert body["success"] is False
    assert body["notices"] == ["Server error (HTTP 503). Please try again."]
    assert body["task_chart"]["data"]["datasets"][0]["data"] == [0, 0, 0]


def test_duplicate_employee_is_not_posted(client, fake_http, login_as):
    login_as("ADM001", "Admin", "admin")
    fake_http.route("sheet:Employees", EMPLOYEES)
    form = {
        "id": "EMP002",
        "name": "Someone",
        "email": "someone@example.com",
        "department": "IT",
        "position": "Developer",
        "status": "Active",
    }

    resp = client.post("/admin/employees/add", data=form)

    assert resp.status_code == 200
    assert b"Employee ID already exists" in resp.data
    assert fake_http.posts() == []


def test_admin_attendance_filter(client, fake_http, login_as):
    login_as("ADM001", "Admin", "admin")
    fake_http.route("sheet:Employees", EMPLOYEES)
    fake_http.route("action:getAttendance", {"success": True, "data": []})
    fake_http.route("action:getTasks", {"success": True, "data": []})

    resp = client.get("/admin/attendance?period=monthly&employee=EMP002")

    assert resp.status_code == 200
    assert ("GET", {"action": "getAttendance", "userId": "EMP002", "period": "monthly"}) in fake_http.calls


def test_unknown_employee_detail_redirects(client, fake_http, login_as):
    login_as("ADM001", "Admin", "admin")
    fake_http.route("sheet:Employees", EMPLOYEES)

    resp = client.get("/admin/employees/EMP404")

    assert resp.status_code == 302
