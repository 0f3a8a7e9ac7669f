from __future__ import annotations

from datetime import date

from flask import Flask, jsonify, render_template, request

from ..container import Container
from ..core.enums import Period
from ..users.guards import admin_required


def register(app: Flask, container: Container) -> None:
    def _parse_period(value) -> Period:
        try:
            return Period(value)
        except ValueError:
            return Period.WEEKLY

    @app.route("/admin", endpoint="admin_dashboard")
    @admin_required
    def admin_dashboard():
        data = container.dashboard_service.admin_dashboard(date.today())
        return render_template(
            "admin/dashboard.html",
            data=data,
            refresh_seconds=app.config["ADMIN_REFRESH_SECONDS"],
            active_page="admin_dashboard",
        )

    @app.route("/admin/attendance", endpoint="admin_attendance")
    @admin_required
    def admin_attendance():
        period = _parse_period(request.args.get("period", Period.WEEKLY.value))
        employee_id = request.args.get("employee") or None
        if employee_id == "all":
            employee_id = None

        data = container.dashboard_service.admin_filtered(period, employee_id)
        return render_template(
            "admin/attendance.html",
            data=data,
            periods=[p.value for p in Period],
            active_page="admin_attendance",
        )

    @app.route("/api/admin/stats", endpoint="api_admin_stats")
    @admin_required
    def api_admin_stats():
        """Polled by the admin page; sections that fail come back in ``notices``."""
        notices: list[str] = []
        data = container.dashboard_service.admin_stats(date.today(), notices=notices)
        data.pop("employees", None)
        return jsonify({"success": not notices, "notices": notices, **data})
