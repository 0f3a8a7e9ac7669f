from __future__ import annotations

import logging
from datetime import date

from flask import Flask, flash, jsonify, redirect, render_template, url_for

from ..container import Container
from ..core.exceptions import DomainError
from ..reports.renderer import check_in_state
from ..users.guards import current_user, login_required

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/dashboard", endpoint="dashboard")
    @login_required
    def dashboard():
        data = container.dashboard_service.employee_dashboard(current_user(), date.today())
        return render_template(
            "dashboard.html",
            data=data,
            refresh_seconds=app.config["ATTENDANCE_REFRESH_SECONDS"],
            active_page="dashboard",
        )

    @app.route("/checkin", methods=["POST"], endpoint="checkin")
    @login_required
    def checkin():
        try:
            at = container.attendance_service.check_in(current_user())
            flash(f"Checked in successfully at {at.strftime('%H:%M')}", "success")
        except DomainError as e:
            flash(str(e) or "Error checking in", "danger")
        except Exception:
            logger.exception("Check-in failed")
            flash("Error checking in", "danger")
        return redirect(url_for("dashboard"))

    @app.route("/checkout", methods=["POST"], endpoint="checkout")
    @login_required
    def checkout():
        try:
            at = container.attendance_service.check_out(current_user())
            flash(f"Checked out successfully at {at.strftime('%H:%M')}", "success")
        except DomainError as e:
            flash(str(e) or "Error checking out", "danger")
        except Exception:
            logger.exception("Check-out failed")
            flash("Error checking out", "danger")
        return redirect(url_for("dashboard"))

    @app.route("/api/attendance/today", endpoint="api_attendance_today")
    @login_required
    def api_attendance_today():
        """Polled by the dashboard page to refresh the today card."""
        try:
            record = container.attendance_service.today(current_user(), date.today())
        except DomainError as e:
            return jsonify({"success": False, "message": str(e)}), 502
        return jsonify({"success": True, **check_in_state(record)})
