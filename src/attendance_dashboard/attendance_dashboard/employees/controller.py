from __future__ import annotations

import logging
from datetime import date

from flask import Flask, flash, redirect, render_template, request, url_for

from ..container import Container
from ..core.constants import DEPARTMENTS
from ..core.enums import EmployeeStatus
from ..core.exceptions import DomainError, NotFoundError
from ..users.guards import admin_required, current_user

logger = logging.getLogger(__name__)

FORM_FIELDS = ("id", "name", "email", "department", "position", "status")


def register(app: Flask, container: Container) -> None:
    def _form() -> dict:
        return {f: request.form.get(f, "") for f in FORM_FIELDS}

    def _render_form(*, employee=None, form=None, editing=False):
        return render_template(
            "admin/employee_form.html",
            employee=employee,
            form=form or {},
            editing=editing,
            departments=DEPARTMENTS,
            statuses=[s.value for s in EmployeeStatus],
            active_page="admin_dashboard",
        )

    @app.route("/admin/employees/add", methods=["GET", "POST"], endpoint="add_employee")
    @admin_required
    def add_employee():
        form = _form() if request.method == "POST" else {}
        if request.method == "POST":
            try:
                known = container.employee_service.list_employees()
                container.employee_service.add_employee(current_role=current_user().role, form=form, known=known)
                flash("Employee added successfully!", "success")
                return redirect(url_for("admin_dashboard"))
            except DomainError as e:
                flash(str(e), "danger")
            except Exception:
                logger.exception("Adding employee failed")
                flash("Failed to add employee. Please try again.", "danger")

        return _render_form(form=form)

    @app.route("/admin/employees/<employee_id>", endpoint="employee_detail")
    @admin_required
    def employee_detail(employee_id: str):
        try:
            employee = container.employee_service.get(employee_id)
        except NotFoundError as e:
            flash(str(e), "warning")
            return redirect(url_for("admin_dashboard"))
        except DomainError as e:
            flash(str(e), "danger")
            return redirect(url_for("admin_dashboard"))

        data = container.dashboard_service.employee_detail(employee, date.today())
        return render_template("admin/employee_detail.html", data=data, active_page="admin_dashboard")

    @app.route("/admin/employees/<employee_id>/edit", methods=["GET", "POST"], endpoint="edit_employee")
    @admin_required
    def edit_employee(employee_id: str):
        try:
            employee = container.employee_service.get(employee_id)
        except DomainError as e:
            flash(str(e), "warning")
            return redirect(url_for("admin_dashboard"))

        if request.method == "POST":
            form = _form()
            try:
                container.employee_service.update_employee(
                    current_role=current_user().role, employee_id=employee_id, form=form
                )
                flash("Employee updated successfully!", "success")
                return redirect(url_for("admin_dashboard"))
            except DomainError as e:
                flash(str(e), "danger")
            except Exception:
                logger.exception("Updating employee %s failed", employee_id)
                flash("Failed to update employee. Please try again.", "danger")
            return _render_form(employee=employee, form=form, editing=True)

        return _render_form(employee=employee, form=employee.to_payload(), editing=True)

    @app.route("/admin/employees/<employee_id>/delete", methods=["POST"], endpoint="delete_employee")
    @admin_required
    def delete_employee(employee_id: str):
        try:
            container.employee_service.delete_employee(current_role=current_user().role, employee_id=employee_id)
            flash("Employee deleted successfully!", "success")
        except DomainError as e:
            flash(str(e), "danger")
        except Exception:
            logger.exception("Deleting employee %s failed", employee_id)
            flash("Failed to delete employee. Please try again.", "danger")
        return redirect(url_for("admin_dashboard"))
