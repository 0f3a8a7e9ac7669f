from __future__ import annotations

import logging

from flask import Flask, flash, redirect, request, url_for

from ..container import Container
from ..core.exceptions import DomainError
from ..users.guards import current_user, login_required

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/tasks", methods=["POST"], endpoint="add_task")
    @login_required
    def add_task():
        title = request.form.get("task_title", "")
        try:
            container.task_service.add_task(current_user(), title)
            flash(f'Task added: "{title.strip()}"', "success")
        except DomainError as e:
            flash(str(e) or "Error adding task", "danger")
        except Exception:
            logger.exception("Adding task failed")
            flash("Error adding task", "danger")
        return redirect(url_for("dashboard"))

    @app.route("/tasks/<task_id>/status", methods=["POST"], endpoint="update_task_status")
    @login_required
    def update_task_status(task_id: str):
        try:
            status = container.task_service.update_status(task_id, request.form.get("status", ""))
            flash(f"Task status updated to {status.value}", "success")
        except DomainError as e:
            flash(str(e) or "Error updating task", "danger")
        except Exception:
            logger.exception("Updating task %s failed", task_id)
            flash("Error updating task", "danger")
        return redirect(url_for("dashboard"))
