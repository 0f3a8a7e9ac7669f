from __future__ import annotations

import logging

from flask import Flask, flash, g, redirect, render_template, request, url_for

from ..container import Container
from ..core.exceptions import DomainError
from .guards import current_user, session_store

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/", methods=["GET", "POST"], endpoint="login")
    def login():
        if current_user() is not None:
            return redirect(url_for("dashboard"))

        if request.method == "POST":
            try:
                user = container.auth_service.login(request.form.get("user_id", ""))
                session_store().save(user)
                g.current_user = user
                flash(f"Welcome {user.name}!", "success")
                return redirect(url_for("dashboard"))
            except DomainError as e:
                flash(str(e), "danger")
            except Exception:
                logger.exception("Login failed")
                flash("Server error, please try again.", "danger")

        return render_template("login.html")

    @app.route("/logout", endpoint="logout")
    def logout():
        session_store().clear()
        g.pop("current_user", None)
        flash("You have been logged out.", "info")
        return redirect(url_for("login"))
