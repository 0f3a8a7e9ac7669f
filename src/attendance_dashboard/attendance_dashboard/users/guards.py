from __future__ import annotations

from functools import wraps
from typing import Optional

from flask import flash, g, jsonify, redirect, render_template, request, session, url_for

from .model import SessionUser
from .session_store import SessionStore


def session_store() -> SessionStore:
    return SessionStore(session)


def current_user() -> Optional[SessionUser]:
    """Session identity restored once per request."""
    if "current_user" not in g:
        g.current_user = session_store().restore()
    return g.current_user


def _wants_json() -> bool:
    return request.path.startswith("/api/")


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if current_user() is None:
            if _wants_json():
                return jsonify({"success": False, "message": "Please login first"}), 401
            flash("Please login first", "warning")
            return redirect(url_for("login"))
        return view(*args, **kwargs)

    return wrapper


def admin_required(view):
    """Role gate for admin pages. Navigation convenience only, not a security boundary."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        user = current_user()
        if user is None:
            if _wants_json():
                return jsonify({"success": False, "message": "Please login first"}), 401
            return redirect(url_for("login"))

        if not user.is_admin:
            if _wants_json():
                return jsonify({"success": False, "message": "Admin access required"}), 403
            return render_template("403.html", current_user=user), 403

        return view(*args, **kwargs)

    return wrapper
