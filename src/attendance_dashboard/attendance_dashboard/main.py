from __future__ import annotations

import importlib
import logging
from datetime import date
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .common.datetime_utils import format_long_date, parse_time
from .container import Container, build_container
from .core.constants import (
    DEFAULT_ADMIN_REFRESH_SECONDS,
    DEFAULT_ATTENDANCE_REFRESH_SECONDS,
    DEFAULT_LATE_CUTOFF,
)
from .attendance.controller import register as register_attendance
from .employees.controller import register as register_employees
from .reports.controller import register as register_reports
from .tasks.controller import register as register_tasks
from .users.controller import register as register_users
from .users.guards import current_user

logger = logging.getLogger(__name__)


def create_app(*, container: Optional[Container] = None, settings_module: Optional[str] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__, template_folder="../../../templates", static_folder="../../../static")

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    api_config = getattr(settings, "API_CONFIG")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["ATTENDANCE_REFRESH_SECONDS"] = int(
        getattr(settings, "ATTENDANCE_REFRESH_SECONDS", DEFAULT_ATTENDANCE_REFRESH_SECONDS)
    )
    app.config["ADMIN_REFRESH_SECONDS"] = int(getattr(settings, "ADMIN_REFRESH_SECONDS", DEFAULT_ADMIN_REFRESH_SECONDS))

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    logger.info("settings=%s endpoint=%s", settings_module, api_config.get("url"))

    late_cutoff = parse_time(getattr(settings, "LATE_CUTOFF", None)) or DEFAULT_LATE_CUTOFF
    if container is None:
        container = build_container(api_config=api_config, late_cutoff=late_cutoff)

    @app.context_processor
    def inject_session_user():
        return {
            "current_user": current_user(),
            "today_label": format_long_date(date.today()),
        }

    register_users(app, container)
    register_attendance(app, container)
    register_tasks(app, container)
    register_reports(app, container)
    register_employees(app, container)

    return app
