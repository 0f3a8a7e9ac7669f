from __future__ import annotations

import copy
import json
from datetime import datetime

import pytest

from src.attendance_dashboard.attendance_dashboard.container import build_container
from src.attendance_dashboard.attendance_dashboard.main import create_app

_NOT_JSON = object()


class FakeResponse:
    def __init__(self, body=None, status_code: int = 200):
        self._body = body
        self.status_code = status_code

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 400

    def json(self):
        if self._body is _NOT_JSON:
            raise ValueError("Expecting value: line 1 column 1")
        return copy.deepcopy(self._body)


class FakeHttpSession:
    """Stands in for ``requests.Session``; routes by sheet/action name and records every call."""

    NOT_JSON = _NOT_JSON

    def __init__(self):
        self.routes: dict[str, dict] = {}
        self.calls: list[tuple[str, dict]] = []

    def route(self, key: str, body=None, *, status_code: int = 200, exc: Exception | None = None):
        self.routes[key] = {"body": body, "status_code": status_code, "exc": exc}

    def get(self, url, params=None, timeout=None):
        params = dict(params or {})
        self.calls.append(("GET", params))
        key = f"sheet:{params['sheet']}" if "sheet" in params else f"action:{params.get('action')}"
        return self._respond(key)

    def post(self, url, json=None, timeout=None):
        self.calls.append(("POST", dict(json or {})))
        return self._respond(f"post:{(json or {}).get('action')}")

    def _respond(self, key: str):
        handler = self.routes.get(key)
        if handler is None:
            return FakeResponse({"success": False, "message": f"no route for {key}"})
        if handler["exc"] is not None:
            raise handler["exc"]
        return FakeResponse(handler["body"], handler["status_code"])

    def names(self) -> list[str]:
        out = []
        for method, params in self.calls:
            if "sheet" in params:
                out.append(f"sheet:{params['sheet']}")
            else:
                out.append(f"{'post' if method == 'POST' else 'action'}:{params.get('action')}")
        return out

    def posts(self) -> list[dict]:
        return [params for method, params in self.calls if method == "POST"]


@pytest.fixture
def fixed_now():
    return datetime(2024, 1, 3, 9, 0, 0)


@pytest.fixture
def fake_http():
    return FakeHttpSession()


@pytest.fixture
def container(fake_http):
    return build_container(api_config={"url": "http://sheets.test/exec", "timeout": 5}, http_session=fake_http)


@pytest.fixture
def app(container):
    app = create_app(container=container, settings_module="config.testing")
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def login_as(client):
    def _login(user_id: str = "EMP001", name: str = "John Doe", role: str = "employee"):
        with client.session_transaction() as sess:
            sess["currentUser"] = json.dumps({"userId": user_id, "name": name, "role": role})

    return _login
