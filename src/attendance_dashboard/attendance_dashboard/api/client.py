from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Union

import requests

from ..core.constants import DEFAULT_HTTP_TIMEOUT
from ..core.enums import Sheet
from .result import ApiResult, FailureKind

logger = logging.getLogger(__name__)

NETWORK_MESSAGE = "Connection error. Please try again."


@dataclass(frozen=True)
class ApiConfig:
    url: str
    timeout: float = DEFAULT_HTTP_TIMEOUT


class SheetsApiClient:
    """HTTP glue for the spreadsheet-backed web endpoint.

    Every call is a single attempt. Failures never raise past the caller; they
    come back as a failed ``ApiResult`` so the action boundary decides how to
    surface them.
    """

    def __init__(self, config: ApiConfig, *, session: Optional[requests.Session] = None):
        self._config = config
        self._session = session or requests.Session()

    def call(self, action_or_sheet: Union[str, Sheet], params: Optional[Mapping[str, Any]] = None) -> ApiResult:
        if isinstance(action_or_sheet, Sheet):
            query: dict = {"sheet": action_or_sheet.value}
            label = f"sheet={action_or_sheet.value}"
        else:
            query = {"action": str(action_or_sheet)}
            label = f"action={action_or_sheet}"
        for key, value in (params or {}).items():
            if value is not None:
                query[key] = value

        try:
            resp = self._session.get(self._config.url, params=query, timeout=self._config.timeout)
        except requests.exceptions.RequestException as e:
            logger.warning("GET %s failed: %s", label, e)
            return ApiResult.failed(FailureKind.NETWORK, NETWORK_MESSAGE)
        return self._decode(resp, label)

    def post(self, action: str, data: Any = None, **extra: Any) -> ApiResult:
        payload: dict = {"action": action}
        if data is not None:
            payload["data"] = data
        payload.update(extra)

        try:
            resp = self._session.post(self._config.url, json=payload, timeout=self._config.timeout)
        except requests.exceptions.RequestException as e:
            logger.warning("POST action=%s failed: %s", action, e)
            return ApiResult.failed(FailureKind.NETWORK, NETWORK_MESSAGE)
        return self._decode(resp, f"action={action}")

    def _decode(self, resp: requests.Response, label: str) -> ApiResult:
        if not resp.ok:
            logger.warning("%s answered HTTP %s", label, resp.status_code)
            return ApiResult.failed(
                FailureKind.SERVER,
                f"Server error (HTTP {resp.status_code}). Please try again.",
                status_code=resp.status_code,
            )

        try:
            body = resp.json()
        except ValueError:
            logger.warning("%s returned a non-JSON body", label)
            return ApiResult.failed(FailureKind.SERVER, "Unexpected response from server", status_code=resp.status_code)

        if isinstance(body, dict) and "success" in body and not body.get("success"):
            message = body.get("message") or "Request was rejected"
            logger.warning("%s rejected: %s", label, message)
            return ApiResult.failed(FailureKind.SERVER, message, status_code=resp.status_code, rejected=True)

        return ApiResult.success(body)
