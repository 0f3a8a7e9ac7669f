from __future__ import annotations

import logging

from ..api.client import SheetsApiClient
from ..api.result import FailureKind
from ..core.exceptions import NetworkError, NotFoundError, ServerRejectionError, ValidationError
from .model import SessionUser

logger = logging.getLogger(__name__)


class AuthService:
    """Use case: resolve a typed user id into a session identity (login)."""

    def __init__(self, api: SheetsApiClient):
        self._api = api

    def login(self, user_id: str) -> SessionUser:
        user_id = (user_id or "").strip().upper()
        if not user_id:
            raise ValidationError("Please enter your User ID")

        result = self._api.call("login", {"userId": user_id})
        if not result.ok:
            if result.failure.kind == FailureKind.NETWORK:
                raise NetworkError(result.message)
            if not result.failure.rejected:
                raise ServerRejectionError(result.message)
            raise NotFoundError(result.message or "Invalid User ID")

        raw = result.field("user")
        if not isinstance(raw, dict):
            raise NotFoundError("Invalid User ID")
        try:
            user = SessionUser.from_dict(raw)
        except ValueError:
            raise NotFoundError("Invalid User ID")

        logger.info("User %s logged in as %s", user.user_id, user.role.value)
        return user
