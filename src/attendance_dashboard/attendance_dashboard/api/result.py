from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from ..core.exceptions import NetworkError, ServerRejectionError


class FailureKind(str, Enum):
    NETWORK = "network"
    SERVER = "server"


@dataclass(frozen=True)
class ApiFailure:
    kind: FailureKind
    message: str
    status_code: Optional[int] = None
    # True when the endpoint answered with a well-formed ``success: false`` envelope.
    rejected: bool = False


@dataclass(frozen=True)
class ApiResult:
    """Uniform outcome of one endpoint call.

    ``body`` is the decoded JSON (a list for sheet reads, a dict for actions).
    Exactly one of ``body``/``failure`` is meaningful, selected by ``ok``.
    """

    ok: bool
    body: Any = None
    failure: Optional[ApiFailure] = None

    @classmethod
    def success(cls, body: Any) -> "ApiResult":
        return cls(ok=True, body=body)

    @classmethod
    def failed(
        cls,
        kind: FailureKind,
        message: str,
        *,
        status_code: Optional[int] = None,
        rejected: bool = False,
    ) -> "ApiResult":
        failure = ApiFailure(kind=kind, message=message, status_code=status_code, rejected=rejected)
        return cls(ok=False, failure=failure)

    @property
    def message(self) -> Optional[str]:
        if self.failure:
            return self.failure.message
        if isinstance(self.body, dict):
            return self.body.get("message")
        return None

    def field(self, name: str, default: Any = None) -> Any:
        if isinstance(self.body, dict):
            value = self.body.get(name)
            return default if value is None else value
        return default

    def rows(self) -> list:
        """Row list of a sheet read (bare array) or an action's ``data`` field."""
        if isinstance(self.body, list):
            return list(self.body)
        data = self.field("data", [])
        return list(data) if isinstance(data, list) else []

    def unwrap(self) -> "ApiResult":
        """Raise the matching domain error for a failed result, else return self."""
        if self.ok or self.failure is None:
            return self
        if self.failure.kind == FailureKind.NETWORK:
            raise NetworkError(self.failure.message)
        raise ServerRejectionError(self.failure.message)
