from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol, Sequence

from ..core.enums import Period
from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def list_for_user(self, user_id: str, period: Period) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def list_all(self, period: Period) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def check_in(self, *, user_id: str, name: str) -> Optional[datetime]:
        """Record a check-in; returns the server's timestamp when it sends one."""

        raise NotImplementedError

    def check_out(self, *, user_id: str) -> Optional[datetime]:
        raise NotImplementedError
