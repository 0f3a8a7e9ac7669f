from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Optional, Sequence

from ..core.enums import Period
from ..users.model import SessionUser
from .model import AttendanceRecord
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


def pick_today(records: Sequence[AttendanceRecord], today: date) -> Optional[AttendanceRecord]:
    """The record dated ``today``, else the first one the endpoint returned."""
    for r in records:
        if r.work_date == today:
            return r
    return records[0] if records else None


class AttendanceService:
    """Use case: check-in/check-out commands and the employee's own records.

    Commands are sent once per user action. Ordering (no checkout before a
    check-in) and at-most-once are left to the endpoint.
    """

    def __init__(self, attendance: AttendanceRepository):
        self._attendance = attendance

    def check_in(self, user: SessionUser, *, now: Optional[datetime] = None) -> datetime:
        server_time = self._attendance.check_in(user_id=user.user_id, name=user.name)
        logger.info("Check-in sent for %s", user.user_id)
        return server_time or now or datetime.now()

    def check_out(self, user: SessionUser, *, now: Optional[datetime] = None) -> datetime:
        server_time = self._attendance.check_out(user_id=user.user_id)
        logger.info("Check-out sent for %s", user.user_id)
        return server_time or now or datetime.now()

    def today(self, user: SessionUser, today: date) -> Optional[AttendanceRecord]:
        """Today's record, if the endpoint reports one for ``today``."""
        return pick_today(self._attendance.list_for_user(user.user_id, Period.DAILY), today)
