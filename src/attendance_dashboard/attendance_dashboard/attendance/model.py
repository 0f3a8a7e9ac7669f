from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..common.datetime_utils import hours_between


@dataclass(frozen=True)
class AttendanceRecord:
    """One work session of one employee on one date."""

    user_id: str
    work_date: date
    check_in: Optional[datetime]
    check_out: Optional[datetime]
    status: str = "Absent"
    name: Optional[str] = None

    @property
    def is_complete(self) -> bool:
        return self.check_in is not None and self.check_out is not None

    @property
    def worked_hours(self) -> Optional[float]:
        return hours_between(self.check_in, self.check_out)
