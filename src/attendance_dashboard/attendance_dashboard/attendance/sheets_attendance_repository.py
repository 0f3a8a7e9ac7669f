from __future__ import annotations

from typing import Any, Optional, Sequence

from ..api.client import SheetsApiClient
from ..common.datetime_utils import parse_date, parse_timestamp
from ..common.rows import cell, data_rows, text
from ..core.enums import Period
from .model import AttendanceRecord
from .repository import AttendanceRepository

_HEADER = ("userid", "user id", "employee id")


def attendance_from_row(row: Any) -> Optional[AttendanceRecord]:
    check_in_raw = cell(row, 2, "checkIn")
    check_out_raw = cell(row, 3, "checkOut")

    work_date = parse_date(cell(row, 1, "date"))
    if work_date is None:
        ts = parse_timestamp(check_in_raw)
        work_date = ts.date() if ts else None
    if work_date is None:
        return None

    user_id = text(row, 0, "userId", "id")
    if not user_id:
        return None

    return AttendanceRecord(
        user_id=user_id,
        work_date=work_date,
        check_in=parse_timestamp(check_in_raw, on=work_date),
        check_out=parse_timestamp(check_out_raw, on=work_date),
        status=text(row, 4, "status", default="Absent"),
        name=text(row, 5, "name") or None,
    )


class SheetsAttendanceRepository(AttendanceRepository):
    def __init__(self, api: SheetsApiClient):
        self._api = api

    def list_for_user(self, user_id: str, period: Period) -> Sequence[AttendanceRecord]:
        result = self._api.call("getAttendance", {"userId": user_id, "period": period.value}).unwrap()
        return self._map(result.rows())

    def list_all(self, period: Period) -> Sequence[AttendanceRecord]:
        result = self._api.call("getAllAttendance", {"period": period.value}).unwrap()
        return self._map(result.rows())

    def check_in(self, *, user_id: str, name: str):
        result = self._api.call("checkIn", {"userId": user_id, "name": name}).unwrap()
        return parse_timestamp(result.field("time"))

    def check_out(self, *, user_id: str):
        result = self._api.call("checkOut", {"userId": user_id}).unwrap()
        return parse_timestamp(result.field("time"))

    @staticmethod
    def _map(rows) -> list[AttendanceRecord]:
        out = []
        for r in data_rows(rows, _HEADER):
            rec = attendance_from_row(r)
            if rec is not None:
                out.append(rec)
        return out
