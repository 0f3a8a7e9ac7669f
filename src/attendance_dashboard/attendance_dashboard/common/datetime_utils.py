from __future__ import annotations

from datetime import date, datetime, time
from typing import Optional, Union

from ..core.constants import EMPTY_HOURS, EMPTY_TIME, EMPTY_TIMESTAMP

Timestamp = Union[datetime, str, None]

_DATETIME_FORMATS = (
    "%Y-%m-%d %H:%M:%S",
    "%Y-%m-%d %H:%M",
    "%m/%d/%Y, %I:%M:%S %p",
    "%m/%d/%Y %I:%M:%S %p",
    "%m/%d/%Y, %H:%M:%S",
    "%m/%d/%Y %H:%M:%S",
)

_TIME_FORMATS = ("%H:%M:%S", "%H:%M", "%I:%M:%S %p", "%I:%M %p")


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def parse_date(value) -> Optional[date]:
    """Sheet dates arrive as ``YYYY-MM-DD`` or as a full timestamp.

    A full timestamp is read on the local calendar, the same way check-in and
    check-out values are, so a UTC ``...T17:00:00Z`` can land on the next day.
    """
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return _to_naive(value).date()
    if isinstance(value, date):
        return value
    text = str(value).strip()
    if len(text) == 10:
        try:
            return parse_iso_date(text)
        except ValueError:
            pass
    parsed = parse_timestamp(text)
    return parsed.date() if parsed else None


def parse_time(value) -> Optional[time]:
    if value is None or value == "":
        return None
    if isinstance(value, time):
        return value
    text = str(value).strip()
    for fmt in _TIME_FORMATS:
        try:
            return datetime.strptime(text, fmt).time()
        except ValueError:
            continue
    return None


def parse_timestamp(value: Timestamp, *, on: Optional[date] = None) -> Optional[datetime]:
    """Parse a sheet timestamp into a naive local datetime.

    Accepts ISO 8601 (with or without offset), a few locale formats the
    spreadsheet produces, and time-only values when ``on`` supplies the date.
    Returns None for empty or unparseable input.
    """
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return _to_naive(value)

    text = str(value).strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        return _to_naive(datetime.fromisoformat(text))
    except ValueError:
        pass

    for fmt in _DATETIME_FORMATS:
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue

    if on is not None:
        t = parse_time(text)
        if t is not None:
            return datetime.combine(on, t)
    return None


def _to_naive(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value
    return value.astimezone().replace(tzinfo=None)


def hours_between(start: Optional[datetime], end: Optional[datetime]) -> Optional[float]:
    if start is None or end is None:
        return None
    return (end - start).total_seconds() / 3600


def calculate_hours(check_in: Timestamp, check_out: Timestamp) -> str:
    """Worked time as ``"8.00h"``; ``"N/A"`` unless both ends are present."""
    hours = hours_between(parse_timestamp(check_in), parse_timestamp(check_out))
    if hours is None:
        return EMPTY_HOURS
    return f"{hours:.2f}h"


def format_time_only(value: Timestamp) -> str:
    parsed = parse_timestamp(value)
    if parsed is None:
        return EMPTY_TIME
    return parsed.strftime("%H:%M")


def format_timestamp(value: Timestamp) -> str:
    parsed = parse_timestamp(value)
    if parsed is None:
        return EMPTY_TIMESTAMP
    return parsed.strftime("%m/%d/%Y %H:%M:%S")


def format_day_label(day: date) -> str:
    """Short chart/table label, e.g. ``Mon, Jan 1``."""
    return f"{day.strftime('%a, %b')} {day.day}"


def format_long_date(day: date) -> str:
    return f"{day.strftime('%A, %B')} {day.day}, {day.year}"
