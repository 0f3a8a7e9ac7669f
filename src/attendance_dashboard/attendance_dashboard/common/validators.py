from __future__ import annotations

from typing import Iterable

from ..core.exceptions import ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not str(value).strip():
        raise ValidationError(f"Please enter {field_name}")
    return str(value).strip()


def require_all(values: dict, fields: Iterable[str], message: str = "Please fill all required fields") -> dict:
    """Strip every required field; raise one message if any is blank."""
    cleaned = {k: (str(v).strip() if v is not None else "") for k, v in values.items()}
    if any(not cleaned.get(f) for f in fields):
        raise ValidationError(message)
    return cleaned


def require_one_of(value: str, allowed: Iterable[str], field_name: str) -> str:
    allowed = list(allowed)
    if value not in allowed:
        raise ValidationError(f"{field_name} must be one of: {', '.join(allowed)}")
    return value
