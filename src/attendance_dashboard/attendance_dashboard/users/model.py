from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import Role


@dataclass(frozen=True)
class SessionUser:
    """The logged-in identity mirrored into the persisted session."""

    user_id: str
    name: str
    role: Role = Role.EMPLOYEE

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN

    def to_dict(self) -> dict:
        return {"userId": self.user_id, "name": self.name, "role": self.role.value}

    @classmethod
    def from_dict(cls, raw: dict) -> "SessionUser":
        user_id = str(raw.get("userId") or raw.get("id") or "").strip()
        if not user_id:
            raise ValueError("session user without userId")
        return cls(
            user_id=user_id,
            name=str(raw.get("name") or user_id),
            role=Role.parse(raw.get("role")),
        )
