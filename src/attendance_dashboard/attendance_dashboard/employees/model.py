from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import EmployeeStatus


@dataclass(frozen=True)
class Employee:
    """Employee row of the Employees sheet; ``employee_id`` is the unique key."""

    employee_id: str
    name: str
    email: str
    department: str
    position: str
    status: EmployeeStatus = EmployeeStatus.ACTIVE

    @property
    def is_active(self) -> bool:
        return self.status == EmployeeStatus.ACTIVE

    def to_payload(self) -> dict:
        return {
            "id": self.employee_id,
            "name": self.name,
            "email": self.email,
            "department": self.department,
            "position": self.position,
            "status": self.status.value,
        }
