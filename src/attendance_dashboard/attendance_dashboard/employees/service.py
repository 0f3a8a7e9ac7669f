from __future__ import annotations

from typing import Mapping, Optional, Sequence

from ..common.validators import require_all, require_one_of
from ..core.enums import EmployeeStatus, Role
from ..core.exceptions import AuthorizationError, NotFoundError, ValidationError
from .model import Employee
from .repository import EmployeeRepository

REQUIRED_FIELDS = ("id", "name", "email", "department", "position")


class EmployeeService:
    """Use case: manage employee records (admin)."""

    def __init__(self, employees: EmployeeRepository):
        self._employees = employees

    def list_employees(self) -> Sequence[Employee]:
        return self._employees.list_all()

    def get(self, employee_id: str, *, known: Optional[Sequence[Employee]] = None) -> Employee:
        employees = known if known is not None else self._employees.list_all()
        for e in employees:
            if e.employee_id == employee_id:
                return e
        raise NotFoundError("Employee not found")

    def add_employee(
        self,
        *,
        current_role: Role,
        form: Mapping[str, str],
        known: Sequence[Employee],
    ) -> Employee:
        """Validate and submit a new employee.

        ``known`` is the employee list the admin is looking at; the id must not
        already be in it. Every rejection happens before any request is sent.
        """
        self._require_admin(current_role)
        employee = self._build(form)

        if any(e.employee_id == employee.employee_id for e in known):
            raise ValidationError("Employee ID already exists. Please use a different ID.")

        self._employees.create(employee)
        return employee

    def update_employee(self, *, current_role: Role, employee_id: str, form: Mapping[str, str]) -> Employee:
        self._require_admin(current_role)
        # The id is read-only on the edit form.
        employee = self._build({**form, "id": employee_id})
        self._employees.update(employee)
        return employee

    def delete_employee(self, *, current_role: Role, employee_id: str) -> None:
        self._require_admin(current_role)
        if not employee_id:
            raise ValidationError("Employee ID is required")
        self._employees.delete(employee_id)

    @staticmethod
    def _require_admin(current_role: Role) -> None:
        if current_role != Role.ADMIN:
            raise AuthorizationError("Admin access required")

    @staticmethod
    def _build(form: Mapping[str, str]) -> Employee:
        values = require_all(dict(form), REQUIRED_FIELDS)
        if "@" not in values["email"]:
            raise ValidationError("Please enter a valid email")

        status_s = values.get("status") or EmployeeStatus.ACTIVE.value
        require_one_of(status_s, [s.value for s in EmployeeStatus], "Status")

        return Employee(
            employee_id=values["id"],
            name=values["name"],
            email=values["email"],
            department=values["department"],
            position=values["position"],
            status=EmployeeStatus(status_s),
        )
