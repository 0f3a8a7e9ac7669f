from __future__ import annotations

import logging
from typing import Any, Sequence

from ..api.client import SheetsApiClient
from ..common.rows import data_rows, text
from ..core.enums import EmployeeStatus, Sheet
from .model import Employee
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)

_HEADER = ("id", "employee id", "employeeid")


def employee_from_row(row: Any) -> Employee:
    status_s = text(row, 5, "status", default=EmployeeStatus.ACTIVE.value)
    try:
        status = EmployeeStatus(status_s)
    except ValueError:
        status = EmployeeStatus.ACTIVE
    return Employee(
        employee_id=text(row, 0, "id", "employeeId", "userId"),
        name=text(row, 1, "name"),
        email=text(row, 2, "email"),
        department=text(row, 3, "department"),
        position=text(row, 4, "position"),
        status=status,
    )


class SheetsEmployeeRepository(EmployeeRepository):
    def __init__(self, api: SheetsApiClient):
        self._api = api

    def list_all(self) -> Sequence[Employee]:
        result = self._api.call(Sheet.EMPLOYEES).unwrap()
        employees = [employee_from_row(r) for r in data_rows(result.rows(), _HEADER)]
        return [e for e in employees if e.employee_id]

    def create(self, employee: Employee) -> None:
        self._api.post("addEmployee", employee.to_payload()).unwrap()
        logger.info("Employee %s added", employee.employee_id)

    def update(self, employee: Employee) -> None:
        self._api.post("updateEmployee", employee.to_payload()).unwrap()
        logger.info("Employee %s updated", employee.employee_id)

    def delete(self, employee_id: str) -> None:
        self._api.post("deleteEmployee", employeeId=employee_id).unwrap()
        logger.info("Employee %s deleted", employee_id)
