from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Session role used for navigation gating."""

    ADMIN = "admin"
    EMPLOYEE = "employee"

    @classmethod
    def parse(cls, value) -> "Role":
        try:
            return cls(str(value or "").strip().lower())
        except ValueError:
            return cls.EMPLOYEE


class EmployeeStatus(str, Enum):
    ACTIVE = "Active"
    INACTIVE = "Inactive"
    ON_LEAVE = "On Leave"


class TaskStatus(str, Enum):
    """Fixed task vocabulary; order is the display/histogram order."""

    NOT_STARTED = "Not Started"
    IN_PROGRESS = "In Progress"
    COMPLETED = "Completed"


class Sheet(str, Enum):
    """Named tables in the remote spreadsheet."""

    EMPLOYEES = "Employees"
    ATTENDANCE = "Attendance"
    TASKS = "Tasks"
    USERS = "Users"


class Period(str, Enum):
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
