from __future__ import annotations

from typing import Protocol, Sequence

from ..core.enums import TaskStatus
from .model import Task


class TaskRepository(Protocol):
    def list_for_user(self, user_id: str) -> Sequence[Task]:
        raise NotImplementedError

    def list_all(self) -> Sequence[Task]:
        raise NotImplementedError

    def add(self, *, task_id: str, user_id: str, name: str, title: str, status: TaskStatus) -> None:
        raise NotImplementedError

    def update_status(self, *, task_id: str, status: TaskStatus) -> None:
        raise NotImplementedError
