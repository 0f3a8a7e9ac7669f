from __future__ import annotations

from typing import Any, Sequence

from ..api.client import SheetsApiClient
from ..common.datetime_utils import parse_timestamp
from ..common.rows import cell, data_rows, text
from ..core.enums import TaskStatus
from .model import Task
from .repository import TaskRepository

_HEADER = ("taskid", "task id")


def task_from_row(row: Any) -> Task:
    return Task(
        task_id=text(row, 0, "taskId", "id"),
        user_id=text(row, 1, "userId"),
        title=text(row, 2, "taskTitle", "title"),
        status=text(row, 3, "status"),
        last_updated=parse_timestamp(cell(row, 4, "lastUpdated")),
    )


class SheetsTaskRepository(TaskRepository):
    def __init__(self, api: SheetsApiClient):
        self._api = api

    def list_for_user(self, user_id: str) -> Sequence[Task]:
        result = self._api.call("getTasks", {"userId": user_id}).unwrap()
        return self._map(result.rows())

    def list_all(self) -> Sequence[Task]:
        result = self._api.call("getAllTasks").unwrap()
        return self._map(result.rows())

    def add(self, *, task_id: str, user_id: str, name: str, title: str, status: TaskStatus) -> None:
        self._api.call(
            "addTask",
            {"taskId": task_id, "userId": user_id, "name": name, "taskTitle": title, "status": status.value},
        ).unwrap()

    def update_status(self, *, task_id: str, status: TaskStatus) -> None:
        self._api.call("updateTask", {"taskId": task_id, "status": status.value}).unwrap()

    @staticmethod
    def _map(rows) -> list[Task]:
        return [t for t in (task_from_row(r) for r in data_rows(rows, _HEADER)) if t.task_id]
