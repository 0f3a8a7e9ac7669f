from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional

from ..common.validators import require_non_empty
from ..core.constants import TASK_ID_PREFIX
from ..core.enums import TaskStatus
from ..core.exceptions import ValidationError
from ..users.model import SessionUser
from .repository import TaskRepository

logger = logging.getLogger(__name__)


def new_task_id(now: datetime) -> str:
    return f"{TASK_ID_PREFIX}{int(now.timestamp() * 1000)}"


class TaskService:
    def __init__(self, tasks: TaskRepository):
        self._tasks = tasks

    def add_task(self, user: SessionUser, title: str, *, now: Optional[datetime] = None) -> str:
        title = require_non_empty(title, "a task title")
        task_id = new_task_id(now or datetime.now())
        self._tasks.add(
            task_id=task_id,
            user_id=user.user_id,
            name=user.name,
            title=title,
            status=TaskStatus.NOT_STARTED,
        )
        logger.info("Task %s added for %s", task_id, user.user_id)
        return task_id

    def update_status(self, task_id: str, status: str) -> TaskStatus:
        if not task_id:
            raise ValidationError("Task ID is required")
        try:
            new_status = TaskStatus(status)
        except ValueError:
            raise ValidationError(f"Unknown task status: {status}")
        self._tasks.update_status(task_id=task_id, status=new_status)
        return new_status
