from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class Task:
    """Task row. ``status`` keeps the raw sheet text; unknown values survive ingress."""

    task_id: str
    user_id: str
    title: str
    status: str
    last_updated: Optional[datetime] = None
