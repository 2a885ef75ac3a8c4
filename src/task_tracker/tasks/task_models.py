# src/task_tracker/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class TaskStatus(StrEnum):
    """
    Task lifecycle status.

    The values double as the literal status names written to the store file
    and accepted by `list <status>`.
    """

    TODO = "todo"
    IN_PROGRESS = "in-progress"
    DONE = "done"

    @classmethod
    def from_store(cls, raw: str | None) -> TaskStatus:
        """Lenient mapping for persisted text: anything unknown is TODO."""
        if not raw:
            return cls.TODO
        try:
            return cls(raw)
        except ValueError:
            return cls.TODO

    @classmethod
    def from_filter(cls, raw: str | None) -> TaskStatus | None:
        if not raw:
            return None
        try:
            return cls(raw)
        except ValueError:
            return None


@dataclass(slots=True)
class Task:
    id: int
    description: str
    status: TaskStatus
    created_at: float
    updated_at: float
