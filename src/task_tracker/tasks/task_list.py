# src/task_tracker/tasks/task_list.py

from __future__ import annotations

import logging
import time
from collections.abc import Iterable
from dataclasses import replace

from .task_models import Task, TaskStatus

logger = logging.getLogger(__name__)


def next_free_id(ids: Iterable[int]) -> int:
    """Smallest non-negative integer not present in `ids`."""
    taken = set(ids)
    candidate = 0
    while candidate in taken:
        candidate += 1
    return candidate


class TaskList:
    """
    In-memory task collection for one invocation.

    `dirty` is set by every successful mutation and gates whether the store
    file gets rewritten at exit. Lookups and filtering never touch it.
    """

    def __init__(self, tasks: dict[int, Task] | None = None) -> None:
        self.tasks: dict[int, Task] = dict(tasks or {})
        self.dirty = False

    def __len__(self) -> int:
        return len(self.tasks)

    def __iter__(self):
        return iter(self.tasks.values())

    def get(self, task_id: int) -> Task | None:
        return self.tasks.get(task_id)

    def add(self, description: str, *, now: float | None = None) -> Task:
        if now is None:
            now = time.time()
        task = Task(
            id=next_free_id(self.tasks),
            description=description,
            status=TaskStatus.TODO,
            created_at=now,
            updated_at=now,
        )
        self.tasks[task.id] = task
        self.dirty = True
        logger.debug("Task added id=%s", task.id)
        return task

    def _replace(self, task_id: int, now: float | None, **changes) -> Task | None:
        task = self.tasks.get(task_id)
        if task is None:
            logger.debug("Task id=%s not found, nothing changed", task_id)
            return None
        updated = replace(task, updated_at=time.time() if now is None else now, **changes)
        self.tasks[task_id] = updated
        self.dirty = True
        return updated

    def update(self, task_id: int, description: str, *, now: float | None = None) -> Task | None:
        return self._replace(task_id, now, description=description)

    def set_status(
        self, task_id: int, status: TaskStatus, *, now: float | None = None
    ) -> Task | None:
        return self._replace(task_id, now, status=status)

    def delete(self, task_id: int) -> Task | None:
        task = self.tasks.pop(task_id, None)
        if task is not None:
            self.dirty = True
            logger.debug("Task deleted id=%s", task_id)
        return task

    def filter(self, status: TaskStatus | None = None) -> list[Task]:
        if status is None:
            return list(self.tasks.values())
        return [t for t in self.tasks.values() if t.status == status]
