# tests/conftest.py

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from task_tracker.config import Settings
from task_tracker.tasks.task_models import Task, TaskStatus
from task_tracker.tasks.task_store import TaskFileStore


@pytest.fixture(autouse=True)
def _no_logging_setup(monkeypatch: pytest.MonkeyPatch) -> None:
    """
    main() reconfigures the root logger, which would drop pytest's capture
    handlers. Tests rely on caplog instead.
    """
    monkeypatch.setattr("task_tracker.cli.main.setup_logging", lambda **_: None)


@pytest.fixture()
def store_path(tmp_path: Path) -> Path:
    return tmp_path / "tasks.json"


@pytest.fixture()
def store(store_path: Path) -> TaskFileStore:
    return TaskFileStore(store_path)


@pytest.fixture()
def settings(store_path: Path) -> Settings:
    """Explicit settings so tests never read the real environment or a .env file."""
    return Settings(store_path=store_path, log_level="WARNING", log_file=None)


@pytest.fixture()
def make_task() -> Callable[..., Task]:
    def _make(
        task_id: int,
        description: str = "task",
        status: TaskStatus = TaskStatus.TODO,
        created_at: float = 1_700_000_000,
        updated_at: float | None = None,
    ) -> Task:
        return Task(
            id=task_id,
            description=description,
            status=status,
            created_at=float(created_at),
            updated_at=float(created_at if updated_at is None else updated_at),
        )

    return _make
