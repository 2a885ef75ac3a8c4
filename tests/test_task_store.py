# tests/test_task_store.py

from __future__ import annotations

from pathlib import Path

import pytest

from task_tracker.tasks.task_codec import StoreFormatError, encode_store
from task_tracker.tasks.task_list import TaskList
from task_tracker.tasks.task_models import TaskStatus
from task_tracker.tasks.task_store import TaskFileStore


def test_missing_file_loads_empty_and_clean(store: TaskFileStore, store_path: Path) -> None:
    tl = store.load()

    assert len(tl) == 0
    assert not tl.dirty
    assert store.save_if_dirty(tl) is False
    assert not store_path.exists()


def test_unreadable_file_loads_empty(tmp_path: Path) -> None:
    # A directory cannot be opened as a text file.
    tl = TaskFileStore(tmp_path).load()
    assert len(tl) == 0
    assert not tl.dirty


def test_save_then_load(store: TaskFileStore, make_task) -> None:
    tl = TaskList({0: make_task(0, "a"), 3: make_task(3, "b", TaskStatus.DONE)})
    store.save(tl)

    loaded = store.load()

    assert loaded.tasks == tl.tasks
    assert not loaded.dirty


def test_save_overwrites_whole_file(store: TaskFileStore, store_path: Path) -> None:
    store_path.write_text("x" * 10_000, encoding="utf-8")
    tl = TaskList()
    tl.add("only one", now=1.0)

    assert store.save_if_dirty(tl) is True
    assert store_path.read_text(encoding="utf-8") == encode_store(tl)
    assert list(store.load().tasks) == [0]


def test_corrupt_file_is_fatal(store: TaskFileStore, store_path: Path) -> None:
    store_path.write_text(
        '{ "tasks": { "0": { "id": 0, "description": "a", "status": "todo",'
        ' "created_at": yesterday, "updated_at": 1 } } }',
        encoding="utf-8",
    )
    with pytest.raises(StoreFormatError):
        store.load()
