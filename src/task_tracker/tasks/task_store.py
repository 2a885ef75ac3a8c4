# src/task_tracker/tasks/task_store.py

from __future__ import annotations

import logging
from pathlib import Path

from .task_codec import decode_store, encode_store
from .task_list import TaskList

logger = logging.getLogger(__name__)


class TaskFileStore:
    """
    Single-file task store.

    Every load reads the whole file, every save rewrites it from scratch.
    There is no locking and no temp-file rename: concurrent runs race and
    the last writer wins.
    """

    def __init__(self, path: str | Path = "tasks.json") -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> TaskList:
        """
        Read and decode the store.

        A missing or unreadable file is an empty collection. Malformed
        content raises StoreFormatError.
        """
        try:
            with open(self._path, encoding="utf-8") as f:
                text = f.read()
        except FileNotFoundError:
            logger.debug("Store %s not found, starting empty", self._path)
            return TaskList()
        except (OSError, UnicodeDecodeError):
            logger.warning("Store %s is unreadable, starting empty", self._path, exc_info=True)
            return TaskList()

        task_list = TaskList(decode_store(text))
        logger.debug("Loaded %d task(s) from %s", len(task_list), self._path)
        return task_list

    def save(self, task_list: TaskList) -> None:
        with open(self._path, "w", encoding="utf-8") as f:
            f.write(encode_store(task_list))
        logger.debug("Saved %d task(s) to %s", len(task_list), self._path)

    def save_if_dirty(self, task_list: TaskList) -> bool:
        if not task_list.dirty:
            return False
        self.save(task_list)
        return True
