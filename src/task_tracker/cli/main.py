# src/task_tracker/cli/main.py

"""
CLI entrypoint.

One invocation: load the store, run exactly one command, rewrite the store
only if the command changed something.
"""

from __future__ import annotations

import logging
import sys

from ..config import Settings, get_settings
from ..logging_setup import setup_logging
from ..tasks.task_codec import StoreFormatError
from ..tasks.task_store import TaskFileStore
from .commands import InvalidTaskIdError, registry

logger = logging.getLogger(__name__)


def run(argv: list[str], store: TaskFileStore) -> int:
    try:
        task_list = store.load()
    except StoreFormatError:
        logger.error("Failed to load tasks from %s", store.path, exc_info=True)
        return 1

    try:
        output = registry.handle(task_list, argv)
    except InvalidTaskIdError as exc:
        logger.error("%s", exc)
        return 1

    print(output)

    if store.save_if_dirty(task_list):
        logger.info("Store rewritten: %s (%d task(s))", store.path, len(task_list))
    return 0


def main(argv: list[str] | None = None, *, settings: Settings | None = None) -> int:
    if settings is None:
        settings = get_settings()
    if argv is None:
        argv = sys.argv[1:]

    console_level = getattr(logging, settings.log_level, logging.WARNING)
    setup_logging(console_level=console_level, log_file=settings.log_file)

    return run(argv, TaskFileStore(settings.store_path))


def console_entry() -> None:
    sys.exit(main())


if __name__ == "__main__":
    console_entry()
