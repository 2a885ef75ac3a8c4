# src/task_tracker/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass

from ..tasks.task_codec import MAX_TASK_ID, unsigned_in_range
from ..tasks.task_list import TaskList
from ..tasks.task_models import Task, TaskStatus

CommandHandler = Callable[[TaskList, list[str]], str]

logger = logging.getLogger(__name__)

NO_ARGS_MESSAGE = "Invalid amount of arguments, must provide one argument for action"
INVALID_INPUT_MESSAGE = "Invalid argument input"
INVALID_FILTER_MESSAGE = "Not a valid status for task"


class InvalidTaskIdError(ValueError):
    """A task id given on the command line is not an unsigned 32-bit number."""


@dataclass(frozen=True, slots=True)
class Command:
    name: str
    handler: CommandHandler
    arg_counts: frozenset[int]
    usage: str
    help_text: str


class CommandRegistry:
    """Routes `<command> [args...]` to a handler by name and argument count."""

    def __init__(self) -> None:
        self._commands: dict[str, Command] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        *,
        arg_counts: Iterable[int],
        usage: str,
        help_text: str,
    ) -> None:
        key = name.lower()
        self._commands[key] = Command(
            name=key,
            handler=handler,
            arg_counts=frozenset(arg_counts),
            usage=usage,
            help_text=help_text,
        )

    def handle(self, task_list: TaskList, argv: list[str]) -> str:
        """
        Run one command line (without the program name) against `task_list`.
        Returns the text to print. InvalidTaskIdError propagates.
        """
        if not argv:
            return NO_ARGS_MESSAGE

        name, args = argv[0], argv[1:]
        command = self._commands.get(name)
        if command is None or len(args) not in command.arg_counts:
            logger.debug("Rejected command %r with %d argument(s)", name, len(args))
            return INVALID_INPUT_MESSAGE

        return command.handler(task_list, args)

    def build_help(self) -> str:
        width = max((len(c.usage) for c in self._commands.values()), default=0)
        lines = ["Available commands:"]
        for command in self._commands.values():
            lines.append(f"  {command.usage:<{width}}  {command.help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def parse_task_id(raw: str) -> int:
    task_id = unsigned_in_range(raw, MAX_TASK_ID)
    if task_id is None:
        raise InvalidTaskIdError(f"id must be a number: {raw[:40]!r}")
    return task_id


def format_task_table(tasks: Iterable[Task]) -> str:
    lines = [f"{'id':<6}{'description':<30}{'status':<10}", "-" * 46]
    for task in tasks:
        lines.append(f"{task.id:<6}{task.description:<30}{task.status.value:<10}")
    return "\n".join(lines)


def _updated(task_id: int, task: Task | None) -> str:
    if task is None:
        return f"Task not available, please create new task with ID: {task_id}"
    return f"Task updated successfully (ID: {task_id})"


def cmd_add(task_list: TaskList, args: list[str]) -> str:
    task = task_list.add(args[0])
    return f"Task added successfully (ID: {task.id})"


def cmd_update(task_list: TaskList, args: list[str]) -> str:
    task_id = parse_task_id(args[0])
    return _updated(task_id, task_list.update(task_id, args[1]))


def cmd_delete(task_list: TaskList, args: list[str]) -> str:
    task_id = parse_task_id(args[0])
    if task_list.delete(task_id) is None:
        return f"Task failed to delete or does not exist (ID: {task_id})"
    return f"Task deleted successfully (ID: {task_id})"


def cmd_list(task_list: TaskList, args: list[str]) -> str:
    """
    list          -> every task
    list <status> -> only tasks with that status; unknown status lists everything
    """
    status: TaskStatus | None = None
    prefix = ""
    if args:
        status = TaskStatus.from_filter(args[0])
        if status is None:
            prefix = INVALID_FILTER_MESSAGE + "\n"
    return prefix + format_task_table(task_list.filter(status))


def cmd_mark_in_progress(task_list: TaskList, args: list[str]) -> str:
    task_id = parse_task_id(args[0])
    return _updated(task_id, task_list.set_status(task_id, TaskStatus.IN_PROGRESS))


def cmd_mark_done(task_list: TaskList, args: list[str]) -> str:
    task_id = parse_task_id(args[0])
    return _updated(task_id, task_list.set_status(task_id, TaskStatus.DONE))


def cmd_help(task_list: TaskList, args: list[str]) -> str:
    return registry.build_help()


registry.register(
    "add", cmd_add, arg_counts=[1], usage="add <description>", help_text="Create a new task."
)
registry.register(
    "update",
    cmd_update,
    arg_counts=[2],
    usage="update <id> <description>",
    help_text="Replace a task's description.",
)
registry.register(
    "delete", cmd_delete, arg_counts=[1], usage="delete <id>", help_text="Remove a task."
)
registry.register(
    "list",
    cmd_list,
    arg_counts=[0, 1],
    usage="list [todo|in-progress|done]",
    help_text="Show tasks, optionally filtered by status.",
)
registry.register(
    "mark-in-progress",
    cmd_mark_in_progress,
    arg_counts=[1],
    usage="mark-in-progress <id>",
    help_text="Set a task's status to in-progress.",
)
registry.register(
    "mark-done",
    cmd_mark_done,
    arg_counts=[1],
    usage="mark-done <id>",
    help_text="Set a task's status to done.",
)
registry.register("help", cmd_help, arg_counts=[0], usage="help", help_text="Show this help.")
