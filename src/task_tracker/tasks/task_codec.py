# src/task_tracker/tasks/task_codec.py

"""
Text codec for the task store file.

The store looks like JSON but is not parsed as JSON. Reading works in two
stages:

1. tokenize: drop every double quote, split on `{` / `}`, trim, drop empties.
   The result alternates key segments (task id) and body segments (fields).
2. parse records: each body is split on `,` and read positionally as
   id, description, status, created_at, updated_at.

Nothing is escaped on write. A description containing `,` `:` `{` or `}`
corrupts the record on the next read, and double quotes in a description
are lost on read.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Iterator
from typing import Final

from .task_models import Task, TaskStatus

logger = logging.getLogger(__name__)

FIELD_ORDER: Final = ("id", "description", "status", "created_at", "updated_at")

MAX_TASK_ID: Final = 2**32 - 1
MAX_TIMESTAMP: Final = 2**64 - 1

_DIGITS_RE = re.compile(r"[0-9]+")


class StoreFormatError(ValueError):
    """The store file cannot be decoded. Loading is aborted as a whole."""


# ---- encoding ----


def _epoch_seconds(ts: float) -> int:
    """Whole seconds since the epoch; 0 for anything before it."""
    if ts < 0:
        return 0
    return min(int(ts), MAX_TIMESTAMP)


def encode_task(task: Task) -> str:
    return (
        f'\n"id":{task.id},'
        f'\n"description": "{task.description}",'
        f'\n"status": "{task.status.value}",'
        f'\n"created_at": {_epoch_seconds(task.created_at)},'
        f'\n"updated_at": {_epoch_seconds(task.updated_at)}\n'
    )


def encode_records(tasks: Iterable[Task]) -> str:
    """Render the records in iteration order; the last one has no trailing comma."""
    items = list(tasks)
    out: list[str] = []
    for i, task in enumerate(items):
        out.append(f'\n"{task.id}" : {{ {encode_task(task)} }}')
        out.append(",\n" if i < len(items) - 1 else "\n")
    return "".join(out)


def encode_store(tasks: Iterable[Task]) -> str:
    return f'{{\n "tasks": {{ {encode_records(tasks)} }} \n }}\n'


# ---- decoding: stage 1 ----


def tokenize(text: str) -> list[str]:
    segments: list[str] = []
    for raw in re.split(r"[{}]", text.replace('"', "")):
        seg = raw.strip().removesuffix(":").strip()
        if seg:
            segments.append(seg)
    return segments


def iter_record_segments(segments: list[str]) -> Iterator[tuple[str, str]]:
    """
    Yield (key, body) pairs, skipping the leading wrapper segment ("tasks").
    A trailing key without a body is ignored.
    """
    walk = segments[1:]
    for i in range(0, len(walk) - 1, 2):
        yield walk[i], walk[i + 1]


# ---- decoding: stage 2 ----


def unsigned_in_range(text: str, limit: int) -> int | None:
    """
    Parse ASCII digits as an unsigned integer no greater than `limit`.
    Returns None for anything else, including digit strings too long to convert.
    """
    if not _DIGITS_RE.fullmatch(text):
        return None
    if len(text.lstrip("0")) > len(str(limit)):
        return None
    value = int(text)
    return value if value <= limit else None


def _parse_unsigned(text: str, *, limit: int, what: str) -> int:
    value = unsigned_in_range(text.strip(), limit)
    if value is None:
        raise StoreFormatError(f"failed to convert {what}: {text.strip()[:40]!r}")
    return value


def parse_key(segment: str) -> int:
    return _parse_unsigned(segment.strip(",").strip(), limit=MAX_TASK_ID, what="id from key")


def split_fields(body: str) -> list[str]:
    """Return the positional field values of a record body."""
    parts = body.split(",")
    if len(parts) < len(FIELD_ORDER):
        raise StoreFormatError(
            f"record has {len(parts)} fields, expected {len(FIELD_ORDER)}: {body!r}"
        )
    values: list[str] = []
    for part in parts[: len(FIELD_ORDER)]:
        _, sep, rest = part.strip().partition(":")
        if not sep:
            raise StoreFormatError(f"field without ':' separator: {part.strip()!r}")
        # a value ends at the next colon; anything after it is dropped
        values.append(rest.partition(":")[0].strip())
    return values


def parse_record(key_id: int, body: str) -> Task:
    id_raw, description, status_raw, created_raw, updated_raw = split_fields(body)

    inner_id = _parse_unsigned(id_raw, limit=MAX_TASK_ID, what="id from record")
    if inner_id != key_id:
        logger.warning("id and inner id don't match (key=%s, record=%s)", key_id, inner_id)

    return Task(
        id=inner_id,
        description=description,
        status=TaskStatus.from_store(status_raw),
        created_at=float(_parse_unsigned(created_raw, limit=MAX_TIMESTAMP, what="created_at")),
        updated_at=float(_parse_unsigned(updated_raw, limit=MAX_TIMESTAMP, what="updated_at")),
    )


def decode_store(text: str) -> dict[int, Task]:
    tasks: dict[int, Task] = {}
    for key, body in iter_record_segments(tokenize(text)):
        task = parse_record(parse_key(key), body)
        tasks[task.id] = task
    logger.debug("Decoded %d task(s) from store text", len(tasks))
    return tasks
