# src/task_manager/tasks/task_codec.py

"""
Line-oriented text codec for the task file.

Format (no header, no versioning), one newline-terminated task per line:

    <id>|<description>|<true or false>

Descriptions are written raw. TaskStore refuses descriptions containing the
delimiter, so anything written by this program reloads cleanly.
"""

from __future__ import annotations

import contextlib
import logging
import os
from collections.abc import Iterable
from pathlib import Path

from .task_models import Task
from .task_store import TaskStore

logger = logging.getLogger(__name__)

FIELD_SEP = "|"
FIELD_COUNT = 3


def format_task(task: Task) -> str:
    completed = "true" if task.completed else "false"
    return FIELD_SEP.join((str(task.id), task.description, completed))


def dumps(tasks: Iterable[Task]) -> str:
    return "".join(format_task(t) + "\n" for t in tasks)


def parse_line(line: str) -> Task | None:
    """Parse one record. Returns None for records that must be skipped."""
    parts = line.split(FIELD_SEP)
    if len(parts) != FIELD_COUNT:
        return None

    raw_id, description, raw_completed = parts
    # Plain unsigned decimal only: no sign, padding or digit separators.
    if not (raw_id.isascii() and raw_id.isdigit()):
        return None
    task_id = int(raw_id)

    return Task(id=task_id, description=description, completed=raw_completed == "true")


def loads(text: str) -> TaskStore:
    store = TaskStore()
    dropped = 0

    # Records end at "\n" only; other Unicode line boundaries belong to the description.
    for lineno, line in enumerate(text.split("\n"), start=1):
        line = line.removesuffix("\r")
        if not line:
            continue
        task = parse_line(line)
        if task is None:
            logger.debug("Skipping malformed task line %d: %r", lineno, line)
            dropped += 1
            continue
        if not store.restore_task(task):
            dropped += 1

    if dropped:
        logger.warning("Dropped %d unreadable task line(s) while loading", dropped)
    return store


def load_file(path: str | Path) -> TaskStore:
    """
    Load tasks from `path`.

    A missing or unreadable file yields an empty store; errors are logged only.
    """
    path = Path(path)
    try:
        text = path.read_text("utf-8")
    except FileNotFoundError:
        logger.debug("Task file %s not found, starting empty", path)
        return TaskStore()
    except (OSError, UnicodeDecodeError):
        logger.debug("Failed to read task file %s, starting empty", path, exc_info=True)
        return TaskStore()

    store = loads(text)
    logger.info("Loaded %d task(s) from %s next_id=%s", store.count_tasks(), path, store.next_id)
    return store


def save_file(store: TaskStore, path: str | Path) -> None:
    """Write the store to `path` atomically. Raises OSError on failure."""
    path = Path(path)
    if path.parent != Path():
        path.parent.mkdir(parents=True, exist_ok=True)

    tmp = path.with_name(path.name + ".tmp")
    try:
        tmp.write_text(dumps(store.list_tasks()), "utf-8")
        os.replace(tmp, path)
    except OSError:
        with contextlib.suppress(OSError):
            tmp.unlink(missing_ok=True)
        raise
    logger.info("Saved %d task(s) to %s", store.count_tasks(), path)
