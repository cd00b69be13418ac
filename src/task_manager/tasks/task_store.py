# src/task_manager/tasks/task_store.py

from __future__ import annotations

import logging
from collections.abc import Iterable

from .task_models import Task

logger = logging.getLogger(__name__)

# Characters that cannot appear inside a persisted description (see task_codec).
FORBIDDEN_CHARS = ("|", "\n", "\r")


class TaskValidationError(ValueError):
    """Raised when user input cannot become a task (empty text, bad characters)."""


class TaskNotFoundError(LookupError):
    """Raised when no task carries the requested id."""

    def __init__(self, task_id: int) -> None:
        super().__init__(f"Task {task_id} not found")
        self.task_id = task_id


class TaskStore:
    """
    In-memory ordered task store.

    Invariants:
    - tasks keep insertion order
    - ids are unique and never reused
    - next_id is strictly greater than every id ever held

    The store owns no file handles; persistence lives in task_codec.
    """

    def __init__(self, tasks: Iterable[Task] = (), *, next_id: int = 1) -> None:
        self._tasks: list[Task] = []
        self._next_id = max(1, int(next_id))
        for task in tasks:
            self.restore_task(task)

    @property
    def next_id(self) -> int:
        return self._next_id

    # ---- public API ----

    def count_tasks(self) -> int:
        return len(self._tasks)

    def add_task(self, description: str) -> int:
        text = (description or "").strip()
        if not text:
            raise TaskValidationError("Task description cannot be empty.")
        if any(ch in text for ch in FORBIDDEN_CHARS):
            raise TaskValidationError("Task description cannot contain '|' or line breaks.")

        task_id = self._next_id
        self._tasks.append(Task(id=task_id, description=text))
        self._next_id += 1
        logger.debug("Task added id=%s next_id=%s", task_id, self._next_id)
        return task_id

    def list_tasks(self) -> list[Task]:
        return list(self._tasks)

    def get_task(self, task_id: int) -> Task | None:
        for task in self._tasks:
            if task.id == task_id:
                return task
        return None

    def complete_task(self, task_id: int) -> Task:
        """Mark a task completed. Completing an already completed task is a no-op."""
        task = self.get_task(task_id)
        if task is None:
            raise TaskNotFoundError(task_id)
        if not task.completed:
            task.completed = True
            logger.debug("Task completed id=%s", task_id)
        return task

    def restore_task(self, task: Task) -> bool:
        """
        Append an already-numbered task (used when loading from disk).

        Returns False and leaves the store untouched when the id is already taken.
        """
        if self.get_task(task.id) is not None:
            logger.warning("Duplicate task id=%s ignored", task.id)
            return False

        self._tasks.append(task)
        if task.id >= self._next_id:
            self._next_id = task.id + 1
        return True
