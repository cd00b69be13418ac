# src/task_manager/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the command layer.

Commands depend on this Protocol rather than on TaskStore directly,
so dispatch can be tested against any in-memory repository.
"""

from typing import Protocol

from ..tasks.task_models import Task


class TaskRepo(Protocol):
    def add_task(self, description: str) -> int: ...

    def list_tasks(self) -> list[Task]: ...

    def complete_task(self, task_id: int) -> Task: ...
