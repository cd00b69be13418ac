# src/task_manager/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass

DONE_MARKER = "✓"
OPEN_MARKER = "○"


@dataclass(slots=True)
class Task:
    id: int
    description: str
    completed: bool = False

    @property
    def marker(self) -> str:
        return DONE_MARKER if self.completed else OPEN_MARKER
