# src/task_manager/core/state.py

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from ..tasks.task_store import TaskStore


@dataclass
class AppState:
    # Settings object (config.Settings or a test double with the same attributes).
    settings: object

    task_store: TaskStore
    tasks_path: Path
