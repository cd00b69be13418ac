# src/task_manager/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- loads the persisted task file into a TaskStore,
- saves the store back on exit.
"""

from __future__ import annotations

import logging
from pathlib import Path

from ..config import get_settings
from ..core.state import AppState
from ..tasks.task_codec import load_file, save_file

logger = logging.getLogger(__name__)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    If settings is None, falls back to get_settings().
    A missing or unreadable task file gives an empty store.
    """
    if settings is None:
        settings = get_settings()

    tasks_path = Path(settings.tasks_path)
    return AppState(
        settings=settings,
        task_store=load_file(tasks_path),
        tasks_path=tasks_path,
    )


def save_tasks(state: AppState) -> None:
    """Persist the store. OSError propagates so the caller can report it."""
    save_file(state.task_store, state.tasks_path)
