# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from task_manager.core.state import AppState
from task_manager.tasks.task_store import TaskStore


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the CLI.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment.
    """
    return SimpleNamespace(
        app_name="Task Manager",
        log_level="WARNING",
        log_dir=None,
        tasks_path=tmp_path / "tasks.txt",
    )


@pytest.fixture()
def store() -> TaskStore:
    return TaskStore()


@pytest.fixture()
def state(settings: SimpleNamespace, store: TaskStore) -> AppState:
    return AppState(settings=settings, task_store=store, tasks_path=settings.tasks_path)


@pytest.fixture()
def feed_input(monkeypatch: pytest.MonkeyPatch):
    """Replace input() with a scripted sequence of lines, then EOF."""

    def _feed(lines: list[str]) -> list[str]:
        prompts: list[str] = []
        it = iter(lines)

        def fake_input(prompt: str = "") -> str:
            prompts.append(prompt)
            try:
                return next(it)
            except StopIteration:
                raise EOFError from None

        monkeypatch.setattr("builtins.input", fake_input)
        return prompts

    return _feed
