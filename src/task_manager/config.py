# src/task_manager/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Variables (all optional):
- TASKMGR_APP_NAME    display name in the banner (default: Task Manager)
- TASKMGR_TASKS_FILE  task file path (default: tasks.txt in the working directory)
- TASKMGR_LOG_LEVEL   console log level (default: WARNING)
- TASKMGR_LOG_DIR     when set, full DEBUG logs are also written there
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

ENV_PREFIX = "TASKMGR"

# Local .env is looked up from the working directory, next to tasks.txt.
load_dotenv(find_dotenv(usecwd=True), override=False)


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


def _env_optional_path(name: str) -> Path | None:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return None
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    app_name: str
    log_level: str
    log_dir: Path | None
    tasks_path: Path

    @staticmethod
    def from_env() -> "Settings":
        return Settings(
            app_name=_env(_k("APP_NAME"), "Task Manager").strip() or "Task Manager",
            log_level=_env(_k("LOG_LEVEL"), "WARNING"),
            log_dir=_env_optional_path(_k("LOG_DIR")),
            tasks_path=_env_path(_k("TASKS_FILE"), Path("tasks.txt")),
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
