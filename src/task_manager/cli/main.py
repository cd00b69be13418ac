# src/task_manager/cli/main.py

"""
CLI entrypoint.

Initializes logging, loads the task file, runs the console REPL,
then saves the tasks back. Exit code is non-zero only when saving fails.
"""

from __future__ import annotations

import logging
import sys

from ..cli.bootstrap import create_initial_state, save_tasks
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)

FAREWELL = "Goodbye! 👋"


def main() -> int:
    settings = get_settings()

    level_name = str(getattr(settings, "log_level", "WARNING")).upper()
    console_level = getattr(logging, level_name, logging.WARNING)
    setup_logging(log_dir=getattr(settings, "log_dir", None), console_level=console_level)

    logger.info("Starting %s (tasks file %s)...", settings.app_name, settings.tasks_path)

    state = create_initial_state(settings=settings)
    run_console_loop(state)

    try:
        save_tasks(state)
    except OSError as e:
        logger.debug("Failed to save tasks to %s", state.tasks_path, exc_info=True)
        print(f"Error: failed to save tasks to {state.tasks_path}: {e}", file=sys.stderr)
        return 1

    print(FAREWELL)
    logger.info("Bye.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
