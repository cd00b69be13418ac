# src/task_manager/connectors/console_connector.py

from __future__ import annotations

import logging

from ..cli.commands import QuitCommand, execute_command, parse_command
from ..core.state import AppState

logger = logging.getLogger(__name__)

PROMPT = "> "


def run_console_loop(state: AppState) -> None:
    """
    Read commands from stdin until quit/exit, EOF or Ctrl+C.

    Saving is left to the caller.
    """
    app_name = str(getattr(state.settings, "app_name", "Task Manager"))
    logger.info("Console connector started (tasks=%d).", state.task_store.count_tasks())
    print(f"Welcome to {app_name}! Type 'help' for commands.")

    while True:
        try:
            line = input(PROMPT)
        except EOFError:
            logger.info("Console EOF received, exiting.")
            print()
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        command = parse_command(line)
        if command is None:
            continue

        if isinstance(command, QuitCommand):
            logger.info("Console exit command received.")
            break

        try:
            reply = execute_command(state.task_store, command)
        except Exception:
            logger.exception("Command handler crashed.")
            reply = "Internal error while handling a command."

        if reply:
            print(reply)

    logger.info("Console connector finished.")
