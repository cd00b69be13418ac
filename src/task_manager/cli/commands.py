# src/task_manager/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from ..core.ports import TaskRepo
from ..tasks.task_store import TaskNotFoundError, TaskValidationError

logger = logging.getLogger(__name__)

NO_TASKS_MESSAGE = "No tasks yet. Add one to get started!"
LIST_HEADER = "=== Your Tasks ==="


@dataclass(frozen=True, slots=True)
class AddCommand:
    description: str


@dataclass(frozen=True, slots=True)
class ListCommand:
    pass


@dataclass(frozen=True, slots=True)
class CompleteCommand:
    task_id: int


@dataclass(frozen=True, slots=True)
class QuitCommand:
    pass


@dataclass(frozen=True, slots=True)
class HelpCommand:
    pass


@dataclass(frozen=True, slots=True)
class InvalidCommand:
    """A known command with unusable arguments."""

    message: str


@dataclass(frozen=True, slots=True)
class UnknownCommand:
    name: str


Command = (
    AddCommand
    | ListCommand
    | CompleteCommand
    | QuitCommand
    | HelpCommand
    | InvalidCommand
    | UnknownCommand
)

# Turns the raw argument text (possibly "") into a command.
ArgParser = Callable[[str], Command]


def _parse_add(args: str) -> Command:
    return AddCommand(description=args)


def _parse_complete(args: str) -> Command:
    if not args:
        return InvalidCommand("Usage: complete <id>")
    if not (args.isascii() and args.isdigit()):
        return InvalidCommand(f"Invalid task id: {args!r}. Use a number, e.g. complete 1")
    return CompleteCommand(task_id=int(args))


class CommandRegistry:
    """Name -> argument parser table, plus help text for `help`."""

    def __init__(self) -> None:
        self._parsers: dict[str, ArgParser] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        parser: ArgParser,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._parsers[key] = parser
        self._help[key] = help_text
        for alias in aliases:
            self._parsers[alias.lower()] = parser

    def parse(self, line: str) -> Command | None:
        """
        Parse a line like "add Buy milk".
        Returns None for a blank line.
        """
        parts = line.strip().split(maxsplit=1)
        if not parts:
            return None

        name = parts[0].lower()
        args = parts[1] if len(parts) > 1 else ""

        parser = self._parsers.get(name)
        if parser is None:
            return UnknownCommand(name=parts[0])
        return parser(args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  {name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()
registry.register("add", _parse_add, help_text="add <text>: add a new task.")
registry.register("list", lambda _args: ListCommand(), help_text="Show all tasks.")
registry.register("complete", _parse_complete, help_text="complete <id>: mark a task done.")
registry.register(
    "quit", lambda _args: QuitCommand(), help_text="Save and exit.", aliases=["exit"]
)
registry.register(
    "help", lambda _args: HelpCommand(), help_text="Show available commands.", aliases=["h", "?"]
)


def parse_command(line: str) -> Command | None:
    return registry.parse(line)


def format_task_list(repo: TaskRepo) -> str:
    tasks = repo.list_tasks()
    if not tasks:
        return NO_TASKS_MESSAGE
    lines = [LIST_HEADER]
    lines.extend(f"{t.marker} [{t.id}] {t.description}" for t in tasks)
    return "\n".join(lines)


def execute_command(repo: TaskRepo, command: Command) -> str:
    """
    Apply a command to the repository and return the reply text.

    Validation and not-found conditions become messages; the session goes on.
    """
    if isinstance(command, AddCommand):
        try:
            task_id = repo.add_task(command.description)
        except TaskValidationError as e:
            return f"✗ {e}"
        return f"✓ Task added successfully! [{task_id}]"

    if isinstance(command, ListCommand):
        return format_task_list(repo)

    if isinstance(command, CompleteCommand):
        try:
            task = repo.complete_task(command.task_id)
        except TaskNotFoundError:
            return f"✗ Task {command.task_id} not found."
        return f"✓ Task {task.id} marked as complete."

    if isinstance(command, HelpCommand):
        return registry.build_help()

    if isinstance(command, InvalidCommand):
        return f"✗ {command.message}"

    if isinstance(command, UnknownCommand):
        return f"Unknown command: {command.name}. Type 'help' to list available commands."

    # QuitCommand is handled by the connector, which owns the session.
    logger.debug("execute_command called with %r", command)
    return ""
