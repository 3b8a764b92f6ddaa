# src/taskdeck/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum

from ..core.state import AppState
from ..tasks.errors import TaskdeckError, TaskParseError
from ..tasks.task_models import format_due_date
from .render import render_task, render_tasks

logger = logging.getLogger(__name__)

FIELD_SEP = "|"


class Command(StrEnum):
    ADD = "add"
    LIST = "list"
    COMPLETE = "done"
    DELETE = "delete"
    EDIT = "edit"
    SEARCH = "search"
    HELP = "help"
    EXIT = "exit"

    @property
    def mutates(self) -> bool:
        """True if a successful run changes the store (and so must be saved)."""
        return self in _MUTATING


_MUTATING = frozenset({Command.ADD, Command.COMPLETE, Command.DELETE, Command.EDIT})

CommandHandler = Callable[[AppState, str], str]


@dataclass(frozen=True, slots=True)
class CommandResult:
    command: Command | None
    reply: str
    ok: bool = True

    @property
    def needs_save(self) -> bool:
        return self.ok and self.command is not None and self.command.mutates


class CommandRegistry:
    """Slash-command registry used by the console connector (/add, /list, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[Command, CommandHandler] = {}
        self._help: dict[Command, str] = {}
        self._names: dict[str, Command] = {}

    def register(
        self,
        command: Command,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        self._handlers[command] = handler
        self._help[command] = help_text
        self._names[command.value] = command
        for alias in aliases:
            self._names[alias.lower()] = command

    def resolve(self, name: str) -> Command | None:
        return self._names.get(name.lower())

    def missing(self) -> set[Command]:
        """Commands that have no handler registered."""
        return set(Command) - set(self._handlers)

    def handle(self, state: AppState, line: str) -> CommandResult | None:
        """
        Handle a string like "/command args" (the leading slash is optional).
        Returns None for blank input.

        Expected user errors (unknown id, bad date, bad syntax) become a reply with
        ok=False. OSError is not caught: without storage the run cannot go on.
        """
        text = line.strip()
        if text.startswith("/"):
            text = text[1:]
        if not text:
            return None

        name, _, arg = text.partition(" ")
        command = self.resolve(name)
        if command is None:
            return CommandResult(
                None, f"Unknown command: /{name}. Use /help to list available commands.", ok=False
            )

        handler = self._handlers.get(command)
        if handler is None:
            return CommandResult(command, f"Command /{command} is not available.", ok=False)

        try:
            reply = handler(state, arg.strip())
        except TaskdeckError as e:
            logger.debug("Command /%s failed: %s", command, e)
            return CommandResult(command, str(e), ok=False)
        return CommandResult(command, reply)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for command, help_text in self._help.items():
            lines.append(f"  /{command} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


# ---- argument helpers ----


def _parse_id(raw: str) -> int:
    token = raw.strip().lstrip("#").rstrip(".")
    # isdigit() also accepts digits such as "²" that int() rejects
    if not (token.isascii() and token.isdecimal()) or int(token) < 1:
        raise TaskParseError(f"Invalid task id: {raw.strip() or '<empty>'}")
    return int(token)


def _split_fields(raw: str) -> list[str]:
    return [part.strip() for part in raw.split(FIELD_SEP)]


# ---- handlers ----


def cmd_add(state: AppState, arg: str) -> str:
    """
    /add <description> [| due YYYY-MM-DD] [| tags, comma, separated]
    """
    fields = _split_fields(arg)
    description = fields[0]
    if not description:
        raise TaskParseError("Usage: /add <description> [| YYYY-MM-DD] [| tag1, tag2]")
    due = fields[1] if len(fields) > 1 else None
    tags = fields[2] if len(fields) > 2 else None

    task = state.task_store.create(description, tags, due)
    return f"Added task #{task.id}: {task.description}"


def cmd_list(state: AppState, arg: str) -> str:
    return render_tasks(state.task_store.query())


def cmd_complete(state: AppState, arg: str) -> str:
    task = state.task_store.complete(_parse_id(arg))
    return f"Completed task #{task.id}: {task.description}"


def cmd_delete(state: AppState, arg: str) -> str:
    task = state.task_store.delete(_parse_id(arg))
    return f"Deleted task #{task.id}: {task.description}"


def cmd_edit(state: AppState, arg: str) -> str:
    """
    /edit <id> [description] [| due] [| tags]

    Omitted fields keep their current value. An empty due field clears the due
    date and an empty tags field clears the tags.
    """
    id_part, _, rest = arg.strip().partition(" ")
    task_id = _parse_id(id_part)
    current = state.task_store.get(task_id)

    fields = _split_fields(rest)
    description = fields[0] or current.description
    due = fields[1] if len(fields) > 1 else format_due_date(current.due_date)
    tags = fields[2] if len(fields) > 2 else list(current.tags)

    task = state.task_store.edit(task_id, description, tags, due)
    return f"Updated task #{task.id}\n{render_task(task)}"


def cmd_search(state: AppState, arg: str) -> str:
    if not arg:
        raise TaskParseError("Usage: /search <tag or text>")
    return render_tasks(state.task_store.query(arg))


def cmd_help(state: AppState, arg: str) -> str:
    return registry.build_help()


def cmd_exit(state: AppState, arg: str) -> str:
    return "Bye."


registry.register(
    Command.ADD,
    cmd_add,
    help_text="Add a task: /add Buy milk | 2024-01-01 | home, errand",
    aliases=["a", "new"],
)
registry.register(Command.LIST, cmd_list, help_text="List all tasks.", aliases=["ls", "l"])
registry.register(
    Command.COMPLETE, cmd_complete, help_text="Mark a task done: /done 3", aliases=["complete", "d"]
)
registry.register(
    Command.DELETE, cmd_delete, help_text="Delete a task: /delete 3", aliases=["rm", "del"]
)
registry.register(
    Command.EDIT,
    cmd_edit,
    help_text="Edit a task: /edit 3 New text | YYYY-MM-DD | tags (empty due clears it)",
    aliases=["e"],
)
registry.register(
    Command.SEARCH, cmd_search, help_text="Search by tag or text: /search urgent", aliases=["s", "find"]
)
registry.register(Command.HELP, cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register(Command.EXIT, cmd_exit, help_text="Save and quit.", aliases=["quit", "q"])
