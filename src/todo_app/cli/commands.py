# src/todo_app/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..core.state import AppState
from ..todos.todo_api import add_todo, load_todos, remove_todo, render_todos, toggle_todo

# (state, args, text): `text` is everything after the command name, unsplit.
CommandHandler = Callable[[AppState, list[str], str], str]

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by connectors (/help, /add, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(self, state: AppState, line: str) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        head = line[1:].split(None, 1)
        if not head:
            return "Empty command. Use /help to list available commands."

        name = head[0].lower()
        text = head[1] if len(head) > 1 else ""
        args = text.split()

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        logger.debug("Command /%s args=%s", name, args)
        return handler(state, args, text)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        lines.append("Text without a leading / is added as a new task.")
        return "\n".join(lines)


registry = CommandRegistry()


def _parse_id(args: list[str]) -> int | None:
    if len(args) != 1:
        return None
    try:
        return int(args[0])
    except ValueError:
        return None


def _with_list(state: AppState, head: str) -> str:
    return f"{head}\n{render_todos(load_todos(state.todo_store))}"


def cmd_help(state: AppState, args: list[str], text: str) -> str:
    return registry.build_help()


def cmd_list(state: AppState, args: list[str], text: str) -> str:
    return render_todos(load_todos(state.todo_store))


def add_text(state: AppState, text: str) -> str:
    """Add `text` as a task exactly as typed; shared by /add and plain console input."""
    todo = add_todo(state.todo_store, text)
    if todo is None:
        return "Usage: /add <task text>. Empty tasks are not saved."
    return _with_list(state, f"Added task {todo.id}.")


def cmd_add(state: AppState, args: list[str], text: str) -> str:
    return add_text(state, text)


def cmd_done(state: AppState, args: list[str], text: str) -> str:
    """
    /done <id>  -> mark as done, or back to open if it already is
    """
    todo_id = _parse_id(args)
    if todo_id is None:
        return "Usage: /done <id>."
    todo = toggle_todo(state.todo_store, todo_id)
    if todo is None:
        return f"No task with id {todo_id}."
    verb = "done" if todo.completed else "open"
    return _with_list(state, f"Task {todo.id} marked {verb}.")


def cmd_del(state: AppState, args: list[str], text: str) -> str:
    todo_id = _parse_id(args)
    if todo_id is None:
        return "Usage: /del <id>."
    if not remove_todo(state.todo_store, todo_id):
        return f"No task with id {todo_id}."
    return _with_list(state, f"Deleted task {todo_id}.")


def cmd_status(state: AppState, args: list[str], text: str) -> str:
    total = state.todo_store.count()
    done = sum(1 for t in load_todos(state.todo_store) if t.completed)
    return (
        "Status:\n"
        f"  Database: {state.todo_store.path}\n"
        f"  Tasks: {total} total, {done} done, {total - done} open"
    )


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("list", cmd_list, help_text="Show all tasks.", aliases=["ls"])
registry.register("add", cmd_add, help_text="Add a task: /add <text>.")
registry.register(
    "done", cmd_done, help_text="Toggle a task done/open: /done <id>.", aliases=["toggle"]
)
registry.register("del", cmd_del, help_text="Delete a task: /del <id>.", aliases=["rm"])
registry.register("status", cmd_status, help_text="Show database path and task counts.")
