# src/todo_app/connectors/console_connector.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..cli.commands import add_text, registry as command_registry
from ..core.state import AppState
from ..todos.errors import StorageError

logger = logging.getLogger(__name__)

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]


def handle_line(state: AppState, line: str) -> str | None:
    """
    Turn one line of console input into a reply.

    Lines starting with "/" go to the command registry; anything else is
    added as a new task, exactly as typed. Returns None for blank input.
    """
    command = line.strip()
    if not command:
        return None

    try:
        with state.lock:
            if command.startswith("/"):
                return command_registry.handle(state, line.lstrip())
            return add_text(state, line)
    except StorageError as e:
        logger.exception("Storage failure while handling %r", line)
        return f"Storage error: {e}"
    except Exception:
        logger.exception("Command handler crashed.")
        return "Internal error while handling a command."


def run_console_loop(
    state: AppState,
    *,
    input_fn: InputFn = input,
    output_fn: OutputFn = print,
) -> None:
    logger.info("Console connector started db=%s", state.todo_store.path)
    app_name = str(getattr(state.settings, "app_name", "todo-app"))

    output_fn(f"[{app_name}] Type a task to add it. Use /help for commands, /exit to quit.")
    output_fn(handle_line(state, "/list") or "")

    while True:
        try:
            user_input = input_fn("> ")
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            output_fn("")
            break

        if user_input.strip().lower() in ("/exit", "/quit"):
            logger.info("Console exit command received.")
            break

        reply = handle_line(state, user_input)
        if reply is not None:
            output_fn(reply)

    logger.info("Console connector finished.")
