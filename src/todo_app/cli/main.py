# src/todo_app/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, then runs the console REPL.
"""

from __future__ import annotations

import logging
import sys

from ..cli.bootstrap import create_initial_state, shutdown_state
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..logging_setup import resolve_level, setup_logging
from ..todos.errors import StorageUnavailable

logger = logging.getLogger(__name__)


def main() -> int:
    settings = get_settings()

    console_level = resolve_level(getattr(settings, "log_level", "WARNING"))

    log_file = setup_logging(log_dir=settings.log_dir, console_level=console_level)

    logger.info("Starting %s (log=%s)...", settings.app_name, log_file)

    try:
        state = create_initial_state(settings=settings)
    except StorageUnavailable as e:
        logger.exception("Cannot open the task database.")
        print(f"Cannot open the task database: {e}", file=sys.stderr)
        return 1

    try:
        if settings.console_enabled:
            run_console_loop(state)
        else:
            logger.info("Console disabled; nothing to run.")
    finally:
        shutdown_state(state)
        logger.info("Bye.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
