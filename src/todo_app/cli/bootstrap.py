# src/todo_app/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- builds the TodoStore and opens it eagerly (the store creates its own
  directory and reports any failure as StorageUnavailable),
- wires it into AppState.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.state import AppState
from ..todos.todo_store import TodoStore

logger = logging.getLogger(__name__)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().

    The store is opened here, before any handler can reach it.
    Raises StorageUnavailable if the database cannot be opened.
    """
    if settings is None:
        settings = get_settings()

    store = TodoStore(settings.db_path)
    store.open()

    return AppState(settings=settings, todo_store=store)


def shutdown_state(state: AppState) -> None:
    """Best-effort shutdown (no exceptions should escape)."""
    try:
        state.todo_store.close()
    except Exception:
        logger.exception("Failed to close TodoStore.")
