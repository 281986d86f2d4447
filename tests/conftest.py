# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from todo_app.core.state import AppState
from todo_app.todos.todo_store import TodoStore


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the CLI modules.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the caller's environment.
    """
    data_dir = tmp_path / "data"
    return SimpleNamespace(
        app_name="todo-test",
        log_level="WARNING",
        console_enabled=True,
        data_dir=data_dir,
        db_path=data_dir / "todo.db",
        log_dir=data_dir / "logs",
    )


@pytest.fixture()
def store(tmp_path: Path):
    s = TodoStore(tmp_path / "todo.db")
    yield s
    s.close()


@pytest.fixture()
def state(settings: SimpleNamespace):
    """
    AppState wired with a real SQLite TodoStore: its behavior is part of what we test.
    """
    s = TodoStore(settings.db_path)
    yield AppState(settings=settings, todo_store=s)
    s.close()
