# src/todo_app/core/state.py

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Any

from ..todos.todo_store import TodoStore


@dataclass
class AppState:
    # Settings object (config.Settings or a SimpleNamespace in tests).
    settings: Any

    todo_store: TodoStore

    # Serializes command handling when more than one connector shares the state.
    lock: threading.Lock = field(default_factory=threading.Lock)
