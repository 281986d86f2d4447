# src/todo_app/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the UI handlers.

Handlers depend on a Protocol instead of TodoStore itself, so tests can swap
in an in-memory repo and the storage engine stays replaceable.
"""

from typing import Protocol

from ..todos.todo_models import DeleteResult, Todo, UpdateResult


class TodoRepo(Protocol):
    def create(self, description: str) -> Todo: ...
    def get(self, todo_id: int) -> Todo | None: ...
    def list_all(self) -> list[Todo]: ...
    def update(self, todo: Todo) -> UpdateResult: ...
    def delete(self, todo_id: int) -> DeleteResult: ...
    def count(self) -> int: ...
