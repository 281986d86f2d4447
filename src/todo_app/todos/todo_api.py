# src/todo_app/todos/todo_api.py

from __future__ import annotations

import logging

from ..core.ports import TodoRepo
from .todo_models import DeleteResult, Todo, UpdateResult

logger = logging.getLogger(__name__)


def load_todos(repo: TodoRepo) -> list[Todo]:
    """Re-fetch the full list. The store sends no change events, so call this after every mutation."""
    return repo.list_all()


def add_todo(repo: TodoRepo, text: str) -> Todo | None:
    """
    Create a todo from user input.

    Empty input is ignored here, before the store is touched.
    Returns None in that case.
    """
    if not text or not text.strip():
        logger.debug("add_todo ignored empty input")
        return None

    todo = repo.create(text)
    logger.info("Todo created id=%s", todo.id)
    return todo


def toggle_todo(repo: TodoRepo, todo_id: int) -> Todo | None:
    """
    Flip `completed` for one todo by rewriting the full record.
    Returns the new record, or None if the id does not exist.
    """
    current = repo.get(todo_id)
    if current is None:
        return None

    updated = current.toggled()
    if repo.update(updated) is UpdateResult.NOT_FOUND:
        # Deleted between read and write.
        return None

    logger.info("Todo toggled id=%s completed=%s", updated.id, updated.completed)
    return updated


def remove_todo(repo: TodoRepo, todo_id: int) -> bool:
    result = repo.delete(todo_id)
    if result is DeleteResult.DELETED:
        logger.info("Todo deleted id=%s", todo_id)
        return True
    return False


def render_todos(todos: list[Todo]) -> str:
    if not todos:
        return "No tasks yet. Add one with /add <text>."
    lines = []
    for t in todos:
        mark = "x" if t.completed else " "
        lines.append(f"  [{mark}] {t.id}. {t.description}")
    return "\n".join(lines)
