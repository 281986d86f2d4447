# src/todo_app/todos/errors.py

from __future__ import annotations


class StorageError(RuntimeError):
    """Base class for todo storage failures."""


class StorageUnavailable(StorageError):
    """The database cannot be opened, created or read."""


class StorageWriteError(StorageError):
    """A single create/update/delete did not reach the database."""
