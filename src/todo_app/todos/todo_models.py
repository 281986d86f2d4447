# src/todo_app/todos/todo_models.py

from __future__ import annotations

import sqlite3
from dataclasses import dataclass, replace
from enum import StrEnum
from typing import Any


class UpdateResult(StrEnum):
    UPDATED = "updated"
    NOT_FOUND = "not_found"


class DeleteResult(StrEnum):
    DELETED = "deleted"
    NOT_FOUND = "not_found"


@dataclass(frozen=True, slots=True)
class Todo:
    """
    One to-do item.

    `completed` is stored as INTEGER 0/1; use to_row()/from_row() at the DB edge.
    """

    id: int
    description: str
    completed: bool = False

    def toggled(self) -> Todo:
        return replace(self, completed=not self.completed)

    def to_row(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "description": self.description,
            "completed": 1 if self.completed else 0,
        }

    @classmethod
    def from_row(cls, row: sqlite3.Row) -> Todo:
        return cls(
            id=int(row["id"]),
            description=str(row["description"] or ""),
            completed=int(row["completed"] or 0) == 1,
        )
