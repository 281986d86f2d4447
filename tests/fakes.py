# tests/fakes.py

from __future__ import annotations

from dataclasses import replace

from todo_app.todos.todo_models import DeleteResult, Todo, UpdateResult


class FakeTodoRepo:
    """
    In-memory TodoRepo used for handler unit tests.

    Mirrors the store contract (ids never reused, not-found results instead
    of errors) and records calls for assertions.
    """

    def __init__(self) -> None:
        self.todos: dict[int, Todo] = {}
        self.calls: list[str] = []
        self._next_id = 1

    def create(self, description: str) -> Todo:
        self.calls.append("create")
        todo = Todo(id=self._next_id, description=description)
        self.todos[todo.id] = todo
        self._next_id += 1
        return todo

    def get(self, todo_id: int) -> Todo | None:
        self.calls.append("get")
        return self.todos.get(todo_id)

    def list_all(self) -> list[Todo]:
        self.calls.append("list_all")
        return [self.todos[k] for k in sorted(self.todos)]

    def update(self, todo: Todo) -> UpdateResult:
        self.calls.append("update")
        if todo.id not in self.todos:
            return UpdateResult.NOT_FOUND
        self.todos[todo.id] = replace(todo)
        return UpdateResult.UPDATED

    def delete(self, todo_id: int) -> DeleteResult:
        self.calls.append("delete")
        if self.todos.pop(todo_id, None) is None:
            return DeleteResult.NOT_FOUND
        return DeleteResult.DELETED

    def count(self) -> int:
        return len(self.todos)
