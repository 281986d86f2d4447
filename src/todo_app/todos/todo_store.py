# src/todo_app/todos/todo_store.py

from __future__ import annotations

import contextlib
import logging
import sqlite3
import threading
from pathlib import Path
from types import TracebackType

from .errors import StorageUnavailable, StorageWriteError
from .todo_models import DeleteResult, Todo, UpdateResult

logger = logging.getLogger(__name__)

SCHEMA_VERSION = 1
DB_FILENAME = "todo.db"

# SQLite INTEGER range; ids outside it can never be stored.
_MIN_ID = -(2**63)
_MAX_ID = 2**63 - 1


class TodoStore:
    """
    SQLite todo store.

    One table, one connection:
    - the connection is opened on first use (or by an explicit open()),
      and reused until close()
    - open() is idempotent and guarded by a lock, so concurrent first
      callers cannot create the table or the connection twice
    - schema is fixed at version 1 (PRAGMA user_version); newer files are refused

    Every public method is its own transaction: commit on success,
    rollback + StorageWriteError on failure.
    """

    def __init__(self, db_path: str | Path = DB_FILENAME) -> None:
        self._db_path = Path(db_path)
        self._lock = threading.RLock()
        self._conn: sqlite3.Connection | None = None
        self._closed = False

    @property
    def path(self) -> Path:
        return self._db_path

    @property
    def is_ready(self) -> bool:
        return self._conn is not None

    def __enter__(self) -> TodoStore:
        self.open()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    # ---- lifecycle ----

    def open(self) -> None:
        """Open the database and make sure the table exists. Safe to call repeatedly."""
        if self._conn is not None:
            return

        with self._lock:
            if self._closed:
                raise StorageUnavailable(f"TodoStore is closed db={self._db_path}")
            if self._conn is not None:
                return

            try:
                self._db_path.parent.mkdir(parents=True, exist_ok=True)
                conn = sqlite3.connect(str(self._db_path), timeout=30.0, check_same_thread=False)
            except (OSError, sqlite3.Error) as exc:
                raise StorageUnavailable(f"Cannot open {self._db_path}: {exc}") from exc

            try:
                conn.row_factory = sqlite3.Row
                self._configure_conn(conn)
                self._ensure_schema(conn)
                (total,) = conn.execute("SELECT COUNT(*) FROM todos").fetchone()
            except sqlite3.Error as exc:
                conn.close()
                raise StorageUnavailable(f"Cannot initialize {self._db_path}: {exc}") from exc
            except StorageUnavailable:
                conn.close()
                raise

            self._conn = conn
            logger.info("TodoStore ready db=%s total=%s", self._db_path, total)

    def close(self) -> None:
        with self._lock:
            self._closed = True
            if self._conn is None:
                return
            self._conn.close()
            self._conn = None
        logger.info("TodoStore closed db=%s", self._db_path)

    # ---- low-level helpers ----

    @staticmethod
    def _configure_conn(conn: sqlite3.Connection) -> None:
        with contextlib.suppress(sqlite3.OperationalError):
            conn.execute("PRAGMA journal_mode=WAL")

    def _ensure_schema(self, conn: sqlite3.Connection) -> None:
        (version,) = conn.execute("PRAGMA user_version").fetchone()
        if int(version) > SCHEMA_VERSION:
            raise StorageUnavailable(
                f"{self._db_path} has schema version {version}, expected <= {SCHEMA_VERSION}"
            )

        conn.execute(
            """
            CREATE TABLE IF NOT EXISTS todos (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                description TEXT NOT NULL,
                completed INTEGER NOT NULL DEFAULT 0
            )
            """
        )
        if int(version) < SCHEMA_VERSION:
            conn.execute(f"PRAGMA user_version = {SCHEMA_VERSION}")
            logger.info("TodoStore schema created db=%s version=%s", self._db_path, SCHEMA_VERSION)
        conn.commit()

    def _require_conn(self) -> sqlite3.Connection:
        self.open()
        conn = self._conn
        if conn is None:
            raise StorageUnavailable(f"TodoStore is closed db={self._db_path}")
        return conn

    @staticmethod
    def _rollback(conn: sqlite3.Connection) -> None:
        with contextlib.suppress(sqlite3.Error):
            conn.rollback()

    @staticmethod
    def _storable_id(todo_id: int) -> bool:
        return _MIN_ID <= int(todo_id) <= _MAX_ID

    @staticmethod
    def _require_description(description: str) -> None:
        if not description or not description.strip():
            raise ValueError("description is required")

    # ---- public API ----

    def count(self) -> int:
        with self._lock:
            conn = self._require_conn()
            try:
                (n,) = conn.execute("SELECT COUNT(*) FROM todos").fetchone()
            except sqlite3.Error as exc:
                raise StorageUnavailable(f"Cannot read {self._db_path}: {exc}") from exc
            return int(n)

    def create(self, description: str) -> Todo:
        self._require_description(description)

        with self._lock:
            conn = self._require_conn()
            try:
                cur = conn.execute(
                    "INSERT INTO todos(description, completed) VALUES (?, 0)",
                    (description,),
                )
                conn.commit()
            except sqlite3.Error as exc:
                self._rollback(conn)
                raise StorageWriteError(f"Insert failed: {exc}") from exc

            rowid = cur.lastrowid
            if rowid is None:
                raise StorageWriteError("SQLite did not return lastrowid for todos insert")

        todo = Todo(id=int(rowid), description=description, completed=False)
        logger.debug("Todo added id=%s", todo.id)
        return todo

    def get(self, todo_id: int) -> Todo | None:
        if not self._storable_id(todo_id):
            return None

        with self._lock:
            conn = self._require_conn()
            try:
                row = conn.execute(
                    "SELECT id, description, completed FROM todos WHERE id = ?",
                    (int(todo_id),),
                ).fetchone()
            except sqlite3.Error as exc:
                raise StorageUnavailable(f"Cannot read {self._db_path}: {exc}") from exc
        return Todo.from_row(row) if row else None

    def list_all(self) -> list[Todo]:
        """Every todo, oldest first (ordered by id, which is insertion order)."""
        with self._lock:
            conn = self._require_conn()
            try:
                rows = conn.execute(
                    "SELECT id, description, completed FROM todos ORDER BY id ASC"
                ).fetchall()
            except sqlite3.Error as exc:
                raise StorageUnavailable(f"Cannot read {self._db_path}: {exc}") from exc
        return [Todo.from_row(r) for r in rows]

    def update(self, todo: Todo) -> UpdateResult:
        """Overwrite the stored row with the full contents of `todo`."""
        self._require_description(todo.description)
        if not self._storable_id(todo.id):
            return UpdateResult.NOT_FOUND
        row = todo.to_row()

        with self._lock:
            conn = self._require_conn()
            try:
                cur = conn.execute(
                    "UPDATE todos SET description = :description, completed = :completed "
                    "WHERE id = :id",
                    row,
                )
                conn.commit()
            except sqlite3.Error as exc:
                self._rollback(conn)
                raise StorageWriteError(f"Update failed id={todo.id}: {exc}") from exc

        if cur.rowcount == 0:
            logger.debug("Todo update missed id=%s", todo.id)
            return UpdateResult.NOT_FOUND
        logger.debug("Todo updated id=%s completed=%s", todo.id, todo.completed)
        return UpdateResult.UPDATED

    def delete(self, todo_id: int) -> DeleteResult:
        if not self._storable_id(todo_id):
            return DeleteResult.NOT_FOUND

        with self._lock:
            conn = self._require_conn()
            try:
                cur = conn.execute("DELETE FROM todos WHERE id = ?", (int(todo_id),))
                conn.commit()
            except sqlite3.Error as exc:
                self._rollback(conn)
                raise StorageWriteError(f"Delete failed id={todo_id}: {exc}") from exc

        if cur.rowcount == 0:
            logger.debug("Todo delete missed id=%s", todo_id)
            return DeleteResult.NOT_FOUND
        logger.debug("Todo deleted id=%s", todo_id)
        return DeleteResult.DELETED
