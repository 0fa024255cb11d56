from __future__ import annotations

import logging
import os
import sqlite3
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Generator, List, Optional

from .models import Todo
from .repositories import TodoRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _Cols:
    table: str = "todos"
    id: str = "id"
    title: str = "title"
    completed: str = "completed"


_COLS = _Cols()


class SQLiteTodoRepository(TodoRepository):
    """
    Lightweight SQLite repository implementing the TodoRepository interface.
    """

    def __init__(self, db_path: str) -> None:
        os.makedirs(os.path.dirname(db_path) or ".", exist_ok=True)
        self._db_path = db_path
        self._init_db()

    @contextmanager
    def _conn(self) -> Generator[sqlite3.Connection, None, None]:
        conn = sqlite3.connect(self._db_path)
        conn.row_factory = sqlite3.Row
        try:
            yield conn
            conn.commit()
        finally:
            conn.close()

    def _init_db(self) -> None:
        with self._conn() as conn:
            conn.execute(
                f"""
                CREATE TABLE IF NOT EXISTS {_COLS.table} (
                    {_COLS.id} INTEGER PRIMARY KEY AUTOINCREMENT,
                    {_COLS.title} TEXT NULL,
                    {_COLS.completed} INTEGER NOT NULL DEFAULT 0
                )
                """
            )
        logger.info("Initialized table %r in %s", _COLS.table, self._db_path)

    def _row_to_entity(self, row: sqlite3.Row) -> Todo:
        return Todo(
            id=int(row[_COLS.id]),
            title=row[_COLS.title],
            completed=bool(row[_COLS.completed]),
        )

    def _select(self, conn: sqlite3.Connection, todo_id: int) -> Optional[sqlite3.Row]:
        return conn.execute(
            f"SELECT * FROM {_COLS.table} WHERE {_COLS.id} = ?", (todo_id,)
        ).fetchone()

    def find_all(self) -> List[Todo]:
        with self._conn() as conn:
            rows = conn.execute(
                f"SELECT * FROM {_COLS.table} ORDER BY {_COLS.id} ASC"
            ).fetchall()
            return [self._row_to_entity(r) for r in rows]

    def find_by_id(self, todo_id: int) -> Optional[Todo]:
        with self._conn() as conn:
            row = self._select(conn, todo_id)
            return self._row_to_entity(row) if row else None

    def save(self, todo: Todo) -> Todo:
        completed = 1 if todo.completed else 0
        with self._conn() as conn:
            if todo.id is None:
                cur = conn.execute(
                    f"INSERT INTO {_COLS.table} ({_COLS.title}, {_COLS.completed}) VALUES (?, ?)",
                    (todo.title, completed),
                )
                todo_id = cur.lastrowid
            else:
                # Full overwrite of an existing row, or insert under the given id
                conn.execute(
                    f"""
                    INSERT INTO {_COLS.table} ({_COLS.id}, {_COLS.title}, {_COLS.completed})
                    VALUES (?, ?, ?)
                    ON CONFLICT({_COLS.id}) DO UPDATE SET
                        {_COLS.title} = excluded.{_COLS.title},
                        {_COLS.completed} = excluded.{_COLS.completed}
                    """,
                    (todo.id, todo.title, completed),
                )
                todo_id = todo.id
            row = self._select(conn, todo_id)
            assert row is not None
            logger.debug("Saved todo id=%s", todo_id)
            return self._row_to_entity(row)

    def delete_by_id(self, todo_id: int) -> None:
        with self._conn() as conn:
            cur = conn.execute(f"DELETE FROM {_COLS.table} WHERE {_COLS.id} = ?", (todo_id,))
            if cur.rowcount > 0:
                logger.debug("Deleted todo id=%s", todo_id)
