from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import replace
from functools import lru_cache
from threading import RLock
from typing import List, Optional

from .models import Todo
from .settings import get_settings

logger = logging.getLogger(__name__)


# PUBLIC_INTERFACE
class TodoRepository(ABC):
    """Abstract storage contract for Todo backends."""

    @abstractmethod
    def find_all(self) -> List[Todo]:
        """Return every persisted Todo, in ascending id order."""

    @abstractmethod
    def find_by_id(self, todo_id: int) -> Optional[Todo]:
        """Return the Todo with the given id, or None if there is none."""

    @abstractmethod
    def save(self, todo: Todo) -> Todo:
        """
        Insert or overwrite a Todo and return the persisted copy.
        - id is None: a new id is assigned
        - id matches a stored record: every field of that record is replaced
        - id matches nothing: the Todo is inserted under that id
        """

    @abstractmethod
    def delete_by_id(self, todo_id: int) -> None:
        """Delete the Todo with the given id. Unknown ids are ignored."""


class InMemoryTodoRepository(TodoRepository):
    """
    Thread-safe in-memory repository suitable for testing and default runtime.
    """

    def __init__(self) -> None:
        self._lock = RLock()
        self._items: dict[int, Todo] = {}
        self._next_id = 1

    def _allocate_id(self) -> int:
        with self._lock:
            i = self._next_id
            self._next_id += 1
            return i

    def find_all(self) -> List[Todo]:
        with self._lock:
            return [replace(self._items[k]) for k in sorted(self._items)]

    def find_by_id(self, todo_id: int) -> Optional[Todo]:
        with self._lock:
            item = self._items.get(todo_id)
            return None if item is None else replace(item)

    def save(self, todo: Todo) -> Todo:
        with self._lock:
            if todo.id is None:
                stored = replace(todo, id=self._allocate_id())
            else:
                stored = replace(todo)
                # Keep generated ids clear of ids supplied by callers
                self._next_id = max(self._next_id, stored.id + 1)
            self._items[stored.id] = stored
            logger.debug("Saved todo id=%s", stored.id)
            return replace(stored)

    def delete_by_id(self, todo_id: int) -> None:
        with self._lock:
            if self._items.pop(todo_id, None) is not None:
                logger.debug("Deleted todo id=%s", todo_id)


# PUBLIC_INTERFACE
@lru_cache(maxsize=1)
def get_repository() -> TodoRepository:
    """
    Return the process-wide repository configured by settings.
    - memory: InMemoryTodoRepository
    - sqlite: SQLiteTodoRepository at SQLITE_DB_PATH
    """
    settings = get_settings()
    if settings.persistence_backend == "sqlite":
        from .db import SQLiteTodoRepository

        logger.info("Using SQLite persistence at %s", settings.sqlite_db_path)
        return SQLiteTodoRepository(settings.sqlite_db_path)
    logger.info("Using in-memory persistence")
    return InMemoryTodoRepository()
