from __future__ import annotations

from typing import List, Optional

from .models import Todo
from .repositories import TodoRepository


# PUBLIC_INTERFACE
class TodoService:
    """
    CRUD operations for Todo items, forwarded unchanged to the repository
    supplied at construction. Repository errors propagate to the caller.
    """

    def __init__(self, repository: TodoRepository) -> None:
        self._repository = repository

    @property
    def repository(self) -> TodoRepository:
        return self._repository

    def find_all(self) -> List[Todo]:
        """Return every persisted Todo; an empty list for an empty store."""
        return self._repository.find_all()

    def find_by_id(self, todo_id: int) -> Optional[Todo]:
        """Return the Todo with the given id, or None if it does not exist."""
        return self._repository.find_by_id(todo_id)

    def save(self, todo: Todo) -> Todo:
        """Insert or overwrite the Todo and return the persisted copy, id populated."""
        return self._repository.save(todo)

    def delete_by_id(self, todo_id: int) -> None:
        """Delete the Todo with the given id; a no-op when it does not exist."""
        self._repository.delete_by_id(todo_id)
