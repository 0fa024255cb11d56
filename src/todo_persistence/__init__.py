"""
Todo persistence package.

Exposes the Todo entity, its storage contract and the TodoService. The
FastAPI application lives in ``todo_persistence.main``.
"""

from .models import Todo
from .repositories import InMemoryTodoRepository, TodoRepository
from .service import TodoService

__all__ = ["InMemoryTodoRepository", "Todo", "TodoRepository", "TodoService"]
