from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

from .models import Todo

# External key of the completion flag on the wire. Clients depend on it.
COMPLETED_KEY = "completed"


# PUBLIC_INTERFACE
class TodoSchema(BaseModel):
    """
    Wire representation of a Todo.

    The completion flag is held as ``is_completed`` on the model but only
    read from and written to the external key ``completed``; an incoming
    ``is_completed`` key is ignored.
    """

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": 1,
                "title": "Buy milk",
                "completed": False,
            }
        },
    )

    id: Optional[int] = Field(default=None, description="Unique identifier of the todo item")
    title: Optional[str] = Field(default=None, description="Title of the todo item")
    is_completed: bool = Field(default=False, alias=COMPLETED_KEY, description="Completion status flag")

    # PUBLIC_INTERFACE
    @classmethod
    def from_entity(cls, todo: Todo) -> "TodoSchema":
        """Build the wire model from a Todo entity."""
        return cls.model_validate({"id": todo.id, "title": todo.title, COMPLETED_KEY: todo.completed})

    # PUBLIC_INTERFACE
    def to_entity(self) -> Todo:
        """Build a Todo entity from the wire model."""
        return Todo(title=self.title, completed=self.is_completed, id=self.id)


# PUBLIC_INTERFACE
class TodoIn(BaseModel):
    """
    Request body for creating or replacing a Todo item.
    Only the presence of ``title`` is required; no other rules apply.
    """

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "title": "Buy milk",
                "completed": False,
            }
        },
    )

    title: str = Field(..., description="Title of the todo item")
    is_completed: bool = Field(default=False, alias=COMPLETED_KEY, description="Completion status flag")

    def to_entity(self, todo_id: Optional[int] = None) -> Todo:
        return Todo(title=self.title, completed=self.is_completed, id=todo_id)


# PUBLIC_INTERFACE
def to_external(todo: Todo) -> Dict[str, Any]:
    """Serialize a Todo to its external dict form, keyed by ``id``, ``title`` and ``completed``."""
    return TodoSchema.from_entity(todo).model_dump(by_alias=True)


# PUBLIC_INTERFACE
def from_external(data: Dict[str, Any]) -> Todo:
    """Deserialize a Todo from its external dict form."""
    return TodoSchema.model_validate(data).to_entity()
