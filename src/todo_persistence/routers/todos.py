from __future__ import annotations

from typing import Annotated, List

from fastapi import APIRouter, Depends, HTTPException, Path, Response, status

from ..repositories import get_repository
from ..schemas import TodoIn, TodoSchema
from ..service import TodoService

# SQLite INTEGER PRIMARY KEY range
MAX_TODO_ID = 2**63 - 1

TodoId = Annotated[int, Path(ge=1, le=MAX_TODO_ID, description="Todo identifier")]

router = APIRouter(
    prefix="/api/todos",
    tags=["todos"],
)


# PUBLIC_INTERFACE
def get_todo_service() -> TodoService:
    """
    Dependency returning a TodoService over the configured repository.
    Tests override this to inject an isolated store.
    """
    return TodoService(get_repository())


# PUBLIC_INTERFACE
@router.get(
    "",
    response_model=List[TodoSchema],
    response_model_by_alias=True,
    summary="List Todos",
    description="Return every stored Todo item.",
)
def list_todos(service: TodoService = Depends(get_todo_service)) -> List[TodoSchema]:
    return [TodoSchema.from_entity(t) for t in service.find_all()]


# PUBLIC_INTERFACE
@router.get(
    "/{todo_id}",
    response_model=TodoSchema,
    response_model_by_alias=True,
    summary="Get Todo",
    description="Get a single Todo item by ID.",
    responses={
        200: {"description": "Todo found"},
        404: {"description": "Todo not found"},
    },
)
def get_todo(todo_id: TodoId, service: TodoService = Depends(get_todo_service)) -> TodoSchema:
    """
    Retrieve a single Todo item by its ID.
    """
    todo = service.find_by_id(todo_id)
    if todo is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Todo not found")
    return TodoSchema.from_entity(todo)


# PUBLIC_INTERFACE
@router.post(
    "",
    response_model=TodoSchema,
    response_model_by_alias=True,
    status_code=status.HTTP_201_CREATED,
    summary="Create Todo",
    description="Create a new Todo item and return it with its assigned ID.",
)
def create_todo(payload: TodoIn, service: TodoService = Depends(get_todo_service)) -> TodoSchema:
    created = service.save(payload.to_entity())
    return TodoSchema.from_entity(created)


# PUBLIC_INTERFACE
@router.put(
    "/{todo_id}",
    response_model=TodoSchema,
    response_model_by_alias=True,
    summary="Replace Todo",
    description=(
        "Replace every field of the Todo item with the given ID. "
        "If no item has that ID, it is created under it."
    ),
)
def put_todo(todo_id: TodoId, payload: TodoIn, service: TodoService = Depends(get_todo_service)) -> TodoSchema:
    saved = service.save(payload.to_entity(todo_id))
    return TodoSchema.from_entity(saved)


# PUBLIC_INTERFACE
@router.delete(
    "/{todo_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete Todo",
    description="Delete a Todo item by ID. Deleting an unknown ID succeeds without effect.",
)
def delete_todo(todo_id: TodoId, service: TodoService = Depends(get_todo_service)) -> Response:
    service.delete_by_id(todo_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
