"""
Todo endpoints for API v1.

These routes expose CRUD operations over the in-memory todo store.
The path id is received as a string and parsed by the store, so a
non-numeric id produces a ``400 Invalid ID`` response instead of a
framework validation error.  Error bodies have the form
``{"error": "<message>"}``.

Request bodies are accepted as any JSON value.  Objects are read into
the create and update schemas; anything else (an array, a number,
no body at all) counts as an empty object.
"""

from typing import Any, List

from fastapi import APIRouter, Body, Depends, HTTPException, Request, Response, status

from todo_api.app.schemas.todo import Todo, TodoCreate, TodoUpdate
from todo_api.app.services.todo_service import InvalidTodoId, TodoNotFound, TodoStore

router = APIRouter()

INVALID_ID = "Invalid ID"
NOT_FOUND = "Not Found"
TODO_NOT_FOUND = "Todo not found"


def get_todo_store(request: Request) -> TodoStore:
    """Return the store created by the application factory."""
    return request.app.state.todo_store


def _as_object(body: Any) -> dict:
    return body if isinstance(body, dict) else {}


@router.get("/todo", response_model=List[Todo])
async def list_todos(store: TodoStore = Depends(get_todo_store)) -> List[Todo]:
    """Return all todos in creation order."""
    return store.list()


@router.post("/todo", response_model=Todo, status_code=status.HTTP_201_CREATED)
async def create_todo(
    body: Any = Body(None),
    store: TodoStore = Depends(get_todo_store),
) -> Todo:
    """Create a new todo.

    Field values are stored verbatim.  Missing fields are stored as
    ``null``; a request without an object body creates a todo with
    every field empty.
    """
    return store.create(TodoCreate.model_validate(_as_object(body)))


@router.get("/todo/{todo_id}", response_model=Todo)
async def get_todo(todo_id: str, store: TodoStore = Depends(get_todo_store)) -> Todo:
    """Retrieve a single todo by ID."""
    try:
        return store.get(todo_id)
    except InvalidTodoId:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=INVALID_ID)
    except TodoNotFound:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)


@router.patch("/todo/{todo_id}", response_model=Todo)
async def update_todo(
    todo_id: str,
    body: Any = Body(None),
    store: TodoStore = Depends(get_todo_store),
) -> Todo:
    """Update the supplied fields of a todo.

    Only ``text``, ``fecha`` and ``done`` present in the body with a
    non-null value are changed.
    """
    try:
        return store.update(todo_id, TodoUpdate.model_validate(_as_object(body)))
    except InvalidTodoId:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=INVALID_ID)
    except TodoNotFound:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=TODO_NOT_FOUND)


@router.delete(
    "/todo/{todo_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
async def delete_todo(todo_id: str, store: TodoStore = Depends(get_todo_store)) -> Response:
    """Delete a todo.  Responds with an empty 204 on success."""
    try:
        store.delete(todo_id)
    except TodoNotFound:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=TODO_NOT_FOUND)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
