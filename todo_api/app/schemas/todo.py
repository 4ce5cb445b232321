"""
Pydantic schemas for todo records.

A todo carries a short ``text``, a free-form ``fecha`` (date string,
not parsed) and a ``done`` flag.  The ``id`` is always assigned by the
store and never accepted from clients.  Client-supplied fields are
typed ``Any``: the API stores whatever JSON value it receives without
checking or coercing it.  Values that are absent on creation are
stored as ``None``.
"""

from typing import Any

from pydantic import BaseModel, Field


class TodoCreate(BaseModel):
    """Schema for creating a new todo."""

    text: Any = Field(None, description="Todo text, normally a string")
    fecha: Any = Field(None, description="Date of the todo, normally a free-form string")
    done: Any = Field(None, description="Whether the todo is completed, normally a boolean")


class TodoUpdate(BaseModel):
    """Schema for a partial update of a todo.

    All fields are optional; only fields present in the request body
    with a non-null value are applied.
    """

    text: Any = None
    fecha: Any = None
    done: Any = None


class Todo(BaseModel):
    """Schema for reading a todo."""

    id: int = Field(..., ge=0)
    text: Any = None
    fecha: Any = None
    done: Any = None

    model_config = {
        "from_attributes": True,
    }
