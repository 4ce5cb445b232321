"""
In-memory store for todo records.

The store keeps every todo of the process in a dict keyed by id.
Dicts preserve insertion order, so listing returns todos in the order
they were created while lookups by id stay constant time.  Ids come
from a counter owned by the store and are never reused, even after a
deletion.

A single ``TodoStore`` is created by the application factory and
handed to the endpoints as a dependency.  Every operation runs under
the store's lock, so concurrent requests served from a threadpool see
each operation as atomic.
"""

from __future__ import annotations

import logging
import re
import threading
from typing import Any, Dict, Iterable, List, Optional

from todo_api.app.schemas.todo import Todo, TodoCreate, TodoUpdate


logger = logging.getLogger(__name__)

# Fields a client may change through a partial update.
UPDATABLE_FIELDS = ("text", "fecha", "done")

_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")

# Ids are non-negative, so this never matches a stored todo.
UNMATCHABLE_ID = -1


class TodoStoreError(Exception):
    """Base class for errors raised by ``TodoStore``."""


class InvalidTodoId(TodoStoreError):
    """The given id does not parse as an integer."""

    def __init__(self, raw_id: Any) -> None:
        super().__init__(f"Invalid todo id: {raw_id!r}")
        self.raw_id = raw_id


class TodoNotFound(TodoStoreError):
    """No stored todo has the given id."""

    def __init__(self, todo_id: Any) -> None:
        super().__init__(f"Todo {todo_id!r} not found")
        self.todo_id = todo_id


def parse_todo_id(raw_id: Any) -> Optional[int]:
    """Parse a path id into an integer.

    Integers are returned unchanged.  Strings are parsed from their
    leading integer: surrounding whitespace and a sign are allowed and
    anything after the digits is ignored, so ``"12abc"`` yields ``12``.
    Only ASCII digits count.  Returns ``None`` when no integer can be
    read, and ``UNMATCHABLE_ID`` when the digits are too long to
    convert.
    """
    if isinstance(raw_id, bool):
        return None
    if isinstance(raw_id, int):
        return raw_id
    if not isinstance(raw_id, str):
        return None
    match = _LEADING_INT.match(raw_id)
    if not match:
        return None
    try:
        return int(match.group(1))
    except ValueError:
        return UNMATCHABLE_ID


class TodoStore:
    """Ordered in-memory collection of todos."""

    def __init__(self, initial: Iterable[Todo] = ()) -> None:
        self._lock = threading.RLock()
        self._todos: Dict[int, Todo] = {}
        for todo in initial:
            if todo.id in self._todos:
                raise ValueError(f"Duplicate todo id {todo.id} in initial data")
            self._todos[todo.id] = todo.model_copy(deep=True)
        self._next_id = max(self._todos, default=-1) + 1

    def __len__(self) -> int:
        with self._lock:
            return len(self._todos)

    def list(self) -> List[Todo]:
        """Return all todos in insertion order."""
        with self._lock:
            return [todo.model_copy(deep=True) for todo in self._todos.values()]

    def create(self, data: TodoCreate) -> Todo:
        """Store a new todo and return it.

        Field values are stored as given, whatever their JSON type;
        absent fields become ``None``.
        """
        with self._lock:
            todo = Todo(id=self._next_id, text=data.text, fecha=data.fecha, done=data.done)
            self._next_id += 1
            self._todos[todo.id] = todo
            logger.info("Created todo %s", todo.id)
            return todo.model_copy(deep=True)

    def get(self, raw_id: Any) -> Todo:
        """Return the todo with the given id.

        Raises ``InvalidTodoId`` if the id does not parse and
        ``TodoNotFound`` if no todo matches.
        """
        with self._lock:
            return self._find(self._parse(raw_id)).model_copy(deep=True)

    def update(self, raw_id: Any, data: TodoUpdate) -> Todo:
        """Apply a partial update to a todo and return the result.

        A field is applied when the client supplied it with a non-null
        value.  Empty strings and ``False`` count as supplied.
        """
        with self._lock:
            todo = self._find(self._parse(raw_id))
            changes = {
                name: value
                for name, value in data.model_dump(exclude_unset=True).items()
                if name in UPDATABLE_FIELDS and value is not None
            }
            for name, value in changes.items():
                setattr(todo, name, value)
            if changes:
                logger.info("Updated todo %s: %s", todo.id, sorted(changes))
            return todo.model_copy(deep=True)

    def delete(self, raw_id: Any) -> None:
        """Remove the todo with the given id.

        An id that does not parse simply matches nothing, so the only
        failure is ``TodoNotFound``.
        """
        todo_id = parse_todo_id(raw_id)
        with self._lock:
            if todo_id is None or todo_id not in self._todos:
                logger.debug("Delete of unknown todo %r", raw_id)
                raise TodoNotFound(raw_id)
            del self._todos[todo_id]
            logger.info("Deleted todo %s", todo_id)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    @staticmethod
    def _parse(raw_id: Any) -> int:
        todo_id = parse_todo_id(raw_id)
        if todo_id is None:
            raise InvalidTodoId(raw_id)
        return todo_id

    def _find(self, todo_id: int) -> Todo:
        todo = self._todos.get(todo_id)
        if todo is None:
            logger.debug("Todo %s not found", todo_id)
            raise TodoNotFound(todo_id)
        return todo
