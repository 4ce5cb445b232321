"""
Loading of the initial todo list.

The store starts out with whatever list the deployment supplies in a
JSON file (see ``Settings.seed_file``).  The file must contain a JSON
array of objects shaped like a todo; items without an ``id`` receive
their position in the array.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import List

from pydantic import ValidationError

from todo_api.app.schemas.todo import Todo


logger = logging.getLogger(__name__)


class SeedError(Exception):
    """Raised when the seed file cannot be turned into a todo list."""


def load_seed(path: str) -> List[Todo]:
    """Read the initial todos from ``path``.

    An empty path means no seed data and yields an empty list.

    Raises
    ------
    SeedError
        If the file is missing or unreadable, is not valid JSON, is not
        a JSON array, contains an invalid item or repeats an id.
    """
    if not path:
        return []
    seed_path = Path(path).resolve()
    try:
        raw = json.loads(seed_path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise SeedError(f"Cannot read seed file {seed_path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise SeedError(f"Seed file {seed_path} is not valid JSON: {exc}") from exc
    if not isinstance(raw, list):
        raise SeedError(f"Seed file {seed_path} must contain a JSON array")

    todos: List[Todo] = []
    seen: set[int] = set()
    for index, item in enumerate(raw):
        if not isinstance(item, dict):
            raise SeedError(f"Seed item {index} is not an object")
        item = {"id": index, **item}
        try:
            todo = Todo.model_validate(item)
        except ValidationError as exc:
            raise SeedError(f"Seed item {index} is invalid: {exc}") from exc
        if todo.id in seen:
            raise SeedError(f"Duplicate todo id {todo.id} in seed file")
        seen.add(todo.id)
        todos.append(todo)
    logger.info("Loaded %d todos from %s", len(todos), seed_path)
    return todos
