"""Shared fixtures for the Todo API tests."""

import json
from typing import Any, Dict, List

import pytest
from fastapi.testclient import TestClient

from todo_api.app.core.config import Settings
from todo_api.app.main import create_app
from todo_api.app.services.todo_service import TodoStore


@pytest.fixture
def store() -> TodoStore:
    """An empty store."""
    return TodoStore()


@pytest.fixture
def client() -> TestClient:
    """A client for an app with an empty store."""
    return TestClient(create_app(Settings(seed_file="", api_prefix="")))


@pytest.fixture
def write_seed(tmp_path):
    """Write a seed file and return its path."""

    def _write(items: Any, name: str = "todos.json") -> str:
        path = tmp_path / name
        path.write_text(json.dumps(items), encoding="utf-8")
        return str(path)

    return _write


@pytest.fixture
def seeded_client(write_seed) -> TestClient:
    """A client for an app seeded with a single todo with id 0."""
    items: List[Dict[str, Any]] = [
        {"id": 0, "text": "comprar pan", "fecha": "2024-01-01", "done": False},
    ]
    return TestClient(create_app(Settings(seed_file=write_seed(items), api_prefix="")))
