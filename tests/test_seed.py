"""Tests for seed loading and application configuration."""

import logging

import pytest
from fastapi.testclient import TestClient

from todo_api.app.core.config import Settings
from todo_api.app.core.logging_config import setup_logging
from todo_api.app.core.seed import SeedError, load_seed
from todo_api.app.main import create_app


def test_empty_path_means_no_seed():
    assert load_seed("") == []


def test_loads_items_and_defaults_ids(write_seed):
    path = write_seed([
        {"text": "a", "fecha": "2024-01-01", "done": False},
        {"text": "b", "done": True},
    ])
    todos = load_seed(path)
    assert [todo.id for todo in todos] == [0, 1]
    assert todos[1].fecha is None
    assert todos[1].done is True


def test_explicit_ids_are_kept(write_seed):
    todos = load_seed(write_seed([{"id": 4, "text": "a"}, {"id": 2, "text": "b"}]))
    assert [todo.id for todo in todos] == [4, 2]


@pytest.mark.parametrize(
    "items",
    [
        {"text": "not a list"},
        ["not an object"],
        [{"id": -1, "text": "negative"}],
        [{"id": 1}, {"id": 1}],
    ],
)
def test_rejects_bad_documents(write_seed, items):
    with pytest.raises(SeedError):
        load_seed(write_seed(items))


def test_rejects_invalid_json(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("[{", encoding="utf-8")
    with pytest.raises(SeedError):
        load_seed(str(path))


def test_rejects_missing_file(tmp_path):
    with pytest.raises(SeedError):
        load_seed(str(tmp_path / "missing.json"))


def test_seeded_app_continues_numbering(write_seed):
    path = write_seed([{"id": 0, "text": "a"}, {"id": 1, "text": "b"}])
    client = TestClient(create_app(Settings(seed_file=path, api_prefix="")))
    assert len(client.get("/todo").json()) == 2
    assert client.post("/todo", json={"text": "c"}).json()["id"] == 2


def test_create_app_fails_on_bad_seed(tmp_path):
    with pytest.raises(SeedError):
        create_app(Settings(seed_file=str(tmp_path / "missing.json")))


def test_app_metadata_comes_from_settings():
    app = create_app(Settings(project_name="Tareas", api_version="2.0.0", seed_file=""))
    assert app.title == "Tareas"
    assert app.version == "2.0.0"
    assert app.state.settings.project_name == "Tareas"


def test_setup_logging_leaves_root_logger_alone():
    root_handlers = list(logging.getLogger().handlers)
    logger = setup_logging("INFO")
    assert logger.name == "todo_api"
    assert logger.handlers
    assert logger.propagate is False
    assert logging.getLogger().handlers == root_handlers


def test_setup_logging_is_idempotent():
    logger = setup_logging("DEBUG")
    handlers = list(logger.handlers)
    try:
        setup_logging("WARNING", "ignored.log")
        assert logger.handlers == handlers
        assert logger.level == logging.WARNING
    finally:
        setup_logging("INFO")
