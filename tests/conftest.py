# tests/conftest.py

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from taskmatrix.main import app
from taskmatrix.store.kv import JsonFileKeyValueStore, MemoryKeyValueStore
from taskmatrix.store.tasks import TaskStore, get_task_store


@pytest.fixture()
def kv() -> MemoryKeyValueStore:
    return MemoryKeyValueStore()


@pytest.fixture()
def store(kv: MemoryKeyValueStore) -> TaskStore:
    return TaskStore(kv)


@pytest.fixture()
def storage_path(tmp_path: Path) -> Path:
    return tmp_path / "board" / "tasks.json"


@pytest.fixture()
def file_store(storage_path: Path) -> TaskStore:
    """TaskStore persisted to a JSON file under tmp_path."""
    return TaskStore(JsonFileKeyValueStore(storage_path))


@pytest.fixture()
def client(store: TaskStore) -> Iterator[TestClient]:
    """
    HTTP client wired to the in-memory store.

    Used without a context manager so the lifespan hook (which touches the
    configured storage file) never runs.
    """
    app.dependency_overrides[get_task_store] = lambda: store
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
