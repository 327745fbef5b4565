"""Shared test fixtures."""

from pathlib import Path

import pytest

from chatrelay.storage import ConversationStore, JsonFileStore, MemoryStore, SqliteStore


def _make_store(backend: str, tmp_path: Path) -> ConversationStore:
    if backend == "sqlite":
        return SqliteStore(db_path=tmp_path / "test.db")
    if backend == "json":
        return JsonFileStore(data_dir=tmp_path / "data")
    return MemoryStore()


@pytest.fixture(params=["sqlite", "json", "memory"])
def store(request: pytest.FixtureRequest, tmp_path: Path) -> ConversationStore:
    """One store per backend, each isolated in a temporary directory."""
    return _make_store(request.param, tmp_path)


@pytest.fixture
def memory_store() -> MemoryStore:
    return MemoryStore()
