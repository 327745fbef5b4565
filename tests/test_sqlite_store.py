"""Tests for SqliteStore on-disk behaviour."""

from pathlib import Path

import aiosqlite
import pytest

from chatrelay.storage import SqliteStore, StorageError


@pytest.fixture
def sqlite_store(tmp_path: Path) -> SqliteStore:
    return SqliteStore(db_path=tmp_path / "nested" / "chat.db")


async def test_creates_parent_dirs_and_tables(sqlite_store: SqliteStore, tmp_path: Path) -> None:
    await sqlite_store.list_conversations()
    db_path = tmp_path / "nested" / "chat.db"
    assert db_path.exists()

    async with aiosqlite.connect(db_path) as db:
        cursor = await db.execute("SELECT name FROM sqlite_master WHERE type = 'table'")
        tables = {row[0] for row in await cursor.fetchall()}
    assert {"conversations", "messages"} <= tables


async def test_data_survives_new_instance(tmp_path: Path) -> None:
    db_path = tmp_path / "chat.db"
    first = SqliteStore(db_path=db_path)
    conv = await first.create_conversation("persisted")
    await first.append_message(conv.id, "user", "hello")

    second = SqliteStore(db_path=db_path)
    assert [c.id for c in await second.list_conversations()] == [conv.id]
    assert [m.content for m in await second.list_messages(conv.id)] == ["hello"]


async def test_message_type_column(sqlite_store: SqliteStore, tmp_path: Path) -> None:
    await sqlite_store.append_message("c1", "system", "dbg", message_type="debug")

    async with aiosqlite.connect(tmp_path / "nested" / "chat.db") as db:
        cursor = await db.execute("SELECT role, message_type FROM messages")
        rows = await cursor.fetchall()
    assert rows == [("system", "debug")]


async def test_unopenable_path_raises_storage_error(tmp_path: Path) -> None:
    blocker = tmp_path / "file"
    blocker.write_text("not a directory")
    store = SqliteStore(db_path=blocker / "chat.db")
    with pytest.raises(StorageError):
        await store.list_conversations()


async def test_corrupt_database_raises_storage_error(tmp_path: Path) -> None:
    db_path = tmp_path / "chat.db"
    db_path.write_bytes(b"this is not a sqlite database" * 100)
    store = SqliteStore(db_path=db_path)
    with pytest.raises(StorageError):
        await store.list_conversations()
