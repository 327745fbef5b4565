"""Conversation persistence with swappable backends."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chatrelay.storage.base import ConversationStore, StorageError
from chatrelay.storage.json_file import JsonFileStore
from chatrelay.storage.memory import MemoryStore
from chatrelay.storage.models import Conversation, Message
from chatrelay.storage.sqlite import SqliteStore

if TYPE_CHECKING:
    from chatrelay.config import Settings

BACKENDS = ("sqlite", "json", "memory")


def create_store(settings: Settings) -> ConversationStore:
    """Build the store named by ``settings.storage_backend``."""
    backend = settings.storage_backend.strip().lower()
    if backend == "sqlite":
        return SqliteStore(db_path=settings.database_path)
    if backend == "json":
        return JsonFileStore(data_dir=settings.data_dir)
    if backend == "memory":
        return MemoryStore()
    valid = ", ".join(BACKENDS)
    msg = f"Unknown storage backend {settings.storage_backend!r}. Must be one of: {valid}"
    raise ValueError(msg)


__all__ = [
    "BACKENDS",
    "Conversation",
    "ConversationStore",
    "JsonFileStore",
    "MemoryStore",
    "Message",
    "SqliteStore",
    "StorageError",
    "create_store",
]
