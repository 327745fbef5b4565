"""SqliteStore: aiosqlite CRUD for conversations and messages."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import aiosqlite

from chatrelay.config import settings
from chatrelay.storage.base import ConversationStore, StorageError
from chatrelay.storage.models import Conversation, Message

if TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)

_CREATE_CONVERSATIONS = """
CREATE TABLE IF NOT EXISTS conversations (
    id TEXT PRIMARY KEY,
    title TEXT,
    created_at TEXT NOT NULL
)
"""

_CREATE_MESSAGES = """
CREATE TABLE IF NOT EXISTS messages (
    id TEXT PRIMARY KEY,
    conversation_id TEXT,
    role TEXT NOT NULL,
    content TEXT,
    created_at TEXT NOT NULL,
    message_type TEXT NOT NULL DEFAULT 'chat',
    FOREIGN KEY (conversation_id) REFERENCES conversations(id)
)
"""


class SqliteStore(ConversationStore):
    """Persists conversations and messages in SQLite.

    Each operation opens its own connection and closes it afterwards.
    Foreign keys are declared but not enforced (SQLite's default), so
    messages may reference conversations that do not exist.
    Pass an explicit *db_path* for test isolation (e.g. ``tmp_path / "test.db"``).
    """

    name = "sqlite"

    def __init__(self, db_path: Path | None = None) -> None:
        self._db_path = db_path or settings.database_path
        self._initialised = False

    # -- Internal helpers ------------------------------------------------------

    async def _connect(self) -> aiosqlite.Connection:
        try:
            self._db_path.parent.mkdir(parents=True, exist_ok=True)
            db = await aiosqlite.connect(str(self._db_path))
        except (OSError, aiosqlite.Error) as exc:
            msg = f"Cannot open database {self._db_path}"
            raise StorageError(msg) from exc
        if not self._initialised:
            try:
                await db.execute(_CREATE_CONVERSATIONS)
                await db.execute(_CREATE_MESSAGES)
                await db.commit()
            except aiosqlite.Error as exc:
                await db.close()
                msg = "Cannot initialise database schema"
                raise StorageError(msg) from exc
            self._initialised = True
        return db

    # -- Conversations ---------------------------------------------------------

    async def list_conversations(self) -> list[Conversation]:
        db = await self._connect()
        try:
            cursor = await db.execute(
                "SELECT id, title, created_at FROM conversations "
                "ORDER BY created_at DESC, rowid DESC"
            )
            rows = await cursor.fetchall()
            return [Conversation.from_row(row) for row in rows]
        except aiosqlite.Error as exc:
            msg = "Failed to list conversations"
            raise StorageError(msg) from exc
        finally:
            await db.close()

    async def create_conversation(self, title: str | None = None) -> Conversation:
        conversation = Conversation(title=title)
        db = await self._connect()
        try:
            await db.execute(
                "INSERT INTO conversations (id, title, created_at) VALUES (?, ?, ?)",
                conversation.to_row(),
            )
            await db.commit()
            logger.info("Created conversation: %s", conversation.id)
            return conversation
        except aiosqlite.Error as exc:
            msg = "Failed to create conversation"
            raise StorageError(msg) from exc
        finally:
            await db.close()

    async def delete_conversation(self, conversation_id: str) -> None:
        db = await self._connect()
        try:
            await db.execute(
                "DELETE FROM messages WHERE conversation_id = ?", (conversation_id,)
            )
            cursor = await db.execute(
                "DELETE FROM conversations WHERE id = ?", (conversation_id,)
            )
            await db.commit()
            if cursor.rowcount > 0:
                logger.info("Deleted conversation: %s", conversation_id)
        except aiosqlite.Error as exc:
            msg = "Failed to delete conversation"
            raise StorageError(msg) from exc
        finally:
            await db.close()

    # -- Messages --------------------------------------------------------------

    async def list_messages(
        self, conversation_id: str, message_type: str = "chat"
    ) -> list[Message]:
        db = await self._connect()
        try:
            cursor = await db.execute(
                """
                SELECT id, conversation_id, role, content, created_at, message_type
                FROM messages
                WHERE conversation_id = ? AND message_type = ?
                ORDER BY created_at ASC, rowid ASC
                """,
                (conversation_id, message_type),
            )
            rows = await cursor.fetchall()
            return [Message.from_row(row) for row in rows]
        except aiosqlite.Error as exc:
            msg = "Failed to list messages"
            raise StorageError(msg) from exc
        finally:
            await db.close()

    async def append_message(
        self,
        conversation_id: str | None,
        role: str,
        content: str,
        message_type: str = "chat",
    ) -> Message:
        message = Message(
            conversation_id=conversation_id,
            role=role,
            content=content,
            message_type=message_type,
        )
        db = await self._connect()
        try:
            await db.execute(
                """
                INSERT INTO messages
                    (id, conversation_id, role, content, created_at, message_type)
                VALUES (?, ?, ?, ?, ?, ?)
                """,
                message.to_row(),
            )
            await db.commit()
            return message
        except aiosqlite.Error as exc:
            msg = "Failed to append message"
            raise StorageError(msg) from exc
        finally:
            await db.close()
