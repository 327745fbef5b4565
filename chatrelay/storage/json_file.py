"""JsonFileStore: flat JSON documents, one top-level array per file.

Layout under ``data_dir``::

    conversations.json   [Conversation, ...]
    messages.json        [Message, ...]   (message_type == "chat")
    debug.json           [Message, ...]   (message_type == "debug")

Every operation is a whole-file read-modify-write. Writers hold a per-store
lock and replace the target atomically, so readers never see a partial
document. There is no atomicity across files: deleting a conversation
rewrites all three documents independently.
"""

from __future__ import annotations

import asyncio
import contextlib
import json
import logging
import os
import tempfile
from typing import TYPE_CHECKING, Any

from chatrelay.config import settings
from chatrelay.storage.base import ConversationStore, StorageError
from chatrelay.storage.models import Conversation, Message

if TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)

CONVERSATIONS_FILE = "conversations.json"
MESSAGES_FILE = "messages.json"
DEBUG_FILE = "debug.json"

_FILES_BY_TYPE = {"chat": MESSAGES_FILE, "debug": DEBUG_FILE}


class JsonFileStore(ConversationStore):
    """Persists conversations and messages as JSON arrays on disk.

    Pass an explicit *data_dir* for test isolation (e.g. ``tmp_path / "data"``).
    """

    name = "json"

    def __init__(self, data_dir: Path | None = None) -> None:
        self._data_dir = data_dir or settings.data_dir
        # Serializes read-modify-write cycles; reads rely on the atomic replace.
        self._write_lock = asyncio.Lock()

    # -- File helpers ----------------------------------------------------------

    def _read_sync(self, filename: str) -> list[dict[str, Any]]:
        path = self._data_dir / filename
        if not path.exists():
            return []
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            msg = f"Cannot read {path}"
            raise StorageError(msg) from exc
        if not isinstance(data, list):
            msg = f"Expected a JSON array in {path}"
            raise StorageError(msg)
        return data

    def _write_sync(self, filename: str, records: list[dict[str, Any]]) -> None:
        path = self._data_dir / filename
        try:
            self._data_dir.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                dir=self._data_dir, prefix=f".{filename}.", suffix=".tmp"
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    json.dump(records, f, indent=2)
                os.replace(tmp_name, path)
            except BaseException:
                with contextlib.suppress(OSError):
                    os.unlink(tmp_name)
                raise
        except OSError as exc:
            msg = f"Cannot write {path}"
            raise StorageError(msg) from exc

    async def _read(self, filename: str) -> list[dict[str, Any]]:
        return await asyncio.to_thread(self._read_sync, filename)

    async def _write(self, filename: str, records: list[dict[str, Any]]) -> None:
        await asyncio.to_thread(self._write_sync, filename, records)

    async def _append(self, filename: str, record: dict[str, Any]) -> None:
        async with self._write_lock:
            records = await self._read(filename)
            records.append(record)
            await self._write(filename, records)

    async def _remove_where(self, filename: str, key: str, value: str) -> None:
        async with self._write_lock:
            records = await self._read(filename)
            kept = [r for r in records if r.get(key) != value]
            if len(kept) != len(records):
                await self._write(filename, kept)

    # -- Conversations ---------------------------------------------------------

    async def list_conversations(self) -> list[Conversation]:
        records = await self._read(CONVERSATIONS_FILE)
        return [Conversation.from_dict(r) for r in reversed(records)]

    async def create_conversation(self, title: str | None = None) -> Conversation:
        conversation = Conversation(title=title)
        await self._append(CONVERSATIONS_FILE, conversation.to_dict())
        logger.info("Created conversation: %s", conversation.id)
        return conversation

    async def delete_conversation(self, conversation_id: str) -> None:
        await self._remove_where(CONVERSATIONS_FILE, "id", conversation_id)
        await self._remove_where(MESSAGES_FILE, "conversation_id", conversation_id)
        await self._remove_where(DEBUG_FILE, "conversation_id", conversation_id)
        logger.info("Deleted conversation: %s", conversation_id)

    # -- Messages --------------------------------------------------------------

    async def list_messages(
        self, conversation_id: str, message_type: str = "chat"
    ) -> list[Message]:
        records = await self._read(_file_for(message_type))
        return [
            Message.from_dict(r)
            for r in records
            if r.get("conversation_id") == conversation_id
        ]

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
        await self._append(_file_for(message_type), message.to_dict())
        return message


def _file_for(message_type: str) -> str:
    try:
        return _FILES_BY_TYPE[message_type]
    except KeyError:
        msg = f"Unknown message type: {message_type!r}"
        raise ValueError(msg) from None
