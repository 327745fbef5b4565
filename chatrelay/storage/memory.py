"""MemoryStore: process-local lists, lost on restart."""

from __future__ import annotations

import logging

from chatrelay.storage.base import ConversationStore
from chatrelay.storage.models import Conversation, Message

logger = logging.getLogger(__name__)


class MemoryStore(ConversationStore):
    """Keeps conversations and messages in two in-process lists."""

    name = "memory"

    def __init__(self) -> None:
        self._conversations: list[Conversation] = []
        self._messages: list[Message] = []

    async def list_conversations(self) -> list[Conversation]:
        return list(reversed(self._conversations))

    async def create_conversation(self, title: str | None = None) -> Conversation:
        conversation = Conversation(title=title)
        self._conversations.append(conversation)
        logger.info("Created conversation: %s", conversation.id)
        return conversation

    async def delete_conversation(self, conversation_id: str) -> None:
        self._messages = [m for m in self._messages if m.conversation_id != conversation_id]
        self._conversations = [c for c in self._conversations if c.id != conversation_id]
        logger.info("Deleted conversation: %s", conversation_id)

    async def list_messages(
        self, conversation_id: str, message_type: str = "chat"
    ) -> list[Message]:
        return [
            m
            for m in self._messages
            if m.conversation_id == conversation_id and m.message_type == message_type
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
        self._messages.append(message)
        return message
