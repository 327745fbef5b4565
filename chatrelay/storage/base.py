"""Storage interface shared by every persistence backend."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from chatrelay.storage.models import Conversation, Message


class StorageError(Exception):
    """Raised when the backing medium cannot be read or written."""


class ConversationStore(ABC):
    """Abstract base for conversation/message persistence.

    Implementations must keep messages in creation order and return
    conversations newest first. Nothing here validates that a message's
    ``conversation_id`` refers to an existing conversation.
    """

    name: str = ""

    @abstractmethod
    async def list_conversations(self) -> list[Conversation]:
        """Return all conversations, newest first."""

    @abstractmethod
    async def create_conversation(self, title: str | None = None) -> Conversation:
        """Create and persist a new conversation."""

    @abstractmethod
    async def delete_conversation(self, conversation_id: str) -> None:
        """Delete a conversation and all of its messages. Unknown IDs are a no-op."""

    @abstractmethod
    async def list_messages(
        self, conversation_id: str, message_type: str = "chat"
    ) -> list[Message]:
        """Return a conversation's messages of one type, oldest first."""

    @abstractmethod
    async def append_message(
        self,
        conversation_id: str | None,
        role: str,
        content: str,
        message_type: str = "chat",
    ) -> Message:
        """Create and persist a new message."""

    async def close(self) -> None:  # noqa: B027
        """Release backend resources."""
