"""Conversation and Message records."""

from __future__ import annotations

import uuid
from dataclasses import asdict, dataclass, field
from datetime import UTC, datetime
from typing import Any

ROLES = ("user", "assistant", "system")
MESSAGE_TYPES = ("chat", "debug")


def make_id() -> str:
    """Generate a new record ID."""
    return uuid.uuid4().hex


def utc_now() -> str:
    return datetime.now(UTC).isoformat()


@dataclass(frozen=True)
class Conversation:
    """A named container for an ordered sequence of messages.

    Attributes:
        id: Unique identifier (UUID hex).
        title: Optional display title.
        created_at: ISO 8601 UTC timestamp.
    """

    id: str = field(default_factory=make_id)
    title: str | None = None
    created_at: str = field(default_factory=utc_now)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    def to_row(self) -> tuple:
        """Serialize to a tuple matching the ``conversations`` column order."""
        return (self.id, self.title, self.created_at)

    @classmethod
    def from_row(cls, row: tuple) -> Conversation:
        return cls(id=row[0], title=row[1], created_at=row[2])

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Conversation:
        return cls(id=data["id"], title=data.get("title"), created_at=data["created_at"])


@dataclass(frozen=True)
class Message:
    """A single turn within a conversation.

    ``message_type`` separates user-visible chat history (``"chat"``) from
    the diagnostic log (``"debug"``). ``conversation_id`` is a reference,
    not ownership: it is not checked against existing conversations.
    """

    conversation_id: str | None
    role: str
    content: str
    message_type: str = "chat"
    id: str = field(default_factory=make_id)
    created_at: str = field(default_factory=utc_now)

    def __post_init__(self) -> None:
        if self.role not in ROLES:
            msg = f"Invalid role {self.role!r}. Must be one of: {', '.join(ROLES)}"
            raise ValueError(msg)
        if self.message_type not in MESSAGE_TYPES:
            msg = (
                f"Invalid message type {self.message_type!r}. "
                f"Must be one of: {', '.join(MESSAGE_TYPES)}"
            )
            raise ValueError(msg)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "conversation_id": self.conversation_id,
            "role": self.role,
            "content": self.content,
            "created_at": self.created_at,
            "message_type": self.message_type,
        }

    def to_row(self) -> tuple:
        """Serialize to a tuple matching the ``messages`` column order."""
        return (
            self.id,
            self.conversation_id,
            self.role,
            self.content,
            self.created_at,
            self.message_type,
        )

    @classmethod
    def from_row(cls, row: tuple) -> Message:
        """Deserialize from a SQLite row tuple."""
        return cls(
            id=row[0],
            conversation_id=row[1],
            role=row[2],
            content=row[3] if row[3] is not None else "",
            created_at=row[4],
            message_type=row[5] or "chat",
        )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Message:
        return cls(
            id=data["id"],
            conversation_id=data.get("conversation_id"),
            role=data["role"],
            content=data.get("content") or "",
            created_at=data["created_at"],
            message_type=data.get("message_type", "chat"),
        )
