"""Request body models for the JSON API."""

from pydantic import BaseModel, ConfigDict, Field


class _Body(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class ConversationCreate(_Body):
    title: str | None = None


class Attachment(_Body):
    """An uploaded image, usually a ``data:`` URL with a base64 payload."""

    data: str


class ChatRequest(_Body):
    message: str | None = None
    conversation_id: str | None = Field(default=None, alias="conversationId")
    files: list[Attachment] | None = None

    @property
    def text(self) -> str:
        return self.message or ""

    @property
    def images(self) -> list[str]:
        return [f.data for f in self.files or []]


class DebugRequest(_Body):
    message: str | None = None
    conversation_id: str | None = Field(default=None, alias="conversationId")


class ModelSelect(_Body):
    model: str | None = None
