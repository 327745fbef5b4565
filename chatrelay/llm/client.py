"""Async OpenAI-compatible chat completion client."""

from __future__ import annotations

import logging
from typing import Any

import openai
from openai import AsyncOpenAI

from chatrelay.config import settings
from chatrelay.llm.errors import translate_provider_error
from chatrelay.llm.prompt import build_messages

logger = logging.getLogger(__name__)

_client: AsyncOpenAI | None = None


def _get_client() -> AsyncOpenAI:
    """Return a lazily-initialised AsyncOpenAI singleton."""
    global _client  # noqa: PLW0603
    if _client is None:
        _client = AsyncOpenAI(
            base_url=settings.llm_endpoint,
            api_key=settings.github_token,
            max_retries=0,
        )
    return _client


async def complete(
    text: str,
    images: list[str] | None = None,
    *,
    model: str,
    max_tokens: int | None = None,
) -> dict[str, Any]:
    """Single chat completion without tools, streaming or retries.

    Raises ``ProviderError`` for rate-limit, payload-size and bad-request
    responses. Any other provider failure propagates unchanged.
    """
    client = _get_client()
    messages = build_messages(text, images)
    try:
        response = await client.chat.completions.create(
            model=model,
            messages=messages,
            max_tokens=max_tokens or settings.max_output_tokens,
        )
    except openai.APIStatusError as exc:
        translated = translate_provider_error(exc)
        if translated is None:
            raise
        raise translated from exc

    content = response.choices[0].message.content
    logger.info(
        "Completion: model=%s, images=%d, reply_chars=%d",
        model,
        len(images or []),
        len(content or ""),
    )
    return {"role": "assistant", "content": content}
