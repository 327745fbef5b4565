"""Translate provider API failures into client-facing errors."""

from __future__ import annotations

import logging
import math
from typing import Any

import openai

logger = logging.getLogger(__name__)

RATE_LIMIT_EXCEEDED = "RATE_LIMIT_EXCEEDED"
PAYLOAD_TOO_LARGE = "PAYLOAD_TOO_LARGE"
BAD_REQUEST = "BAD_REQUEST"

PAYLOAD_TOO_LARGE_MESSAGE = "File size is too large. Maximum allowed size is 1MB per file."
BAD_REQUEST_MESSAGE = "Invalid request. Please check your inputs."


class ProviderError(Exception):
    """An upstream failure the client should see with a specific status."""

    def __init__(
        self, status: int, code: str, message: str, retry_after: int | None = None
    ) -> None:
        super().__init__(f"{status} {code}: {message}")
        self.status = status
        self.code = code
        self.message = message
        self.retry_after = retry_after

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"error": self.message}
        if self.retry_after is not None:
            payload["retryAfter"] = self.retry_after
        payload["code"] = self.code
        return payload


def format_wait_time(seconds: int) -> str:
    """Human-readable wait estimate, e.g. ``"1 hours and 1 minutes"``."""
    if seconds >= 3600:
        hours = seconds // 3600
        minutes = (seconds % 3600) // 60
        return f"{hours} hours and {minutes} minutes"
    return f"{math.ceil(seconds / 60)} minutes"


def rate_limit_message(seconds: int) -> str:
    return (
        f"Rate limit exceeded. Please wait approximately "
        f"{format_wait_time(seconds)} before trying again."
    )


def parse_retry_after(headers: Any) -> int:
    """Read the ``retry-after`` header as whole seconds (0 if missing)."""
    if headers is None:
        return 0
    raw = headers.get("retry-after")
    try:
        return max(int(raw), 0)
    except (TypeError, ValueError):
        return 0


def translate_provider_error(exc: openai.APIStatusError) -> ProviderError | None:
    """Map a provider status error to a ProviderError, or None if unmapped."""
    status = exc.status_code
    if status == 429:
        retry_after = parse_retry_after(getattr(exc.response, "headers", None))
        logger.warning("Provider rate limit hit, retry after %ds", retry_after)
        return ProviderError(
            status=429,
            code=RATE_LIMIT_EXCEEDED,
            message=rate_limit_message(retry_after),
            retry_after=retry_after,
        )
    if status == 413:
        logger.warning("Provider rejected payload as too large")
        return ProviderError(status=413, code=PAYLOAD_TOO_LARGE, message=PAYLOAD_TOO_LARGE_MESSAGE)
    if status == 400:
        logger.warning("Provider rejected request: %s", exc.message)
        return ProviderError(status=400, code=BAD_REQUEST, message=BAD_REQUEST_MESSAGE)
    return None
