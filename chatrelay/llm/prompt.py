"""Prompt assembly for chat completions."""

from __future__ import annotations

from typing import Any

SYSTEM_PROMPT = """\
You are an advanced AI assistant specialized in programming and mathematics. \
Your capabilities include:

1. Programming:
   - Code analysis and debugging
   - Algorithm optimization
   - Best practices and design patterns
   - Multiple programming languages expertise
   - Code review and suggestions

2. Mathematics:
   - Advanced mathematical problem-solving
   - Step-by-step solution explanations
   - Mathematical proofs
   - Statistical analysis
   - Numerical methods and computations

3. Image Analysis:
   - Code screenshot analysis
   - Mathematical equation recognition
   - Diagram and flowchart interpretation
   - Whiteboard content analysis
   - Mathematical graph interpretation

Provide detailed, accurate solutions with explanations. When dealing with code, \
include comments and best practices. For mathematical problems, show step-by-step \
solutions with clear reasoning."""

DEFAULT_IMAGE_PROMPT = "What do you see in these images?"


def build_user_content(text: str, images: list[str]) -> str | list[dict[str, Any]]:
    """Return plain text, or a text part plus one image part per attachment.

    Each entry in *images* is passed through untouched as the image URL
    (typically a ``data:image/...;base64,`` URL from the browser).
    """
    if not images:
        return text
    parts: list[dict[str, Any]] = [{"type": "text", "text": text or DEFAULT_IMAGE_PROMPT}]
    parts.extend({"type": "image_url", "image_url": {"url": data}} for data in images)
    return parts


def build_messages(text: str, images: list[str] | None = None) -> list[dict[str, Any]]:
    """System instruction followed by a single user turn."""
    return [
        {"role": "system", "content": SYSTEM_PROMPT},
        {"role": "user", "content": build_user_content(text, images or [])},
    ]
