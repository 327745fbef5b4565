"""Model manager for runtime model switching."""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)

# Friendly name → provider model ID
AVAILABLE_MODELS: dict[str, str] = {
    "o1": "o1",
    "gpt-4o-mini": "gpt-4o-mini",
    "o1-preview": "o1-preview",
    "gpt-4o": "gpt-4o",
}

DEFAULT_MODEL = "gpt-4o"


class ModelManager:
    """Tracks which model new chat turns are sent to.

    One instance is created per application and stored on it, so tests and
    parallel apps never share selection state.
    """

    def __init__(self, default: str = DEFAULT_MODEL) -> None:
        if default not in AVAILABLE_MODELS:
            logger.warning("Unknown default model %r, falling back to %s", default, DEFAULT_MODEL)
            default = DEFAULT_MODEL
        self._current = AVAILABLE_MODELS[default]
        logger.info("Model: %s", self._current)

    @property
    def current(self) -> str:
        return self._current

    @staticmethod
    def available() -> list[str]:
        return list(AVAILABLE_MODELS)

    def select(self, name: str) -> str | None:
        """Switch the active model. Returns the model ID, or None if *name* is unknown."""
        model_id = AVAILABLE_MODELS.get(name)
        if model_id:
            self._current = model_id
            logger.info("Model → %s", model_id)
        return model_id
