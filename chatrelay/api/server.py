"""Build the aiohttp application serving the chat API."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from aiohttp import web

from chatrelay.api.keys import MODEL_MANAGER_KEY, STORE_KEY
from chatrelay.api.middleware import access_log_middleware, error_middleware
from chatrelay.api.routes import setup_routes
from chatrelay.config import settings
from chatrelay.llm.models import ModelManager

if TYPE_CHECKING:
    from chatrelay.storage import ConversationStore

logger = logging.getLogger(__name__)


async def _close_store(app: web.Application) -> None:
    await app[STORE_KEY].close()
    logger.info("Store closed")


def create_web_app(
    store: ConversationStore,
    model_manager: ModelManager | None = None,
    *,
    client_max_size: int | None = None,
) -> web.Application:
    """Build the aiohttp Application with routes and per-app state."""
    app = web.Application(
        middlewares=[access_log_middleware, error_middleware],
        client_max_size=client_max_size or settings.max_body_bytes,
    )
    app[STORE_KEY] = store
    app[MODEL_MANAGER_KEY] = model_manager or ModelManager(settings.default_model)
    setup_routes(app)
    app.on_cleanup.append(_close_store)
    logger.info("Chat API ready (storage=%s, model=%s)", store.name, app[MODEL_MANAGER_KEY].current)
    return app
