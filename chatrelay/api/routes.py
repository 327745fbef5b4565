"""HTTP handlers for conversations, chat turns and model selection.

Each handler parses its input, calls the store and/or the model gateway,
and shapes the JSON response. Storage failures are logged and reported
without detail; provider failures keep their status and error code.
"""

from __future__ import annotations

import json
import logging
from typing import TypeVar

from aiohttp import web
from pydantic import BaseModel, ValidationError

from chatrelay.api.keys import MODEL_MANAGER_KEY, STORE_KEY
from chatrelay.api.schemas import ChatRequest, ConversationCreate, DebugRequest, ModelSelect
from chatrelay.llm.client import complete
from chatrelay.llm.errors import BAD_REQUEST, BAD_REQUEST_MESSAGE, ProviderError
from chatrelay.storage import StorageError

logger = logging.getLogger(__name__)

_BodyT = TypeVar("_BodyT", bound=BaseModel)


def _error(message: str, status: int) -> web.Response:
    return web.json_response({"error": message}, status=status)


async def _parse_body(request: web.Request, schema: type[_BodyT]) -> _BodyT:
    """Validate the JSON body against *schema*; an empty body counts as ``{}``."""
    try:
        payload = await request.json() if request.body_exists else None
        return schema.model_validate(payload or {})
    except (ValueError, ValidationError) as exc:
        logger.warning("Bad request body on %s: %s", request.path, exc)
        raise web.HTTPBadRequest(
            text=json.dumps({"error": BAD_REQUEST_MESSAGE, "code": BAD_REQUEST}),
            content_type="application/json",
        ) from exc


# -- Conversations -------------------------------------------------------------


async def _handle_list_conversations(request: web.Request) -> web.Response:
    store = request.app[STORE_KEY]
    try:
        conversations = await store.list_conversations()
    except StorageError:
        logger.exception("Error fetching conversations")
        return _error("Failed to fetch conversations", 500)
    return web.json_response([c.to_dict() for c in conversations])


async def _handle_create_conversation(request: web.Request) -> web.Response:
    body = await _parse_body(request, ConversationCreate)
    store = request.app[STORE_KEY]
    try:
        conversation = await store.create_conversation(body.title)
    except StorageError:
        logger.exception("Error creating conversation")
        return _error("Failed to create conversation", 500)
    return web.json_response(conversation.to_dict())


async def _handle_delete_conversation(request: web.Request) -> web.Response:
    conversation_id = request.match_info["id"]
    store = request.app[STORE_KEY]
    try:
        await store.delete_conversation(conversation_id)
    except StorageError:
        logger.exception("Error deleting conversation %s", conversation_id)
        return _error("Failed to delete conversation", 500)
    return web.json_response({"success": True})


async def _handle_list_messages(request: web.Request) -> web.Response:
    conversation_id = request.match_info["id"]
    store = request.app[STORE_KEY]
    try:
        messages = await store.list_messages(conversation_id, "chat")
    except StorageError:
        logger.exception("Error fetching messages for %s", conversation_id)
        return _error("Failed to fetch messages", 500)
    return web.json_response([m.to_dict() for m in messages])


async def _handle_list_debug_messages(request: web.Request) -> web.Response:
    conversation_id = request.match_info["id"]
    store = request.app[STORE_KEY]
    try:
        messages = await store.list_messages(conversation_id, "debug")
    except StorageError:
        logger.exception("Error fetching debug messages for %s", conversation_id)
        return _error("Failed to fetch debug messages", 500)
    return web.json_response([m.to_dict() for m in messages])


# -- Chat ----------------------------------------------------------------------


async def _handle_chat(request: web.Request) -> web.Response:
    """Send one turn to the model, then store the user message and the reply."""
    body = await _parse_body(request, ChatRequest)
    store = request.app[STORE_KEY]
    model = request.app[MODEL_MANAGER_KEY].current

    try:
        reply = await complete(body.text, body.images, model=model)
    except ProviderError as exc:
        return web.json_response(exc.to_payload(), status=exc.status)
    content = reply["content"] or ""

    try:
        await store.append_message(body.conversation_id, "user", body.text)
        await store.append_message(body.conversation_id, "assistant", content)
    except StorageError:
        logger.exception("Error saving chat turn for %s", body.conversation_id)
        return _error("Failed to save messages", 500)

    return web.json_response(
        {"message": content, "conversationId": body.conversation_id}
    )


async def _handle_chat_debug(request: web.Request) -> web.Response:
    body = await _parse_body(request, DebugRequest)
    store = request.app[STORE_KEY]
    try:
        await store.append_message(
            body.conversation_id, "system", body.message or "", message_type="debug"
        )
    except StorageError:
        logger.exception("Error saving debug message")
        return _error("Failed to save debug message", 500)
    return web.json_response({"success": True})


# -- Models --------------------------------------------------------------------


async def _handle_list_models(request: web.Request) -> web.Response:
    return web.json_response(request.app[MODEL_MANAGER_KEY].available())


async def _handle_select_model(request: web.Request) -> web.Response:
    body = await _parse_body(request, ModelSelect)
    manager = request.app[MODEL_MANAGER_KEY]
    model_id = manager.select(body.model) if body.model else None
    if model_id is None:
        logger.warning("Rejected model selection: %r", body.model)
        return _error("Invalid model selection", 400)
    return web.json_response({"success": True, "currentModel": model_id})


# -- Health --------------------------------------------------------------------


async def _health(request: web.Request) -> web.Response:
    """Liveness check."""
    return web.json_response({"status": "ok"})


def setup_routes(app: web.Application) -> None:
    """Register the API handlers on *app*."""
    app.router.add_get("/health", _health)
    app.router.add_get("/api/conversations", _handle_list_conversations)
    app.router.add_post("/api/conversations", _handle_create_conversation)
    app.router.add_delete("/api/conversations/{id}", _handle_delete_conversation)
    app.router.add_get("/api/conversations/{id}/messages", _handle_list_messages)
    app.router.add_get("/api/conversations/{id}/debug", _handle_list_debug_messages)
    app.router.add_post("/api/chat", _handle_chat)
    app.router.add_post("/api/chat/debug", _handle_chat_debug)
    app.router.add_get("/api/models", _handle_list_models)
    app.router.add_post("/api/models/select", _handle_select_model)
