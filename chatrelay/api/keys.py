"""Typed keys for state stored on the aiohttp application."""

from aiohttp import web

from chatrelay.llm.models import ModelManager
from chatrelay.storage import ConversationStore

STORE_KEY = web.AppKey("store", ConversationStore)
MODEL_MANAGER_KEY = web.AppKey("model_manager", ModelManager)
