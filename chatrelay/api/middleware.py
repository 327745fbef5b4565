"""aiohttp middlewares: access logging and the generic failure path."""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING

from aiohttp import web

if TYPE_CHECKING:
    from aiohttp.typedefs import Handler

logger = logging.getLogger(__name__)


@web.middleware
async def access_log_middleware(request: web.Request, handler: Handler) -> web.StreamResponse:
    """Log method, path, status and latency. Bodies are not logged (images are large)."""
    start = time.monotonic()
    status = 500
    try:
        response = await handler(request)
        status = response.status
        return response
    except web.HTTPException as exc:
        status = exc.status
        raise
    finally:
        elapsed_ms = (time.monotonic() - start) * 1000
        logger.info("%s %s -> %d (%.0fms)", request.method, request.path, status, elapsed_ms)


@web.middleware
async def error_middleware(request: web.Request, handler: Handler) -> web.StreamResponse:
    """Turn unhandled exceptions into a bare 500 JSON response."""
    try:
        return await handler(request)
    except web.HTTPException:
        raise
    except Exception:
        logger.exception("Unhandled error: %s %s", request.method, request.path)
        return web.json_response({"error": "Internal server error"}, status=500)
