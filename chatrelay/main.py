"""chatrelay entry point."""

import logging

from aiohttp import web

from chatrelay.config import settings

logging.basicConfig(
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
)
logger = logging.getLogger(__name__)


def main() -> None:
    """Start the HTTP server with the configured storage backend."""
    from chatrelay.api.server import create_web_app
    from chatrelay.storage import create_store

    if not settings.github_token:
        logger.warning("GITHUB_TOKEN is empty, chat requests will be rejected upstream")

    store = create_store(settings)
    app = create_web_app(store)
    logger.info("Starting chatrelay on http://%s:%d", settings.host, settings.port)
    web.run_app(app, host=settings.host, port=settings.port, access_log=None)


if __name__ == "__main__":
    main()
