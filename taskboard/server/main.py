"""Main entry point for TaskBoard Server."""

import uvicorn
from loguru import logger

from taskboard.server.api.app import create_app
from taskboard.server.config.logging import setup_logging
from taskboard.server.config.settings import get_settings

setup_logging()

# Create app instance for uvicorn
app = create_app()


def main() -> None:
    """Run the server until interrupted."""
    settings = get_settings()

    config = uvicorn.Config(
        app,
        host=settings.API_HOST,
        port=settings.API_PORT,
        log_level="debug" if settings.API_DEBUG else "info",
    )
    server = uvicorn.Server(config)

    try:
        server.run()
    except KeyboardInterrupt:
        logger.info("KeyboardInterrupt caught; shutting down")


if __name__ == "__main__":
    main()
