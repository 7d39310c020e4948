"""Logging configuration for TaskBoard Server."""

import sys
from typing import Optional

from loguru import logger

from .settings import Settings, get_settings

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>"
)


def setup_logging(settings: Optional[Settings] = None) -> None:
    """Replace loguru's default sink with the configured ones.

    Console output goes to stderr at ``LOG_LEVEL``. When ``LOG_FILE`` is set,
    a rotating file sink is added as well (10 MB per file, 5 files kept).
    """
    settings = settings or get_settings()

    logger.remove()
    logger.add(sys.stderr, level=settings.LOG_LEVEL, format=LOG_FORMAT)

    if settings.LOG_FILE:
        logger.add(
            settings.LOG_FILE,
            level=settings.LOG_LEVEL,
            format=LOG_FORMAT,
            rotation="10 MB",
            retention=5,
            encoding="utf-8",
        )
