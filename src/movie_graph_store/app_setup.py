import sys
from typing import Optional

from loguru import logger

from .config import settings

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)


def configure_logging(level: Optional[str] = None) -> int:
    """
    Replace loguru's default handler with a single stderr sink.

    Uses ``settings.app.log_level`` unless ``level`` is given and returns the
    id of the new handler.
    """
    level = (level or settings.app.log_level).upper()
    logger.remove()
    handler_id = logger.add(sys.stderr, level=level, format=LOG_FORMAT, colorize=True)
    logger.info("Logger configured with level: {}", level)
    return handler_id
