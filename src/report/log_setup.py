"""
Logging configuration.
"""
import sys

from loguru import logger


def setup_logging(level: str = "WARNING") -> None:
    """
    Configure application logging.

    Replaces the default loguru handler with a single stderr sink so that
    the report on stdout stays clean.
    """
    logger.remove()

    logger.add(
        sys.stderr,
        level=level.upper(),
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
               "<level>{level: <8}</level> | "
               "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
               "<level>{message}</level>",
        colorize=True
    )

    logger.debug("Logging configured at level {}", level.upper())
