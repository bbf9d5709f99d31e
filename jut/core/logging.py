"""
Logging configuration
"""
import sys

from loguru import logger

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level>"
)


def setup_logging(level: str = "WARNING"):
    """Configure loguru logging

    Diagnostics always go to stderr; stdout carries decoded output only.
    """

    # Remove default logger
    logger.remove()

    logger.add(
        sys.stderr,
        format=LOG_FORMAT,
        level=level,
        colorize=None,
    )

    logger.debug(f"Logging configured: level={level}")
