"""Console logging via loguru."""

import sys

from loguru import logger

CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<level>{message}</level>"
)


def configure_logging(log_level: str = "INFO") -> None:
    """Replace loguru's default handler with a coloured stderr handler at *log_level*."""
    logger.remove()
    logger.add(sys.stderr, level=log_level, format=CONSOLE_FORMAT, colorize=True)
