"""Package-wide logging configuration."""

import logging
import sys

LOG_FORMAT = "%(asctime)s | %(name)s | %(levelname)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(level: str | int = logging.WARNING) -> logging.Logger:
    """Attach a stderr handler to the ``tradeledger`` logger.

    Calling it again changes the level and points the handler at the
    current ``sys.stderr``.

    Args:
        level: Level name ("DEBUG", "info", ...) or logging constant

    Returns:
        The package logger
    """
    if isinstance(level, str):
        level_name = level.strip().upper()
        level = logging.getLevelName(level_name)
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level '{level_name}'")

    logger = logging.getLogger("tradeledger")
    logger.setLevel(level)
    for handler in logger.handlers:
        if isinstance(handler, logging.StreamHandler):
            handler.setStream(sys.stderr)
            break
    else:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(handler)
    return logger
