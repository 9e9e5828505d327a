"""Logging setup for command-line use. The library itself only emits records."""

import logging
import sys

PACKAGE_LOGGER = "burmese_transliterator"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _resolve_level(level: str | int) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    return resolved if isinstance(resolved, int) else logging.WARNING


def setup_logging(level: str | int = logging.WARNING) -> logging.Logger:
    """
    Attach a single stderr handler to the package logger.

    Calling this more than once updates the level and points the
    existing handler at the current ``sys.stderr``.
    """
    log_level = _resolve_level(level)

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(log_level)

    handler = next((h for h in logger.handlers if getattr(h, "name", None) == PACKAGE_LOGGER), None)
    if handler is None:
        handler = logging.StreamHandler(sys.stderr)
        handler.set_name(PACKAGE_LOGGER)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(handler)
    else:
        handler.setStream(sys.stderr)
    handler.setLevel(log_level)
    return logger
