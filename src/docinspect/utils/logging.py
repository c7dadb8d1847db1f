"""Logging helpers for docinspect."""

from __future__ import annotations

import logging
import os

from ..config import LOG_LEVEL_ENV

_ROOT_NAME = "docinspect"
_CONFIGURED = False


def get_logger(name: str | None = None) -> logging.Logger:
    """Return the package logger, or a child logger named *name*."""

    if not name:
        return logging.getLogger(_ROOT_NAME)
    if name == _ROOT_NAME or name.startswith(_ROOT_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{_ROOT_NAME}.{name}")


def configure_logging(level: int | str | None = None) -> logging.Logger:
    """Attach a stream handler to the package logger once and set its level.

    When *level* is omitted the ``DOCINSPECT_LOG_LEVEL`` environment variable is
    consulted, falling back to ``WARNING``.
    """

    global _CONFIGURED
    logger = get_logger()
    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV, "WARNING")
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING
    logger.setLevel(level)
    if not _CONFIGURED:
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )
        logger.addHandler(handler)
        _CONFIGURED = True
    return logger
