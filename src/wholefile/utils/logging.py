"""Logging utilities.

Purpose:
    Centralize logging configuration for the package.

Key responsibilities:
    - Provide helper to obtain loggers under the ``wholefile`` namespace.
    - Install a single stderr handler for command line use.

Public contracts:
    - ``get_logger(name)``: return a child of the package logger.
    - ``configure_logging(level)``: attach the package handler and set the level.

Notes/Edge cases:
    - ``configure_logging`` is idempotent: there is never more than one package
      handler, and it always writes to the current ``sys.stderr``.
    - The library itself never configures handlers on import.

Dependencies:
    - Python ``logging`` module.
"""

from __future__ import annotations

import logging
import sys

ROOT_LOGGER_NAME = "wholefile"
_HANDLER_NAME = "wholefile-stderr"
_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


def get_logger(name: str) -> logging.Logger:
    """Return a logger for ``name`` nested under the package logger."""

    if name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def configure_logging(level: int | str = logging.WARNING) -> logging.Logger:
    """Attach a stderr handler to the package logger and set ``level``."""

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
    logger.setLevel(level)
    # The stream of an earlier handler may be closed by now; replace it
    # without flushing.
    for existing in [h for h in logger.handlers if h.get_name() == _HANDLER_NAME]:
        logger.removeHandler(existing)
    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter(_FORMAT))
    logger.addHandler(handler)
    return logger


__all__ = ["ROOT_LOGGER_NAME", "get_logger", "configure_logging"]
