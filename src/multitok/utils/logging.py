"""Logging utilities.

Purpose:
    Centralize logging configuration for the package.

Key responsibilities:
    - Provide a helper returning loggers under the ``multitok`` namespace.
    - Allow the CLI to switch verbosity once at start-up.

Notes/Edge cases:
    - Configuration is idempotent: repeated calls adjust the level of the single
      handler installed on the package logger instead of stacking handlers.
    - Library code only obtains loggers; it never configures handlers itself.

Dependencies:
    - Python `logging` module.
"""

from __future__ import annotations

import logging

__all__ = ["ROOT_LOGGER", "configure_logging", "get_logger"]

ROOT_LOGGER = "multitok"
_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"
_HANDLER_FLAG = "_multitok_handler"


def get_logger(name: str) -> logging.Logger:
    """Return a logger for ``name`` nested under the package logger."""

    if name == ROOT_LOGGER or name.startswith(ROOT_LOGGER + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")


def configure_logging(level: str | int = "WARNING") -> logging.Logger:
    """Attach a stderr handler to the package logger and set ``level``."""

    logger = logging.getLogger(ROOT_LOGGER)
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            raise ValueError("unknown log level")
    handler = next((h for h in logger.handlers if getattr(h, _HANDLER_FLAG, False)), None)
    if handler is None:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_FORMAT))
        setattr(handler, _HANDLER_FLAG, True)
        logger.addHandler(handler)
    logger.setLevel(level)
    handler.setLevel(level)
    return logger
