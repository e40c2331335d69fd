"""Logging helpers for wgraph.

Every module asks for its logger through `get_logger(__name__)` so that all
library output lives under the ``wgraph`` namespace and can be tuned in one
place.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO

_DEFAULT_LEVEL = logging.WARNING
_DEFAULT_FORMAT = "[%(levelname)s] %(name)s: %(message)s"

# Loggers handed out so far, keyed by full dotted name
_loggers: dict[str, logging.Logger] = {}


def _coerce_level(level: int | str) -> int:
    if isinstance(level, str):
        return getattr(logging, level.upper(), logging.WARNING)
    return level


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return the cached logger for a module.

    Args:
        name: Usually `__name__` of the caller. Names outside the ``wgraph``
            namespace are nested under it; None gives the package logger.

    Returns:
        A logger writing ``[LEVEL] name: message`` lines to stderr.

    Example:
        >>> from wgraph.logging import get_logger
        >>> logger = get_logger(__name__)
        >>> logger.debug("relaxed %d edges", 12)
    """
    if name is None:
        name = "wgraph"

    logger_name = name if name == "wgraph" or name.startswith("wgraph.") else f"wgraph.{name}"

    if logger_name in _loggers:
        return _loggers[logger_name]

    logger = logging.getLogger(logger_name)

    if not logger.handlers:
        logger.setLevel(_DEFAULT_LEVEL)
        handler = logging.StreamHandler(sys.stderr)
        handler.setLevel(_DEFAULT_LEVEL)
        handler.setFormatter(logging.Formatter(_DEFAULT_FORMAT))
        logger.addHandler(handler)
        logger.propagate = False

    _loggers[logger_name] = logger
    return logger


def set_log_level(level: int | str) -> None:
    """Set the level of every wgraph logger, including ones created later.

    Args:
        level: A `logging` level constant or its name ('DEBUG', 'INFO', ...).
    """
    global _DEFAULT_LEVEL
    level = _coerce_level(level)

    for logger in _loggers.values():
        logger.setLevel(level)
        for handler in logger.handlers:
            handler.setLevel(level)

    _DEFAULT_LEVEL = level


def configure_logging(
    level: int | str = logging.WARNING,
    format_string: Optional[str] = None,
    stream: Optional[TextIO] = None,
) -> None:
    """Replace the handlers of all existing wgraph loggers.

    Intended to be called once by an application at startup.

    Args:
        level: Logging level (default: WARNING).
        format_string: Record format; defaults to ``[LEVEL] name: message``.
        stream: Destination stream (default: sys.stderr).
    """
    global _DEFAULT_LEVEL
    level = _coerce_level(level)
    formatter = logging.Formatter(format_string or _DEFAULT_FORMAT)

    for logger in _loggers.values():
        logger.setLevel(level)
        for handler in logger.handlers[:]:
            logger.removeHandler(handler)
        handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    _DEFAULT_LEVEL = level
