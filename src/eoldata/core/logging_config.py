#!/usr/bin/env python3
"""
Logging configuration for eoldata.

All loggers live under the ``eoldata`` hierarchy; the console handler is
installed once on the root ``eoldata`` logger and writes to stderr.
"""

import logging
import sys
from typing import Union

__all__ = ["setup_logging", "get_logger", "ROOT_LOGGER_NAME"]

ROOT_LOGGER_NAME = "eoldata"
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def setup_logging(level: Union[str, int] = "INFO") -> logging.Logger:
    """
    Configure the ``eoldata`` logger (idempotent).

    Args:
        level: logging level name (e.g. "DEBUG") or numeric level.

    Raises:
        ValueError: if the level name is unknown.
    """
    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(_coerce_level(level))

    if not any(getattr(h, "_eoldata_console", False) for h in root.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._eoldata_console = True  # type: ignore[attr-defined]
        root.addHandler(handler)
    return root


def get_logger(name: str) -> logging.Logger:
    """Return the ``eoldata.<name>`` logger."""
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def _coerce_level(level: Union[str, int]) -> int:
    if isinstance(level, int):
        return level
    value = logging.getLevelName(str(level).strip().upper())
    if not isinstance(value, int):
        raise ValueError(f"Unknown logging level: {level!r}")
    return value
