"""Logging setup for lotto649.

Modules call ``get_logger(__name__)``; the CLI calls
``configure_root_logger`` once. Logs go to stderr so stdout carries only
tickets.
"""

from __future__ import annotations

import logging
import sys
from typing import IO, Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_LOGGER_CACHE: dict[str, logging.Logger] = {}


def verbosity_to_level(verbosity: int) -> int:
    """Map a ``-v`` count to a logging level."""
    if verbosity <= 0:
        return logging.WARNING
    if verbosity == 1:
        return logging.INFO
    return logging.DEBUG


def configure_root_logger(level: int = logging.WARNING, stream: Optional[IO[str]] = None) -> None:
    """Configure the root logger once; later calls only adjust levels."""
    logging.getLogger("lotto649").setLevel(level)

    # If root already has handlers, avoid duplicating them
    root = logging.getLogger()
    if root.handlers:
        root.setLevel(level)
        return

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
        stream=stream or sys.stderr,
    )


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a cached logger (``__main__`` when no name is given)."""
    if name is None:
        name = "__main__"

    if name in _LOGGER_CACHE:
        return _LOGGER_CACHE[name]

    logger = logging.getLogger(name)
    _LOGGER_CACHE[name] = logger
    return logger
