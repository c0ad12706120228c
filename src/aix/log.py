"""Logging setup for the command line."""

from __future__ import annotations

import logging
import os

from rich.console import Console
from rich.logging import RichHandler

LOG_ENV_VAR = "AIX_LOG"

_VERBOSITY_LEVELS: dict[int, int] = {
    0: logging.WARNING,
    1: logging.INFO,
    2: logging.DEBUG,
}


def resolve_level(verbosity: int) -> int:
    """Map a ``-v`` count to a level. ``AIX_LOG`` wins when it names a valid level."""
    override = os.environ.get(LOG_ENV_VAR, "").strip().upper()
    if override:
        level = logging.getLevelName(override)
        if isinstance(level, int):
            return level
    return _VERBOSITY_LEVELS[min(max(verbosity, 0), 2)]


def setup_logging(verbosity: int = 0) -> logging.Logger:
    """Attach a Rich handler to the ``aix`` logger. Safe to call more than once."""
    logger = logging.getLogger("aix")
    logger.setLevel(resolve_level(verbosity))

    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        handler = RichHandler(
            console=Console(stderr=True),
            show_time=False,
            show_path=False,
            markup=False,
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)
        logger.propagate = False

    return logger
