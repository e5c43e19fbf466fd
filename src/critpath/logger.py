"""Logging for critpath.

One named logger with two extra levels so that ``-v`` flags map onto what
the engine is doing rather than onto generic INFO/DEBUG:

- changes (``-v``): edges added or removed, project duration
- checks (``-vv``): cycle checks, duplicate edges, skipped references
- debug (``-vvv``): per-task forward and backward pass values
"""

from __future__ import annotations

import logging
import sys
from typing import Any, TextIO

LOGGER_NAME = "critpath"

CHANGES_LEVEL = 25  # Between INFO and WARNING
CHECKS_LEVEL = 15  # Between DEBUG and INFO

logging.addLevelName(CHANGES_LEVEL, "CHANGES")
logging.addLevelName(CHECKS_LEVEL, "CHECKS")

# Indexed by verbosity; anything above the last entry is clamped to it
_VERBOSITY_LEVELS = (logging.ERROR, CHANGES_LEVEL, CHECKS_LEVEL, logging.DEBUG)


class CritpathLogger(logging.Logger):
    """Logger with ``changes()`` and ``checks()`` alongside the standard methods."""

    def changes(self, msg: str, *args: Any, **kwargs: Any) -> None:
        if self.isEnabledFor(CHANGES_LEVEL):
            self._log(CHANGES_LEVEL, msg, args, **kwargs)

    def checks(self, msg: str, *args: Any, **kwargs: Any) -> None:
        if self.isEnabledFor(CHECKS_LEVEL):
            self._log(CHECKS_LEVEL, msg, args, **kwargs)


def get_logger() -> CritpathLogger:
    """Return the shared critpath logger."""
    logging.setLoggerClass(CritpathLogger)
    logger = logging.getLogger(LOGGER_NAME)
    assert isinstance(logger, CritpathLogger)
    return logger


def level_for_verbosity(verbosity: int) -> int:
    """Map a ``-v`` count to a logging level."""
    if verbosity <= 0:
        return logging.ERROR
    return _VERBOSITY_LEVELS[min(verbosity, len(_VERBOSITY_LEVELS) - 1)]


def setup_logger(verbosity: int, stream: TextIO | None = None) -> None:
    """(Re)configure the critpath logger.

    Args:
        verbosity: 0=errors only, 1=changes, 2=checks, 3 or more=debug
        stream: Output stream, sys.stderr when omitted
    """
    logger = get_logger()
    logger.handlers.clear()
    logger.setLevel(level_for_verbosity(verbosity))

    # Bare messages; the level is implied by the verbosity the user asked for
    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.propagate = False


def reset_logger() -> None:
    """Drop handlers and return to errors-only."""
    logger = get_logger()
    logger.handlers.clear()
    logger.setLevel(logging.ERROR)


def checks_enabled() -> bool:
    return get_logger().isEnabledFor(CHECKS_LEVEL)


def debug_enabled() -> bool:
    return get_logger().isEnabledFor(logging.DEBUG)
