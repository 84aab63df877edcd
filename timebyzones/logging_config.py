"""Logging setup: a single stderr handler.

stdout carries the report line (and the MCP stdio transport), so log output
always goes to stderr. Call ``setup_logging()`` once at startup; modules use
``logging.getLogger(__name__)``.
"""

import logging
import sys

LOG_FMT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"
DATE_FMT = "%H:%M:%S"
LOG_LEVEL_ENV = "TIME_BY_ZONES_LOG_LEVEL"

logger = logging.getLogger(__name__)


def level_from_name(name: str | None, default: int = logging.WARNING) -> int:
    """Map a level name like 'debug' to its logging constant, or ``default`` if unknown."""
    if not name:
        return default
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else default


def setup_logging(level: int = logging.WARNING, verbose: bool = False) -> None:
    """Configure the root logger with one stderr handler.

    Args:
        level: Minimum log level.
        verbose: If True, overrides ``level`` with DEBUG.
    """
    if verbose:
        level = logging.DEBUG

    root = logging.getLogger()
    root.setLevel(level)
    root.handlers.clear()

    # pythonw.exe sets sys.stderr to None
    if sys.stderr is not None:
        handler = logging.StreamHandler(sys.stderr)
        handler.setLevel(level)
        handler.setFormatter(logging.Formatter(LOG_FMT, datefmt=DATE_FMT))
        root.addHandler(handler)

    logger.debug("Logging initialized (level=%s)", logging.getLevelName(level))
