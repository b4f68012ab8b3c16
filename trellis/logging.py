"""Centralized logging configuration for Trellis."""

import logging
import sys
from contextlib import contextmanager
from typing import Iterator

# Flag to track if we've already set up the package logger
_ROOT_LOGGER_CONFIGURED = False

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_root_logger(
    level: int | str = logging.WARNING,
    format_string: str | None = None,
    handler: logging.Handler | None = None,
) -> None:
    """Attach a single handler to the ``trellis`` logger.

    Only the first call has any effect. Output goes to stderr so command
    results on stdout stay machine readable.

    Args:
        level: Logging level, as a number or a name such as ``"INFO"``.
        format_string: Custom format string (optional).
        handler: Custom handler (optional, defaults to a stderr StreamHandler).
    """
    global _ROOT_LOGGER_CONFIGURED

    if _ROOT_LOGGER_CONFIGURED:
        return

    root_logger = logging.getLogger("trellis")
    root_logger.setLevel(_to_level(level))
    root_logger.handlers.clear()

    if handler is None:
        handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))
    root_logger.addHandler(handler)

    # Let records reach the root logger so pytest's caplog sees them
    root_logger.propagate = True

    _ROOT_LOGGER_CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the ``trellis`` hierarchy.

    Args:
        name: Logger name (typically ``__name__`` of the calling module).

    Returns:
        Logger inheriting the package handler and level.
    """
    setup_root_logger()
    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    return logger


def set_global_log_level(level: int | str) -> None:
    """Set the level for all Trellis loggers."""
    setup_root_logger()
    level = _to_level(level)
    root_logger = logging.getLogger("trellis")
    root_logger.setLevel(level)
    for handler in root_logger.handlers:
        handler.setLevel(level)


@contextmanager
def verbose_logging(enabled: bool = True) -> Iterator[None]:
    """Let INFO records from Trellis reach stderr for the duration of a block.

    The ``trellis`` logger and its handlers are lowered to INFO and restored
    on exit. Nothing changes when ``enabled`` is false or when INFO records
    already get through, so an explicit DEBUG level is kept.
    """
    setup_root_logger()
    root_logger = logging.getLogger("trellis")
    if not enabled or root_logger.getEffectiveLevel() <= logging.INFO:
        yield
        return

    saved_level = root_logger.level
    saved_handlers = [(handler, handler.level) for handler in root_logger.handlers]
    root_logger.setLevel(logging.INFO)
    for handler, level in saved_handlers:
        if level > logging.INFO:
            handler.setLevel(logging.INFO)
    try:
        yield
    finally:
        root_logger.setLevel(saved_level)
        for handler, level in saved_handlers:
            handler.setLevel(level)


def reset_logging() -> None:
    """Reset logging configuration (mainly for testing)."""
    global _ROOT_LOGGER_CONFIGURED
    _ROOT_LOGGER_CONFIGURED = False

    root_logger = logging.getLogger("trellis")
    root_logger.handlers.clear()
    root_logger.setLevel(logging.NOTSET)


def _to_level(level: int | str) -> int:
    if isinstance(level, str):
        return getattr(logging, level.upper(), logging.WARNING)
    return level
