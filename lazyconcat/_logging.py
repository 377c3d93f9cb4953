"""
Logging configuration for lazyconcat.

Every module logs under the "lazyconcat" namespace. Nothing is printed
unless the user configures logging (standard logging config, or the
lazyconcat.verbose() shortcut).

Usage:
    from lazyconcat._logging import get_logger

    logger = get_logger(__name__)
    logger.debug("Slot 0: sequence (RANDOM_ACCESS, borrowed, sized=True)")
"""

import logging
from typing import Optional, Union

from lazyconcat._constants import DEFAULT_LOG_FORMAT, LOGGER_NAMESPACE

VerboseLevel = Union[bool, str]


def get_logger(name: str) -> logging.Logger:
    """Get logger for lazyconcat module."""
    if not name.startswith(LOGGER_NAMESPACE):
        name = LOGGER_NAMESPACE if name == "__main__" else f"{LOGGER_NAMESPACE}.{name}"

    return logging.getLogger(name)


def setup_basic_logging(
    level: int = logging.INFO, format: Optional[str] = None
) -> None:
    """
    Attach a single stderr handler to the lazyconcat logger.

    Repeated calls reuse the handler and only change its level and format,
    so switching from verbose(True) to verbose("debug") shows debug records.
    """
    logger = logging.getLogger(LOGGER_NAMESPACE)
    logger.setLevel(level)

    if logger.handlers:
        handler = logger.handlers[0]
    else:
        handler = logging.StreamHandler()
        logger.addHandler(handler)

    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(format or DEFAULT_LOG_FORMAT))

    # Avoid duplicate records through the root logger
    logger.propagate = False


def enable_debug_logging() -> None:
    """Enable debug logging for all lazyconcat modules."""
    setup_basic_logging(level=logging.DEBUG)


def disable_logging() -> None:
    """Disable all lazyconcat logging."""
    logging.getLogger(LOGGER_NAMESPACE).setLevel(logging.CRITICAL + 1)


def verbose_to_level(level: VerboseLevel) -> Optional[int]:
    """
    Map a verbose() argument to a logging level (None means disable).

    Raises:
        ValueError: If level is not True, False, "info" or "debug"
    """
    if level is False:
        return None
    if level is True or level == "info":
        return logging.INFO
    if level == "debug":
        return logging.DEBUG
    raise ValueError(
        f"Invalid verbose level: {level}. Use True, 'info', 'debug', or False."
    )
