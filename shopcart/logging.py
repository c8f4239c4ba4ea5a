"""
Centralized logging configuration for shopcart.

Usage:
    from shopcart.logging import get_logger
    logger = get_logger(__name__)

    logger.info("Item added")
    logger.error("Checkout failed", exc_info=True)

Logs go to stderr so they never interleave with the menu output on stdout.
"""

import logging
import os
import sys
from functools import cache

# Default format for logs
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_FORMAT_SIMPLE = "%(levelname)s - %(name)s - %(message)s"

DEFAULT_LOG_LEVEL = "WARNING"


def _get_log_level(level_name: str | None = None) -> int:
    """Resolve a level name (or LOG_LEVEL from the environment) to a logging level."""
    if level_name is None:
        level_name = os.environ.get("LOG_LEVEL", DEFAULT_LOG_LEVEL)
    return getattr(logging, level_name.upper(), logging.WARNING)


def _configure_root_logger() -> None:
    """Configure root logger with appropriate handlers."""
    root = logging.getLogger()

    # Only configure if no handlers exist
    if root.handlers:
        return

    root.setLevel(_get_log_level())

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(_get_log_level())

    # Simple format when asked for terse output, detailed otherwise
    simple = os.environ.get("LOG_FORMAT", "").lower() == "simple"
    handler.setFormatter(logging.Formatter(LOG_FORMAT_SIMPLE if simple else LOG_FORMAT))

    root.addHandler(handler)

    # asyncio debug chatter is noise for the jobs demo
    logging.getLogger("asyncio").setLevel(logging.WARNING)


# Configure once on module import
_configure_root_logger()


def set_log_level(level_name: str) -> None:
    """Override the root level (and its handlers) at runtime, e.g. from a CLI flag."""
    level = _get_log_level(level_name)
    root = logging.getLogger()
    root.setLevel(level)
    for handler in root.handlers:
        handler.setLevel(level)


@cache
def get_logger(name: str) -> logging.Logger:
    """
    Get or create a logger with the given name.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured logger instance
    """
    return logging.getLogger(name)


def _escape_log_injection(value: str) -> str:
    """
    Escape characters that could be used for log injection attacks (CWE-117).

    Args:
        value: String to escape

    Returns:
        Escaped string safe for logging
    """
    return (
        value.replace("\n", "\\n")
        .replace("\r", "\\r")
        .replace("\t", "\\t")
        .replace("\x00", "")  # Remove null bytes
    )


def sanitize_string_for_logging(value: str | None, max_length: int = 50) -> str:
    """
    Sanitize console input for safe logging.

    Escapes log injection characters and truncates to max_length.

    Args:
        value: String value to sanitize (can be None)
        max_length: Maximum length to keep (default: 50)

    Returns:
        Sanitized string or "N/A" if None/empty
    """
    if not value:
        return "N/A"
    safe_value = _escape_log_injection(str(value))
    if len(safe_value) <= max_length:
        return safe_value
    return safe_value[:max_length] + "..."


# Convenience exports
__all__ = [
    "LOG_FORMAT",
    "LOG_FORMAT_SIMPLE",
    "get_logger",
    "set_log_level",
    "sanitize_string_for_logging",
]
