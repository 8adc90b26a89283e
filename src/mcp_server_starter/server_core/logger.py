"""Logging utilities for the MCP server."""

import logging
import sys
from typing import TextIO

_LOGGER_NAME = "mcp_server_starter"


def get_logger(name: str | None = None) -> logging.Logger:
    """Get a logger instance for the server.

    Module names that already live under the package namespace are used as-is,
    so ``get_logger(__name__)`` and ``get_logger("registry")`` both resolve
    below the package root logger.

    Args:
        name: Optional sub-logger name. If None, returns the root server logger.

    Returns:
        The requested logger.
    """
    if not name:
        return logging.getLogger(_LOGGER_NAME)
    if name == _LOGGER_NAME or name.startswith(f"{_LOGGER_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{_LOGGER_NAME}.{name}")


def setup_logging(
    level: int | str = logging.INFO,
    format_str: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    stream: TextIO | None = None,
) -> None:
    """Setup default logging configuration for the server.

    This adds a StreamHandler to the server's root logger. The handler writes to
    stderr by default because stdout carries the MCP stdio transport.

    Args:
        level: Logging level, either numeric or a level name such as "DEBUG".
        format_str: Log format string.
        stream: Output stream. Defaults to ``sys.stderr``.
    """
    logger = logging.getLogger(_LOGGER_NAME)

    # Avoid adding multiple handlers if called multiple times
    if any(not isinstance(h, logging.NullHandler) for h in logger.handlers):
        return

    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter(format_str))
    logger.addHandler(handler)
    logger.setLevel(level)


# Set default NullHandler to avoid "No handler found" warnings
logging.getLogger(_LOGGER_NAME).addHandler(logging.NullHandler())
