"""Logging setup for the GPT-5 MCP server.

stdout carries the MCP stdio transport, so every handler writes to stderr.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
}

ROOT_LOGGER = "gpt5_mcp"


def setup_logging(level: str = "INFO", verbose: int = 0, quiet: bool = False) -> logging.Logger:
    """
    Configure the ``gpt5_mcp`` logger.

    Args:
        level: Base log level (DEBUG, INFO, WARNING, ERROR)
        verbose: Verbosity increment (1 = INFO, 2+ = DEBUG)
        quiet: If True, only show errors

    Returns:
        Configured logger instance
    """
    if quiet:
        effective_level = logging.ERROR
    elif verbose == 1:
        effective_level = logging.INFO
    elif verbose >= 2:
        effective_level = logging.DEBUG
    else:
        effective_level = LEVELS.get(level.upper(), logging.INFO)

    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(effective_level)
    logger.propagate = False
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(effective_level)

    if effective_level <= logging.DEBUG:
        formatter = logging.Formatter(
            "[%(asctime)s] %(levelname)-8s [%(name)s] %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    else:
        formatter = logging.Formatter("%(levelname)-8s %(message)s")

    handler.setFormatter(formatter)
    logger.addHandler(handler)

    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    if name:
        return logging.getLogger(f"{ROOT_LOGGER}.{name}")
    return logging.getLogger(ROOT_LOGGER)
