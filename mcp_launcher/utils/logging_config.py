"""Logging configuration for mcp-launcher."""

import logging

from rich.logging import RichHandler

from mcp_launcher.utils.display import console


ROOT_LOGGER_NAME = "mcp_launcher"


def setup_logging(level: str = "WARNING") -> logging.Logger:
    """Set up the launcher's logger.

    Records go to the stderr console through a single RichHandler. Calling
    this again replaces the handler instead of stacking another one.

    Args:
        level: Logging level name

    Returns:
        The configured package logger
    """
    numeric_level = getattr(logging, level.upper(), logging.WARNING)

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(numeric_level)
    logger.handlers.clear()

    handler = RichHandler(
        console=console,
        level=numeric_level,
        show_path=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)

    # Keep records out of any root handlers the host process installed
    logger.propagate = False

    logger.debug(f"Logging initialized - Level: {level.upper()}")
    return logger
