"""Logging configuration for the Dog CEO client."""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

from dogceo.config import get_settings

# Log output goes to stderr so it never mixes with program output
console = Console(stderr=True)

# Logger cache
_loggers: dict[str, logging.Logger] = {}


def setup_logging(level: Optional[str] = None) -> None:
    """
    Set up logging with rich formatting.

    The library never calls this itself; applications that want readable
    client logs call it once at startup.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
            Defaults to the configured log_level.
    """
    if level is None:
        level = get_settings().log_level
    log_level = getattr(logging, level.upper(), logging.INFO)

    logging.basicConfig(
        level=log_level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[
            RichHandler(
                console=console,
                rich_tracebacks=True,
                show_path=False,
            )
        ],
    )

    # Request lines are already logged by dogceo.api at DEBUG
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger instance with the given name.

    Args:
        name: Logger name. If None, returns the package logger.

    Returns:
        Logger instance
    """
    if name is None:
        name = "dogceo"

    if name not in _loggers:
        _loggers[name] = logging.getLogger(name)

    return _loggers[name]
