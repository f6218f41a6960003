"""Utility modules for the Dog CEO client."""

from dogceo.utils.logging import get_logger, setup_logging

__all__ = [
    "get_logger",
    "setup_logging",
]
