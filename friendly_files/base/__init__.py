"""Low-level shared utilities for friendly-files."""

from .logging import get_logger, setup_logging, FriendlyLogger

__all__ = [
    "get_logger",
    "setup_logging",
    "FriendlyLogger",
]
