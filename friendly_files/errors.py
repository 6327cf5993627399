"""Exception types raised by friendly-files."""

from __future__ import annotations

from pathlib import Path


class FriendlyFilesError(Exception):
    """Base class for errors raised by this package."""


class IOFailure(FriendlyFilesError):
    """
    A filesystem operation failed.

    The platform error is kept on ``cause`` (and chained as ``__cause__``)
    without further classification: "not found" and "permission denied" look
    the same here.
    """

    def __init__(self, operation: str, path: Path | str, cause: OSError) -> None:
        self.operation = operation
        self.path = Path(path)
        self.cause = cause
        super().__init__(f"{operation} failed for {self.path}: {cause}")
