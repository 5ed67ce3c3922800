"""Exceptions raised while constructing search-path values."""

from __future__ import annotations

from pathlib import Path

from py_app_dev.core.exceptions import UserNotificationException


class PathHelperError(UserNotificationException):
    """Base class for path_helper failures reported to the user."""


class InvalidSegmentError(PathHelperError, ValueError):
    """Raised when a missing (``None``) segment is appended to a path."""


class FragmentDirectoryError(PathHelperError):
    """Raised when a fragment directory cannot be opened for listing."""

    def __init__(self, directory: Path, reason: str) -> None:
        super().__init__(f"{directory}: {reason}")
        self.directory = directory
        self.reason = reason
