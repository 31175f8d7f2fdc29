"""Error kinds raised by index synchronization.

Each error carries the root-relative ``path`` it concerns. Callers decide the
blast radius: create failures abort a cycle, the rest only skip a branch.
"""

from __future__ import annotations


class IndexKeeperError(Exception):
    """Base class for index synchronization failures."""

    def __init__(self, path: str, message: str = "") -> None:
        self.path = path
        super().__init__(message or path)


class CreateError(IndexKeeperError):
    """A placeholder index file could not be created."""


class ResolutionError(IndexKeeperError):
    """No owning directory (or index file) could be resolved for a path."""


class WriteError(IndexKeeperError):
    """Index content could not be overwritten."""


class DeleteError(IndexKeeperError):
    """A stale index file could not be removed."""


__all__ = [
    "IndexKeeperError",
    "CreateError",
    "ResolutionError",
    "WriteError",
    "DeleteError",
]
