"""Pure helpers for root-relative tree paths.

Paths are plain strings joined with ``/``; the tree root is ``""``.
"""

from __future__ import annotations

SEPARATOR = "/"


def parent_of(path: str) -> str:
    """Return ``path`` without its final segment, or ``""`` at top level."""
    segments = path.split(SEPARATOR)
    segments.pop()
    return SEPARATOR.join(segments)


def name_of(path: str) -> str:
    """Return the final segment of ``path``."""
    return path.rsplit(SEPARATOR, 1)[-1]


def join_path(parent: str, name: str) -> str:
    """Join a child name onto ``parent``; the root parent yields ``name``."""
    if not parent:
        return name
    return f"{parent}{SEPARATOR}{name}"


__all__ = ["SEPARATOR", "parent_of", "name_of", "join_path"]
