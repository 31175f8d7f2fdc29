"""Tree-change events delivered by the host's notification mechanism."""

from __future__ import annotations

from dataclasses import dataclass

CREATE = "create"
DELETE = "delete"
RENAME = "rename"
EVENT_KINDS = frozenset({CREATE, DELETE, RENAME})


@dataclass(frozen=True)
class TreeEvent:
    """One create/delete/rename notification with root-relative paths.

    ``old_path`` is set only for renames.
    """

    kind: str
    path: str
    old_path: str | None = None

    def __post_init__(self) -> None:
        if self.kind not in EVENT_KINDS:
            raise ValueError(f"unknown event kind: {self.kind!r}")
        if self.kind == RENAME and self.old_path is None:
            raise ValueError("rename events require old_path")

    def scopes(self) -> list[str]:
        """Return the paths to synchronize, old scope first for renames."""
        if self.kind == RENAME and self.old_path is not None:
            return [self.old_path, self.path]
        return [self.path]


__all__ = ["CREATE", "DELETE", "RENAME", "EVENT_KINDS", "TreeEvent"]
