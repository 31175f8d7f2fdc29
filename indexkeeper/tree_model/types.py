"""Domain datatypes for entries of the indexed tree."""

from __future__ import annotations

from dataclasses import dataclass

from ..paths import name_of, parent_of


@dataclass(frozen=True)
class FileEntry:
    """Non-directory entry addressed by its root-relative path."""

    path: str

    @property
    def name(self) -> str:
        return name_of(self.path)

    @property
    def parent_path(self) -> str:
        return parent_of(self.path)


@dataclass(frozen=True)
class FolderEntry:
    """Directory entry; the tree root has ``path == ""``."""

    path: str

    @property
    def name(self) -> str:
        return name_of(self.path)

    @property
    def parent_path(self) -> str:
        return parent_of(self.path)

    @property
    def is_root(self) -> bool:
        return self.path == ""


TreeEntry = FolderEntry | FileEntry


__all__ = [
    "FileEntry",
    "FolderEntry",
    "TreeEntry",
]
