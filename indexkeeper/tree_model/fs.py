"""Filesystem-backed storage collaborator for index synchronization.

Every operation addresses entries by root-relative ``/`` paths and converts
``OSError`` into the domain error kinds the core scopes its failures by.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from ..errors import CreateError, DeleteError, WriteError
from ..paths import SEPARATOR, join_path
from .types import FileEntry, FolderEntry, TreeEntry

logger = logging.getLogger(__name__)


class LocalTreeStorage:
    """Storage contract implemented over a real directory tree.

    Hidden entries (names starting with ``.``) are invisible: they are never
    listed and ``get_entry`` reports them absent.
    """

    def __init__(self, root: Path) -> None:
        self.root = root.resolve()

    def _native(self, path: str) -> Path:
        if not path:
            return self.root
        return self.root.joinpath(*path.split(SEPARATOR))

    def relative_path(self, native: Path) -> str | None:
        """Map an absolute filesystem path back to a root-relative path.

        Returns ``None`` for paths outside the root.
        """
        try:
            relative = native.resolve().relative_to(self.root) if native.is_absolute() else native
        except (OSError, ValueError):
            return None
        return SEPARATOR.join(relative.parts)

    def root_name(self) -> str:
        """Return the name of the tree root directory."""
        return self.root.name

    def get_entry(self, path: str) -> TreeEntry | None:
        """Return the entry at ``path`` or ``None`` when absent."""
        if any(segment.startswith(".") for segment in path.split(SEPARATOR) if segment):
            return None
        native = self._native(path)
        try:
            if native.is_dir() and not native.is_symlink():
                return FolderEntry(path=path)
            if native.exists():
                return FileEntry(path=path)
        except OSError:
            return None
        return None

    def list_children(self, folder: FolderEntry) -> list[TreeEntry]:
        """List visible children of ``folder``, folders first, then by name.

        An unreadable directory lists as empty.
        """
        children: list[TreeEntry] = []
        try:
            with os.scandir(self._native(folder.path)) as entries:
                for child in entries:
                    name = child.name
                    if name.startswith("."):
                        continue
                    try:
                        is_dir = child.is_dir(follow_symlinks=False)
                    except OSError:
                        is_dir = False
                    child_path = join_path(folder.path, name)
                    children.append(FolderEntry(path=child_path) if is_dir else FileEntry(path=child_path))
        except OSError as exc:
            logger.warning("cannot list %r: %s", folder.path, exc)
            return []

        children.sort(key=lambda item: (not isinstance(item, FolderEntry), item.name.lower(), item.name))
        return children

    def create_empty_file(self, path: str) -> FileEntry:
        """Create an empty file at ``path``; fails if anything already exists."""
        try:
            with open(self._native(path), "x", encoding="utf-8"):
                pass
        except OSError as exc:
            raise CreateError(path, f"cannot create {path!r}: {exc}") from exc
        return FileEntry(path=path)

    def overwrite_content(self, entry: FileEntry, text: str) -> None:
        """Replace the full content of ``entry`` with ``text``."""
        try:
            # newline="" keeps os.linesep separators byte-exact on every platform
            with open(self._native(entry.path), "w", encoding="utf-8", newline="") as handle:
                handle.write(text)
        except OSError as exc:
            raise WriteError(entry.path, f"cannot write {entry.path!r}: {exc}") from exc

    def delete_entry(self, entry: TreeEntry) -> None:
        """Remove a file entry from the tree."""
        try:
            self._native(entry.path).unlink()
        except OSError as exc:
            raise DeleteError(entry.path, f"cannot delete {entry.path!r}: {exc}") from exc


__all__ = ["LocalTreeStorage"]
