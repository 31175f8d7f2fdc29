"""Index body generation.

An index lists every entry of its directory as a ``[[path]]`` link, followed
by one back-link to the parent directory's index. The Root Index has no
back-link.
"""

from __future__ import annotations

import logging
import os

from ..errors import WriteError
from ..paths import parent_of
from ..tree_model import FileEntry, FolderEntry, TreeEntry
from .locator import IndexLocator

logger = logging.getLogger(__name__)


def format_link(path: str) -> str:
    """Return the bracketed link reference for ``path``."""
    return f"[[{path}]]"


def shares_scope(entry: TreeEntry, index: FileEntry) -> bool:
    """Return whether ``entry`` sits in the same directory as ``index``."""
    return parent_of(entry.path) == parent_of(index.path)


class IndexGenerator:
    """Rewrite index files from the current children of their directory."""

    def __init__(self, storage, locator: IndexLocator, line_separator: str = os.linesep) -> None:
        self.storage = storage
        self.locator = locator
        self.line_separator = line_separator

    def build_links(self, index: FileEntry, folder: FolderEntry) -> list[str]:
        """Return the ordered link lines for ``index`` inside ``folder``."""
        links = [
            format_link(child.path)
            for child in self.storage.list_children(folder)
            if shares_scope(child, index)
        ]
        if not self.locator.is_root_index(index.path):
            links.append(format_link(self.locator.index_path_of_folder(parent_of(folder.path))))
        return links

    def build_body(self, index: FileEntry) -> str | None:
        """Return the full body for ``index``, or ``None`` when it is orphaned."""
        folder = self.storage.get_entry(parent_of(index.path))
        if not isinstance(folder, FolderEntry):
            return None
        return self.line_separator.join(self.build_links(index, folder))

    def regenerate(self, index: FileEntry) -> bool:
        """Overwrite ``index`` with freshly generated content.

        Returns ``False`` when nothing was written: the index is orphaned, or
        storage rejected the write (logged, never raised).
        """
        body = self.build_body(index)
        if body is None:
            logger.debug("skipping orphaned index %r", index.path)
            return False
        try:
            self.storage.overwrite_content(index, body)
        except WriteError as exc:
            logger.warning("failed to write index %r: %s", index.path, exc)
            return False
        logger.debug("regenerated index %r", index.path)
        return True


__all__ = ["format_link", "shares_scope", "IndexGenerator"]
