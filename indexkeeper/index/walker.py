"""Depth-first walk applying an index action to every directory in scope.

A walk starting at a path first handles the index owning that path, then,
if the path is still an existing directory, that directory's own index and
every subdirectory below it. Each directory is visited once per walk.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from ..errors import ResolutionError
from ..folder_filter import is_in_allowed_folder
from ..settings import IndexSettings
from ..tree_model import FileEntry, FolderEntry
from .locator import IndexLocator

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class IndexAction:
    """Operation applied to each index file a walk reaches.

    ``create_missing`` actions get a placeholder created where an index is
    missing and only run for directories passing the folder filter; other
    actions see every index-named file that already exists, in any directory.
    """

    name: str
    apply: Callable[[FileEntry], object]
    create_missing: bool = False


class TreeWalker:
    """Walk directory subtrees of one storage and apply ``IndexAction``s."""

    def __init__(self, storage, locator: IndexLocator, settings: IndexSettings) -> None:
        self.storage = storage
        self.locator = locator
        self.settings = settings

    def is_eligible(self, index_path: str) -> bool:
        """Return whether an index may be generated at ``index_path``."""
        return is_in_allowed_folder(self.settings, index_path)

    def _apply(self, folder: FolderEntry, action: IndexAction, visited: list[str]) -> None:
        if not action.create_missing:
            for index in self.locator.index_files_in_folder(folder):
                action.apply(index)
                visited.append(index.path)
            return
        if not self.is_eligible(self.locator.index_path_of_folder(folder.path)):
            return
        index = self.locator.ensure_index_of_folder(folder)
        action.apply(index)
        visited.append(index.path)

    def _walk_folder(self, folder: FolderEntry, action: IndexAction, visited: list[str]) -> None:
        self._apply(folder, action, visited)
        for child in self.storage.list_children(folder):
            if not isinstance(child, FolderEntry):
                continue
            self._walk_folder(child, action, visited)

    def walk(self, start_path: str, action: IndexAction) -> list[str]:
        """Apply ``action`` across the scope of ``start_path``.

        ``""`` walks the whole tree from the root. Returns the index paths
        the action was applied to, in visiting order. ``CreateError`` from a
        placeholder creation propagates; a path whose owning directory is
        gone is logged and skipped.
        """
        visited: list[str] = []
        if not start_path:
            root = self.storage.get_entry("")
            if isinstance(root, FolderEntry):
                self._walk_folder(root, action, visited)
            return visited

        try:
            owner = self.locator.owning_folder(start_path)
        except ResolutionError as exc:
            logger.warning("skipping %r during %s: %s", start_path, action.name, exc)
            return visited
        self._apply(owner, action, visited)

        if self.locator.is_root_index(start_path):
            return visited
        target = self.storage.get_entry(start_path)
        if not isinstance(target, FolderEntry):
            return visited
        self._walk_folder(target, action, visited)
        return visited


__all__ = ["IndexAction", "TreeWalker"]
