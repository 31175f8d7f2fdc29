"""Index-file location: which index owns a path, and where it lives.

Resolution is two-step. The exact computed path wins; failing that, a child
whose name starts with the index prefix is accepted so an index that drifted
(for example a folder renamed with its old index inside) is still found.
"""

from __future__ import annotations

import logging

from ..errors import ResolutionError
from ..paths import join_path, name_of, parent_of
from ..settings import IndexSettings
from ..tree_model import FileEntry, FolderEntry

logger = logging.getLogger(__name__)


class IndexLocator:
    """Compute, find, and create index files for directories of one tree."""

    def __init__(self, storage, settings: IndexSettings) -> None:
        self.storage = storage
        self.settings = settings
        self._root_index_path = settings.index_file_name(storage.root_name())

    def root_index_path(self) -> str:
        """Return the precomputed path of the Root Index."""
        return self._root_index_path

    def is_root_index(self, path: str) -> bool:
        """Return whether ``path`` is the Root Index."""
        return path == self.root_index_path()

    def index_path_of_folder(self, folder_path: str) -> str:
        """Return the canonical index path inside ``folder_path``."""
        if not folder_path:
            return self.root_index_path()
        return join_path(folder_path, self.settings.index_file_name(name_of(folder_path)))

    def index_path_for(self, path: str) -> str:
        """Return the canonical index path of the directory owning ``path``."""
        return self.index_path_of_folder(parent_of(path))

    def owning_folder(self, path: str) -> FolderEntry:
        """Return the directory that owns ``path``.

        Raises ``ResolutionError`` when that directory no longer exists.
        """
        folder = self.storage.get_entry(parent_of(path))
        if not isinstance(folder, FolderEntry):
            raise ResolutionError(path, f"no owning directory for {path!r}")
        return folder

    def find_index_of_folder(self, folder: FolderEntry) -> FileEntry | None:
        """Return the current index file of ``folder`` without creating one."""
        expected = self.index_path_of_folder(folder.path)
        entry = self.storage.get_entry(expected)
        if isinstance(entry, FileEntry):
            return entry
        for child in self.storage.list_children(folder):
            if isinstance(child, FileEntry) and self.settings.is_index_file_name(child.name):
                logger.debug("resolved drifted index %r for %r", child.path, folder.path)
                return child
        return None

    def index_files_in_folder(self, folder: FolderEntry) -> list[FileEntry]:
        """Return every file in ``folder`` whose name marks it as an index."""
        return [
            child
            for child in self.storage.list_children(folder)
            if isinstance(child, FileEntry) and self.settings.is_index_file_name(child.name)
        ]

    def ensure_index_of_folder(self, folder: FolderEntry) -> FileEntry:
        """Return the index file of ``folder``, creating an empty one if missing.

        ``CreateError`` from storage propagates to the caller.
        """
        existing = self.find_index_of_folder(folder)
        if existing is not None:
            return existing
        created = self.storage.create_empty_file(self.index_path_of_folder(folder.path))
        logger.debug("created placeholder index %r", created.path)
        return created

    def index_file_for(self, path: str, create: bool = True) -> FileEntry | None:
        """Resolve the index file of the directory owning ``path``.

        With ``create=False`` a missing index yields ``None`` instead of a new
        placeholder.
        """
        folder = self.owning_folder(path)
        if create:
            return self.ensure_index_of_folder(folder)
        return self.find_index_of_folder(folder)


__all__ = ["IndexLocator"]
