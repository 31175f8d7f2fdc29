"""Domain model for the indexed tree plus its storage collaborator.

The core only talks to storage through this contract:
- ``create_empty_file(path) -> FileEntry`` (raises ``CreateError``)
- ``get_entry(path) -> FolderEntry | FileEntry | None``
- ``list_children(folder) -> list`` in a deterministic order
- ``overwrite_content(entry, text)`` (raises ``WriteError``)
- ``delete_entry(entry)`` (raises ``DeleteError``)
- ``root_name() -> str``
"""

from __future__ import annotations

from .types import FileEntry, FolderEntry, TreeEntry
from .fs import LocalTreeStorage

__all__ = [
    "FileEntry",
    "FolderEntry",
    "TreeEntry",
    "LocalTreeStorage",
]
