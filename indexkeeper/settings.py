"""Immutable synchronization settings passed into every core operation."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_INDEX_PREFIX = "_Index_of_"
INDEX_SUFFIX = ".md"


@dataclass(frozen=True)
class IndexSettings:
    """Index file prefix plus the raw included-folder list."""

    index_prefix: str = DEFAULT_INDEX_PREFIX
    folders_included: str = ""

    def index_file_name(self, owner_name: str) -> str:
        """Return the index file name for a directory called ``owner_name``."""
        return f"{self.index_prefix}{owner_name}{INDEX_SUFFIX}"

    def is_index_file_name(self, name: str) -> bool:
        """Return whether a bare file name looks like a generated index."""
        return name.startswith(self.index_prefix) and name.endswith(INDEX_SUFFIX)

    def mentions_prefix(self, path: str) -> bool:
        """Return whether ``path`` contains the index prefix anywhere."""
        return self.index_prefix in path


__all__ = ["DEFAULT_INDEX_PREFIX", "INDEX_SUFFIX", "IndexSettings"]
