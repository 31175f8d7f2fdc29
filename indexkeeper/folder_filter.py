"""Included-folder filtering for index generation.

The configured list holds comma- or newline-separated folder paths. An entry
ending in ``*`` matches any path with that prefix; any other entry matches
only paths strictly inside that folder.
"""

from __future__ import annotations

from .paths import SEPARATOR
from .settings import IndexSettings

WILDCARD = "*"


def parse_folder_list(raw: str | None) -> list[str]:
    """Split a raw folder list into trimmed, non-empty entries."""
    if not raw:
        return []
    return [folder.strip() for folder in raw.replace(",", "\n").split("\n") if folder.strip()]


def folder_matches(folder: str, path: str) -> bool:
    """Return whether ``path`` falls under one configured ``folder`` entry."""
    if folder.endswith(WILDCARD):
        return path.startswith(folder[: -len(WILDCARD)])
    return path.startswith(f"{folder}{SEPARATOR}")


def is_in_specific_folder(raw_folders: str | None, path: str) -> bool:
    """Return whether ``path`` matches any entry of ``raw_folders``."""
    return any(folder_matches(folder, path) for folder in parse_folder_list(raw_folders))


def is_in_allowed_folder(settings: IndexSettings, path: str) -> bool:
    """Return whether ``path`` participates in indexing under ``settings``.

    An empty or whitespace-only inclusion list allows everything.
    """
    if not settings.folders_included or not settings.folders_included.strip():
        return True
    return is_in_specific_folder(settings.folders_included, path)


__all__ = [
    "WILDCARD",
    "parse_folder_list",
    "folder_matches",
    "is_in_specific_folder",
    "is_in_allowed_folder",
]
