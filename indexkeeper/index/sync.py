"""Synchronization orchestrator driven by tree-change events.

Every cycle deletes all index files in a scope, then regenerates them, under
one lock so cycles never interleave.
"""

from __future__ import annotations

import logging
import threading

from ..errors import DeleteError
from ..settings import IndexSettings
from ..tree_model import FileEntry
from .events import TreeEvent
from .generator import IndexGenerator
from .locator import IndexLocator
from .walker import IndexAction, TreeWalker

logger = logging.getLogger(__name__)


class IndexSynchronizer:
    """Keep the index layer of one tree consistent with its layout."""

    def __init__(self, storage, settings: IndexSettings | None = None) -> None:
        self.storage = storage
        self.settings = settings or IndexSettings()
        self.locator = IndexLocator(storage, self.settings)
        self.generator = IndexGenerator(storage, self.locator)
        self.walker = TreeWalker(storage, self.locator, self.settings)
        self.delete_action = IndexAction("delete", self.delete_index)
        self.generate_action = IndexAction("generate", self.generator.regenerate, create_missing=True)
        self._lock = threading.Lock()

    def delete_index(self, index: FileEntry) -> bool:
        """Remove one index file; failures are logged and reported as ``False``."""
        try:
            self.storage.delete_entry(index)
        except DeleteError as exc:
            logger.warning("failed to delete index %r: %s", index.path, exc)
            return False
        logger.debug("deleted index %r", index.path)
        return True

    def is_ignored(self, path: str) -> bool:
        """Return whether a change at ``path`` must not trigger a cycle."""
        return self.settings.mentions_prefix(path)

    def sync_cycle(self, path: str) -> list[str]:
        """Run a delete pass then a generate pass over the scope of ``path``.

        Returns the index paths written by the generate pass. ``CreateError``
        aborts the cycle and propagates.
        """
        with self._lock:
            logger.info("synchronizing indexes for %r", path or "<root>")
            self.walker.walk(path, self.delete_action)
            generated = self.walker.walk(path, self.generate_action)
            logger.debug("generated %d index file(s) for %r", len(generated), path)
            return generated

    def sync_all(self) -> list[str]:
        """Synchronize every index in the tree."""
        return self.sync_cycle("")

    def on_tree_change(self, event: TreeEvent) -> bool:
        """Handle one tree-change event; returns ``False`` when it was ignored."""
        if self.is_ignored(event.path):
            logger.debug("ignoring change to index file %r", event.path)
            return False
        for scope in event.scopes():
            self.sync_cycle(scope)
        return True


__all__ = ["IndexSynchronizer"]
