"""Filesystem watcher translating watchdog notifications into tree events.

Created, deleted and moved notifications become ``TreeEvent``s submitted to a
``SyncWorker``. Modified notifications are ignored: index bodies only depend
on names, never on file contents.
"""

from __future__ import annotations

import logging
import os
import time
from pathlib import Path

from watchdog.events import FileSystemEvent, FileSystemEventHandler
from watchdog.observers import Observer

from .index import CREATE, DELETE, RENAME, IndexSynchronizer, SyncWorker, TreeEvent
from .settings import IndexSettings
from .tree_model import LocalTreeStorage

logger = logging.getLogger(__name__)


class IndexEventHandler(FileSystemEventHandler):
    """Forward create/delete/move notifications under one root to a worker."""

    def __init__(self, storage: LocalTreeStorage, worker: SyncWorker) -> None:
        super().__init__()
        self.storage = storage
        self.worker = worker

    def _relative(self, raw_path: str | bytes) -> str | None:
        """Map a watchdog path to a visible root-relative path, else ``None``."""
        relative = self.storage.relative_path(Path(os.fsdecode(raw_path)))
        if not relative:
            return None
        if any(segment.startswith(".") for segment in relative.split("/")):
            return None
        return relative

    def _submit(self, kind: str, raw_path: str | bytes) -> None:
        path = self._relative(raw_path)
        if path is not None:
            self.worker.submit(TreeEvent(kind=kind, path=path))

    def on_created(self, event: FileSystemEvent) -> None:
        self._submit(CREATE, event.src_path)

    def on_deleted(self, event: FileSystemEvent) -> None:
        self._submit(DELETE, event.src_path)

    def on_moved(self, event: FileSystemEvent) -> None:
        old_path = self._relative(event.src_path)
        new_path = self._relative(event.dest_path)
        if old_path is not None and new_path is not None:
            self.worker.submit(TreeEvent(kind=RENAME, path=new_path, old_path=old_path))
        elif new_path is not None:
            self.worker.submit(TreeEvent(kind=CREATE, path=new_path))
        elif old_path is not None:
            self.worker.submit(TreeEvent(kind=DELETE, path=old_path))


def watch_tree(root: Path, settings: IndexSettings, poll_seconds: float = 0.5) -> None:
    """Keep the index layer of ``root`` in sync until interrupted."""
    storage = LocalTreeStorage(root)
    worker = SyncWorker(IndexSynchronizer(storage, settings))
    worker.start()
    observer = Observer()
    observer.schedule(IndexEventHandler(storage, worker), str(storage.root), recursive=True)
    observer.start()
    logger.info("watching %s", storage.root)
    try:
        while observer.is_alive():
            time.sleep(poll_seconds)
    except KeyboardInterrupt:
        logger.info("stopping watcher")
    finally:
        observer.stop()
        observer.join(timeout=2.0)
        worker.stop()


__all__ = ["IndexEventHandler", "watch_tree"]
