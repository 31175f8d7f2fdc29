"""Background worker consuming tree-change events in arrival order."""

from __future__ import annotations

import logging
import threading
from queue import Queue

from ..errors import IndexKeeperError
from .events import TreeEvent
from .sync import IndexSynchronizer

logger = logging.getLogger(__name__)

_STOP = object()


class SyncWorker:
    """Single-threaded FIFO event consumer feeding an ``IndexSynchronizer``.

    ``submit`` may be called from any thread (for example a watcher thread);
    events are processed one at a time in the order they were submitted.
    """

    def __init__(self, synchronizer: IndexSynchronizer) -> None:
        self.synchronizer = synchronizer
        self._lock = threading.Lock()
        self._queue: Queue[object] = Queue()
        self._thread: threading.Thread | None = None
        self.failures: list[tuple[TreeEvent, Exception]] = []

    def _handle(self, event: TreeEvent) -> None:
        try:
            self.synchronizer.on_tree_change(event)
        except IndexKeeperError as exc:
            logger.error("aborted synchronization for %s %r: %s", event.kind, event.path, exc)
            self.failures.append((event, exc))
        except Exception as exc:
            logger.exception("unexpected failure handling %s %r", event.kind, event.path)
            self.failures.append((event, exc))

    def _worker(self) -> None:
        while True:
            item = self._queue.get()
            try:
                if item is _STOP:
                    return
                self._handle(item)
            finally:
                self._queue.task_done()

    def start(self) -> None:
        """Start the consumer thread if it is not already running."""
        with self._lock:
            if self._thread is not None and self._thread.is_alive():
                return
            self._thread = threading.Thread(
                target=self._worker,
                name="indexkeeper-sync",
                daemon=True,
            )
            self._thread.start()

    def submit(self, event: TreeEvent) -> None:
        """Queue ``event`` for synchronization, starting the worker on demand."""
        self.start()
        self._queue.put(event)

    def join(self) -> None:
        """Block until every submitted event has been processed."""
        self._queue.join()

    def stop(self, timeout: float | None = 2.0) -> None:
        """Process already queued events, then stop the consumer thread."""
        with self._lock:
            thread = self._thread
            self._thread = None
        if thread is None:
            return
        self._queue.put(_STOP)
        thread.join(timeout=timeout)


__all__ = ["SyncWorker"]
