"""Index synchronization core.

- ``locator``: which index owns a path and where it lives
- ``generator``: index body generation
- ``walker``: depth-first subtree walks applying delete/generate actions
- ``sync``: event-driven delete-then-generate cycles
- ``worker``: FIFO event queue feeding the synchronizer
"""

from __future__ import annotations

from .events import CREATE, DELETE, RENAME, TreeEvent
from .generator import IndexGenerator, format_link
from .locator import IndexLocator
from .sync import IndexSynchronizer
from .walker import IndexAction, TreeWalker
from .worker import SyncWorker

__all__ = [
    "CREATE",
    "DELETE",
    "RENAME",
    "TreeEvent",
    "IndexGenerator",
    "format_link",
    "IndexLocator",
    "IndexSynchronizer",
    "IndexAction",
    "TreeWalker",
    "SyncWorker",
]
