"""Public package surface for indexkeeper.

Exports the synchronization entry points plus ``main`` for programmatic CLI
invocation. The core lives in ``indexkeeper.index``.
"""

from __future__ import annotations

from .index import IndexSynchronizer, SyncWorker, TreeEvent
from .settings import IndexSettings
from .tree_model import LocalTreeStorage


def main(*args, **kwargs):
    """Lazily import the CLI entrypoint; argparse is only needed there."""
    from .cli import main as _main

    return _main(*args, **kwargs)

__all__ = [
    "IndexSettings",
    "IndexSynchronizer",
    "LocalTreeStorage",
    "SyncWorker",
    "TreeEvent",
    "main",
]
