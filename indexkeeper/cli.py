"""Command-line front door for indexkeeper.

Parses CLI options, merges them over persisted settings, and runs either a
one-shot synchronization or a long-running watcher.
"""

from __future__ import annotations

import argparse
import logging
from dataclasses import replace
from pathlib import Path

from .config import load_settings, save_settings
from .errors import IndexKeeperError
from .index import IndexSynchronizer
from .settings import IndexSettings
from .tree_model import LocalTreeStorage

logger = logging.getLogger(__name__)


def _prefix(value: str) -> str:
    """argparse type for a non-empty index prefix."""
    if not value.strip():
        raise argparse.ArgumentTypeError("index prefix must not be empty")
    return value


def resolve_settings(args: argparse.Namespace) -> IndexSettings:
    """Return persisted settings overridden by explicit CLI flags."""
    settings = load_settings()
    if args.prefix is not None:
        settings = replace(settings, index_prefix=args.prefix)
    if args.include is not None:
        settings = replace(settings, folders_included=args.include)
    return settings


def run_sync(root: Path, settings: IndexSettings, paths: list[str]) -> int:
    """Synchronize ``paths`` (or the whole tree) and return an exit status."""
    storage = LocalTreeStorage(root)
    synchronizer = IndexSynchronizer(storage, settings)
    status = 0
    for path in paths or [""]:
        if Path(path).is_absolute():
            scope = storage.relative_path(Path(path))
            if scope is None:
                logger.error("path %r is outside the tree root %s", path, storage.root)
                status = 1
                continue
        else:
            scope = path.strip("/")
        if synchronizer.is_ignored(scope):
            logger.info("skipping index file %r", scope)
            continue
        try:
            synchronizer.sync_cycle(scope)
        except IndexKeeperError as exc:
            logger.error("synchronization of %r aborted: %s", scope or "<root>", exc)
            status = 1
    return status


def main(default_path: Path | None = None) -> None:
    """Parse CLI arguments and synchronize (or watch) an index tree.

    ``default_path`` is primarily for tests; when omitted the current working
    directory is used.
    """
    parser = argparse.ArgumentParser(
        description="Maintain one generated index file per directory of a tree."
    )
    parser.add_argument("root", nargs="?", default=None, help="Tree root. Defaults to current directory.")
    parser.add_argument("--prefix", type=_prefix, default=None, help="Index file name prefix (default: _Index_of_).")
    parser.add_argument(
        "--include",
        default=None,
        help="Comma/newline separated folders to index; a trailing * matches by prefix.",
    )
    parser.add_argument(
        "--path",
        action="append",
        default=[],
        help="Root-relative or absolute path to synchronize instead of the whole tree (repeatable).",
    )
    parser.add_argument("--watch", action="store_true", help="Keep running and synchronize on changes.")
    parser.add_argument("--save-settings", action="store_true", help="Persist --prefix/--include for later runs.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log every index file touched.")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if default_path is None:
        default_path = Path.cwd()
    root = Path(args.root or default_path)
    if not root.is_dir():
        raise SystemExit(f"Path not found: {root}")

    settings = resolve_settings(args)
    if args.save_settings:
        save_settings(settings)

    status = run_sync(root, settings, args.path)
    if args.watch:
        from .watch import watch_tree

        watch_tree(root, settings)
    if status:
        raise SystemExit(status)


if __name__ == "__main__":
    main()
