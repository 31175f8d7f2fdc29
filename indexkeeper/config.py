"""Persistent JSON config helpers.

Stores the index prefix and the included-folder list between runs.
All access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from platformdirs import user_config_dir

from .settings import DEFAULT_INDEX_PREFIX, IndexSettings

APP_NAME = "indexkeeper"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME

logger = logging.getLogger(__name__)


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except Exception:
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON.

    Write failures are logged and otherwise ignored so a read-only config
    directory never blocks synchronization.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except Exception as exc:
        logger.warning("could not save config to %s: %s", CONFIG_PATH, exc)


def load_index_prefix() -> str:
    """Return the persisted index prefix, or the default when unset/blank."""
    value = load_config().get("index_prefix")
    if not isinstance(value, str) or not value.strip():
        return DEFAULT_INDEX_PREFIX
    return value


def load_folders_included() -> str:
    """Return the persisted raw included-folder list (``""`` means all)."""
    value = load_config().get("folders_included")
    return value if isinstance(value, str) else ""


def load_settings() -> IndexSettings:
    """Build ``IndexSettings`` from persisted config."""
    return IndexSettings(
        index_prefix=load_index_prefix(),
        folders_included=load_folders_included(),
    )


def save_settings(settings: IndexSettings) -> None:
    """Persist ``settings`` while keeping unrelated config keys intact.

    A blank prefix is never written; the stored prefix stays as it was.
    """
    config = load_config()
    if settings.index_prefix.strip():
        config["index_prefix"] = settings.index_prefix
    config["folders_included"] = settings.folders_included
    save_config(config)


__all__ = [
    "APP_NAME",
    "CONFIG_PATH",
    "load_config",
    "save_config",
    "load_index_prefix",
    "load_folders_included",
    "load_settings",
    "save_settings",
]
