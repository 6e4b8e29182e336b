"""
Kivy-backed snapshot storage.

Wraps kivy.storage.jsonstore.JsonStore so the event store can keep its
snapshot in the app's data directory on every platform Kivy supports.
"""

import json
import logging
from pathlib import Path

from kivy.storage.jsonstore import JsonStore

logger = logging.getLogger(__name__)

VALUE_FIELD = "value"


class KivyJsonStore:
    """Key-value store persisted as a JSON file through Kivy's JsonStore."""

    def __init__(self, path: str | Path):
        """
        Initialize the store.

        Args:
            path: JSON file holding all keys. Parent directories are created.
        """
        self.path = Path(path)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self._store: JsonStore | None = None

    def _unreadable_reason(self) -> str | None:
        """Why the file cannot back a JsonStore, or None if it can."""
        if not self.path.exists():
            return None
        try:
            text = self.path.read_text(encoding="utf-8")
            if not text:
                return None
            root = json.loads(text)
        except ValueError as e:
            return str(e)
        if not isinstance(root, dict):
            return f"top level is {type(root).__name__}, not an object"
        return None

    def _open(self) -> JsonStore:
        if self._store is None:
            reason = self._unreadable_reason()
            if reason is not None:
                # Keep the broken file for inspection and start over
                backup = self.path.with_suffix(self.path.suffix + ".corrupt")
                logger.warning(f"Moving unreadable store {self.path} to {backup}: {reason}")
                self.path.replace(backup)
            self._store = JsonStore(str(self.path))
        return self._store

    def get(self, key: str) -> str | None:
        store = self._open()
        if not store.exists(key):
            return None
        entry = store.get(key)
        if not isinstance(entry, dict):
            raise ValueError(f"Entry under '{key}' is not an object")
        value = entry.get(VALUE_FIELD)
        if value is not None and not isinstance(value, str):
            raise ValueError(f"Value under '{key}' is not a string")
        return value

    def put(self, key: str, value: str) -> None:
        self._open().put(key, **{VALUE_FIELD: value})
        logger.debug(f"Wrote {len(value)} bytes to {self.path} [{key}]")
