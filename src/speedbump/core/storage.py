"""
Key-value storage backends for the event snapshot.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class KeyValueStore(Protocol):
    """Protocol for the local key-value store holding snapshots."""

    def get(self, key: str) -> str | None:
        """Return the value stored under key, or None if absent."""
        ...

    def put(self, key: str, value: str) -> None:
        """Store value under key, replacing any previous value."""
        ...


class MemoryStore:
    """In-process key-value store. Used in tests and when no disk is wanted."""

    def __init__(self, initial: dict[str, str] | None = None):
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def put(self, key: str, value: str) -> None:
        self._data[key] = value

    def __contains__(self, key: object) -> bool:
        return key in self._data
