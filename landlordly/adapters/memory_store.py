"""In-memory key-value store adapter.

This adapter implements KeyValueStorePort for tests and throwaway runs.
Values live in a dict and vanish with the process.
"""

from landlordly.core.ports.storage import StorageWriteError


class InMemoryKeyValueStore:
    """In-memory key-value storage - suitable for single-process use."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._items: dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> str | None:
        """Get value by key."""
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        """Save value under key."""
        if not isinstance(value, str):
            raise StorageWriteError(key, f"value must be str, got {type(value).__name__}")
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        """Delete value by key."""
        self._items.pop(key, None)

    def keys(self) -> list[str]:
        """List stored keys."""
        return sorted(self._items)

    def clear(self) -> None:
        """Clear all items - useful for testing."""
        self._items.clear()
