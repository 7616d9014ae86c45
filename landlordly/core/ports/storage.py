"""
Key-Value Store Interface.

Protocol-based interface for the persisted, process-wide, string-keyed store
that holds all client state (invites, accounts, properties, payments).
Implementations: in-memory (tests, scratch runs) and local filesystem.

Values are opaque strings; callers store serialized JSON documents and do
their own parsing (see landlordly.core.services.documents).

Invariants:
- get_item returns None for an absent key, never raises for absence
- set_item overwrites the whole value (no partial update API)
- No locking, versioning or compare-and-swap is offered; concurrent
  read-modify-write cycles on the same key are last-writer-wins
"""

from __future__ import annotations

from typing import Protocol


class KeyValueStorePort(Protocol):
    """
    Key-value storage port interface.

    Mirrors the get/set/remove surface of a mobile platform's async storage.
    """

    def get_item(self, key: str) -> str | None:
        """
        Read the value stored under key.

        Returns:
            The stored string, or None if the key does not exist

        Raises:
            StorageReadError: If the backend rejected the read
            DocumentCorruptError: If the stored bytes are not text
        """
        ...

    def set_item(self, key: str, value: str) -> None:
        """
        Store value under key, replacing any previous value.

        Raises:
            StorageWriteError: If the backend rejected the write
        """
        ...

    def remove_item(self, key: str) -> None:
        """
        Remove key. Removing an absent key is not an error.

        Raises:
            StorageWriteError: If the backend rejected the removal
        """
        ...


class StorageError(Exception):
    """Base class for storage errors."""


class StorageReadError(StorageError):
    """Raised when the store rejects a read."""

    def __init__(self, key: str, reason: str = "") -> None:
        self.key = key
        self.reason = reason
        message = f"Failed to read key: {key}"
        super().__init__(f"{message} ({reason})" if reason else message)


class StorageWriteError(StorageError):
    """Raised when the store rejects a write or removal."""

    def __init__(self, key: str, reason: str = "") -> None:
        self.key = key
        self.reason = reason
        message = f"Failed to write key: {key}"
        super().__init__(f"{message} ({reason})" if reason else message)


class DocumentCorruptError(StorageError):
    """Raised when a stored value is present but does not parse as the expected shape."""

    def __init__(self, key: str, reason: str = "") -> None:
        self.key = key
        self.reason = reason
        message = f"Stored document is corrupt: {key}"
        super().__init__(f"{message} ({reason})" if reason else message)
