"""
JSON document access over the key-value store.

Every collection in the app (invites, accounts, properties, units, payments)
is one JSON document under one key. Reads parse and validate the whole
document; writes serialize and overwrite it. There is no partial update:
callers do read-modify-write.

Invariants:
- Absent key reads as None, never as an error
- A present but unparseable value raises DocumentCorruptError
- Documents are written with camelCase aliases and without null fields
"""

from __future__ import annotations

from typing import TypeVar

from pydantic import TypeAdapter, ValidationError

from landlordly.core.ports.storage import DocumentCorruptError, KeyValueStorePort

T = TypeVar("T")


def read_document(store: KeyValueStorePort, key: str, adapter: TypeAdapter[T]) -> T | None:
    """
    Read and validate the document stored under key.

    Raises:
        StorageReadError: If the store rejected the read
        DocumentCorruptError: If the stored value is not valid JSON of the expected shape
    """
    raw = store.get_item(key)
    if raw is None:
        return None

    try:
        return adapter.validate_json(raw)
    except ValidationError as e:
        # Covers malformed JSON as well as schema mismatches
        raise DocumentCorruptError(key, f"{e.error_count()} validation error(s)") from e


def write_document(store: KeyValueStorePort, key: str, adapter: TypeAdapter[T], value: T) -> None:
    """
    Serialize value and overwrite key.

    Raises:
        StorageWriteError: If the store rejected the write
    """
    payload = adapter.dump_json(value, by_alias=True, exclude_none=True)
    store.set_item(key, payload.decode("utf-8"))


def load_or_seed(
    store: KeyValueStorePort,
    key: str,
    adapter: TypeAdapter[list[T]],
    seed: list[T],
) -> list[T]:
    """
    Read a list document; when the key is absent, persist seed and return it.
    """
    existing = read_document(store, key, adapter)
    if existing is not None:
        return existing

    write_document(store, key, adapter, seed)
    return seed
