# landlordly - Ports (Protocol Interfaces)
# Abstract interfaces for adapters; no implementations here

from landlordly.core.ports.storage import (
    DocumentCorruptError,
    KeyValueStorePort,
    StorageError,
    StorageReadError,
    StorageWriteError,
)
from landlordly.core.ports.time import TimePort

__all__ = [
    # Key-value storage
    "DocumentCorruptError",
    "KeyValueStorePort",
    "StorageError",
    "StorageReadError",
    "StorageWriteError",
    # Time
    "TimePort",
]
