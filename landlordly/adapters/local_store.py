"""
Local Filesystem Key-Value Store Adapter.

Implements the KeyValueStorePort interface using the local filesystem.
Persists client state across runs for the CLI and single-device use.

Invariants:
- One file per key: {base_path}/{key}.json
- A write either fully replaces the previous value or leaves it untouched
  (temp file + os.replace)
- No cross-process locking; concurrent writers are last-writer-wins
"""

from __future__ import annotations

import logging
import os
import re
import tempfile
from pathlib import Path

from landlordly.core.ports.storage import DocumentCorruptError, StorageReadError, StorageWriteError

logger = logging.getLogger(__name__)

_SAFE_KEY = re.compile(r"^[A-Za-z0-9_.-]+$")


class LocalFileKeyValueStore:
    """
    Local filesystem implementation of KeyValueStorePort.

    Stores each value as a UTF-8 text file named after its key.

    Example key: "invites" -> {base_path}/invites.json
    """

    def __init__(self, base_path: str | Path, *, create_dirs: bool = True) -> None:
        """
        Initialize local file store.

        Args:
            base_path: Root directory for storage
            create_dirs: Whether to create the directory if it doesn't exist
        """
        self.base_path = Path(base_path)

        if create_dirs:
            self.base_path.mkdir(parents=True, exist_ok=True)

    def _key_to_path(self, key: str) -> Path:
        """Convert storage key to its file path."""
        # Keys are flat names; reject anything that could escape base_path
        if not _SAFE_KEY.match(key) or key.startswith("."):
            raise ValueError(f"Invalid storage key: {key!r}")
        return self.base_path / f"{key}.json"

    def get_item(self, key: str) -> str | None:
        """
        Read value by key; None if the file does not exist.

        Raises:
            StorageReadError: If the file cannot be read
            DocumentCorruptError: If the file is not UTF-8 text
        """
        path = self._key_to_path(key)

        if not path.exists():
            return None

        try:
            raw = path.read_bytes()
        except OSError as e:
            raise StorageReadError(key, str(e)) from e

        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError as e:
            raise DocumentCorruptError(key, f"not valid UTF-8: {e.reason}") from e

    def set_item(self, key: str, value: str) -> None:
        """Replace the value stored under key."""
        path = self._key_to_path(key)

        try:
            fd, tmp_name = tempfile.mkstemp(dir=self.base_path, prefix=f".{key}.", suffix=".tmp")
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    f.write(value)
                os.replace(tmp_name, path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as e:
            raise StorageWriteError(key, str(e)) from e

        logger.debug("Wrote key %s (%d bytes)", key, len(value))

    def remove_item(self, key: str) -> None:
        """Delete value by key; absent keys are ignored."""
        path = self._key_to_path(key)

        try:
            path.unlink(missing_ok=True)
        except OSError as e:
            raise StorageWriteError(key, str(e)) from e


def create_local_store(
    base_path: str | Path | None = None,
    *,
    env_var: str = "LANDLORDLY_DATA_DIR",
    default_path: str = "./data",
) -> LocalFileKeyValueStore:
    """
    Factory function to create LocalFileKeyValueStore from config.

    Args:
        base_path: Explicit base path (overrides env var)
        env_var: Environment variable name for the data directory
        default_path: Default path if not configured

    Returns:
        Configured LocalFileKeyValueStore instance
    """
    if base_path is None:
        base_path = os.environ.get(env_var, default_path)

    return LocalFileKeyValueStore(base_path)
