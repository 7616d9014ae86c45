from datetime import datetime
from typing import Protocol


class KeyValueStorePort(Protocol):
    def get_item(self, key: str) -> str | None: ...
    def set_item(self, key: str, value: str) -> None: ...
    def remove_item(self, key: str) -> None: ...


class ClipboardPort(Protocol):
    """Port for the device clipboard the invite link is copied to."""

    def copy(self, text: str) -> None: ...


class RandomPort(Protocol):
    """Subset of random.Random used for code generation."""

    def choice(self, seq: str) -> str: ...


class TimePort(Protocol):
    """Port for time operations - enables deterministic testing."""

    def now_utc(self) -> datetime:
        """Get current UTC time."""
        ...
