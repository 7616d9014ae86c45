from datetime import UTC, datetime, timedelta

import pytest

from landlordly.adapters.clipboard import InMemoryClipboard
from landlordly.adapters.memory_store import InMemoryKeyValueStore
from landlordly.rules.loader import RULES_PATH_ENV, load_rules
from landlordly.rules.models import Rules


class FixedClock:
    """Clock that only moves when told to."""

    def __init__(self, start: datetime | None = None) -> None:
        self.now = start or datetime(2024, 6, 15, 12, 0, 0, tzinfo=UTC)

    def now_utc(self) -> datetime:
        return self.now

    def advance(self, delta: timedelta) -> None:
        self.now += delta


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch):
    # Keep a developer's local overrides out of the test run
    monkeypatch.delenv(RULES_PATH_ENV, raising=False)
    monkeypatch.delenv("LANDLORDLY_DATA_DIR", raising=False)


@pytest.fixture
def rules() -> Rules:
    return load_rules()


@pytest.fixture
def store() -> InMemoryKeyValueStore:
    return InMemoryKeyValueStore()


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock()


@pytest.fixture
def clipboard() -> InMemoryClipboard:
    return InMemoryClipboard()
