"""Fake Time implementation for testing."""

from datetime import UTC, datetime

from skillkit.integrations.time.abc import Time

DEFAULT_FAKE_NOW = datetime(2025, 1, 2, 3, 4, 5, 678000, tzinfo=UTC)


class FakeTime(Time):
    """Clock frozen at a fixed instant."""

    def __init__(self, now: datetime = DEFAULT_FAKE_NOW) -> None:
        self._now = now

    def now(self) -> datetime:
        return self._now
