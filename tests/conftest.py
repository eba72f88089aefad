"""Shared test fixtures."""

import pytest


class FakeClock:
    """Monotonic clock that only moves when told to."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds

    def advance_minutes(self, minutes: float) -> None:
        self.advance(minutes * 60)


@pytest.fixture
def clock() -> FakeClock:
    """A fake monotonic clock for retention-window tests."""
    return FakeClock()
