"""DedupTracker: self-expiring record of already-notified occurrences."""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING

from peptrack.config import settings

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger(__name__)


class DedupTracker:
    """Remembers notification keys for a fixed retention window.

    Each key holds a single expiry instant. Marking a key again moves its
    expiry forward instead of scheduling a second removal, so an old expiry
    can never drop a freshly marked key.

    Args:
        retention_seconds: How long a mark suppresses repeats (default from
            settings, one hour).
        clock: Monotonic time source in seconds. Tests pass a fake clock.
    """

    def __init__(
        self,
        retention_seconds: float | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if retention_seconds is None:
            retention_seconds = settings.reminder_retention_seconds()
        if retention_seconds <= 0:
            msg = f"retention_seconds must be positive, got {retention_seconds}"
            raise ValueError(msg)
        self._retention = retention_seconds
        self._clock = clock
        self._expires_at: dict[str, float] = {}

    @property
    def retention_seconds(self) -> float:
        return self._retention

    def mark(self, key: str) -> None:
        """Record *key* as notified until the retention window elapses."""
        self._expires_at[key] = self._clock() + self._retention

    def has(self, key: str) -> bool:
        """Return True if *key* is marked and its window has not elapsed."""
        expires_at = self._expires_at.get(key)
        if expires_at is None:
            return False
        if self._clock() >= expires_at:
            del self._expires_at[key]
            logger.debug("Dedup entry expired: %s", key)
            return False
        return True

    def clear(self) -> None:
        """Forget every key immediately."""
        self._expires_at.clear()

    def purge(self) -> int:
        """Drop expired entries. Returns how many were removed."""
        now = self._clock()
        expired = [key for key, expires_at in self._expires_at.items() if now >= expires_at]
        for key in expired:
            del self._expires_at[key]
        return len(expired)

    def __len__(self) -> int:
        self.purge()
        return len(self._expires_at)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.has(key)
