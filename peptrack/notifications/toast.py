"""In-app toast sink: buffers toasts for the host UI to render."""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from peptrack.notifications.presets import Severity

logger = logging.getLogger(__name__)

MAX_PENDING_TOASTS = 50


@dataclass(frozen=True)
class Toast:
    body: str
    severity: Severity = "info"
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))


class InAppToastSink:
    """Collects toasts and forwards them to subscribed UI listeners.

    Toasts are kept in a bounded buffer until the UI calls ``drain()``;
    the oldest are dropped once ``max_pending`` is reached.
    """

    def __init__(self, max_pending: int = MAX_PENDING_TOASTS) -> None:
        self._pending: deque[Toast] = deque(maxlen=max_pending)
        self._listeners: list[Callable[[Toast], Awaitable[None]]] = []

    def subscribe(self, listener: Callable[[Toast], Awaitable[None]]) -> None:
        """Register an async callback invoked for every new toast."""
        self._listeners.append(listener)

    def unsubscribe(self, listener: Callable[[Toast], Awaitable[None]]) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    @property
    def pending(self) -> list[Toast]:
        return list(self._pending)

    def drain(self) -> list[Toast]:
        """Return and forget all buffered toasts."""
        toasts = list(self._pending)
        self._pending.clear()
        return toasts

    async def toast(self, body: str, severity: Severity = "info") -> None:
        """Buffer a toast and notify listeners."""
        item = Toast(body=body, severity=severity)
        self._pending.append(item)
        for listener in list(self._listeners):
            try:
                await listener(item)
            except Exception:
                logger.exception("Toast listener failed")
