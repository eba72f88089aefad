"""ReminderScheduler: polls for due doses and notifies at most once per occurrence."""

from __future__ import annotations

import asyncio
import logging
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from peptrack.config import settings
from peptrack.reminders.dedup import DedupTracker
from peptrack.reminders.gateway import fetch_due_reminders

if TYPE_CHECKING:
    from types import TracebackType

    from peptrack.notifications.dispatcher import NotificationDispatcher
    from peptrack.reminders.gateway import ReminderGateway

logger = logging.getLogger(__name__)


class ReminderScheduler:
    """Stopped/running state machine that drives reminder poll cycles.

    Each cycle fetches the due occurrences from the gateway and dispatches
    a notification for every occurrence whose key is not already in the
    dedup tracker. The next tick is armed only after the current cycle has
    finished, so cycles never overlap however slow the gateway is.

    Every ``start()`` opens a new generation. A cycle still in flight from
    an older generation finishes quietly: it stops dispatching, never marks
    the tracker and never re-arms the timer.

    Args:
        gateway: Source of due reminder occurrences.
        dispatcher: Delivers notifications.
        tracker: Dedup state (a fresh one-hour tracker by default).
        check_interval_minutes: Poll cadence (default from settings, 5).
        enabled: Kill switch (default from settings).
    """

    def __init__(
        self,
        gateway: ReminderGateway,
        dispatcher: NotificationDispatcher,
        tracker: DedupTracker | None = None,
        check_interval_minutes: float | None = None,
        enabled: bool | None = None,
    ) -> None:
        if check_interval_minutes is None:
            check_interval_minutes = settings.reminder_check_interval_minutes
        if check_interval_minutes <= 0:
            msg = f"check_interval_minutes must be positive, got {check_interval_minutes}"
            raise ValueError(msg)
        self._gateway = gateway
        self._dispatcher = dispatcher
        self._tracker = tracker if tracker is not None else DedupTracker()
        self._interval_seconds = check_interval_minutes * 60
        self._enabled = settings.reminders_enabled if enabled is None else enabled

        self._running = False
        self._last_check_time: datetime | None = None
        self._generation = 0
        self._timer: asyncio.TimerHandle | None = None
        self._tick_task: asyncio.Task[None] | None = None
        self._cycle_lock = asyncio.Lock()

    @property
    def is_running(self) -> bool:
        return self._running

    @property
    def last_check_time(self) -> datetime | None:
        """When the most recent poll cycle finished, successful or not."""
        return self._last_check_time

    @property
    def enabled(self) -> bool:
        return self._enabled

    @property
    def check_interval_seconds(self) -> float:
        return self._interval_seconds

    @property
    def tracker(self) -> DedupTracker:
        return self._tracker

    # -- Lifecycle -------------------------------------------------------------

    async def start(self) -> None:
        """Run one poll cycle now, then keep polling every interval."""
        if self._running:
            logger.warning("Reminder service already running")
            return
        if not self._enabled:
            logger.debug("Reminder service is disabled")
            return

        self._running = True
        self._generation += 1
        logger.info(
            "Starting reminder service (checking every %g minutes)",
            self._interval_seconds / 60,
        )
        await self._tick(self._generation)

    async def stop(self) -> None:
        """Cancel the pending tick and forget which occurrences were notified."""
        if not self._running:
            return

        self._running = False
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None
        self._tracker.clear()
        logger.info("Reminder service stopped")

    async def restart(self) -> None:
        await self.stop()
        await self.start()

    async def __aenter__(self) -> ReminderScheduler:
        await self.start()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.stop()

    # -- Polling ---------------------------------------------------------------

    async def check_reminders(self) -> int:
        """Run one poll cycle on demand.

        Returns the number of notifications dispatched and recorded in the
        tracker. A dispatch cut short by ``stop()`` is not counted.
        """
        return await self._run_cycle(self._generation)

    async def _run_cycle(self, generation: int) -> int:
        if not self._enabled or not self._running:
            return 0

        async with self._cycle_lock:
            if generation != self._generation or not self._running:
                return 0

            dispatched = 0
            try:
                self._tracker.purge()
                result = await fetch_due_reminders(self._gateway)
                if not result.success:
                    # Background check: log only, the user is not alerted
                    logger.error("Error checking reminders: %s", result.error)
                else:
                    if result.occurrences:
                        logger.debug("Found %d pending reminder(s)", len(result.occurrences))
                    for occurrence in result.occurrences:
                        if generation != self._generation or not self._running:
                            logger.debug("Reminder service stopped mid-cycle; skipping the rest")
                            break
                        key = occurrence.notification_key
                        if self._tracker.has(key):
                            continue
                        try:
                            await self._dispatcher.notify(occurrence)
                        except Exception:
                            logger.exception("Error sending notification for %s", key)
                        if self._running and generation == self._generation:
                            self._tracker.mark(key)
                            dispatched += 1
            finally:
                self._last_check_time = datetime.now(UTC)
            return dispatched

    # -- Timer -----------------------------------------------------------------

    async def _tick(self, generation: int) -> None:
        """One timer tick: run a cycle, then arm the next tick if still current."""
        try:
            await self._run_cycle(generation)
        except Exception:
            logger.exception("Reminder poll cycle failed")
        finally:
            if self._running and generation == self._generation:
                self._arm(generation)

    def _arm(self, generation: int) -> None:
        loop = asyncio.get_running_loop()
        self._timer = loop.call_later(self._interval_seconds, self._on_timer, generation)

    def _on_timer(self, generation: int) -> None:
        self._timer = None
        if not self._running or generation != self._generation:
            return
        self._tick_task = asyncio.create_task(self._tick(generation))
