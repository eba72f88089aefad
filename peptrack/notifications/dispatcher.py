"""NotificationDispatcher: delivers payloads natively, degrading to toasts."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from peptrack.config import settings
from peptrack.notifications import presets

if TYPE_CHECKING:
    from peptrack.notifications.channels import NativeNotifier, ToastSink
    from peptrack.notifications.presets import NotificationPayload
    from peptrack.reminders.models import ReminderOccurrence

logger = logging.getLogger(__name__)


@dataclass
class DeliveryResult:
    """Which channels actually showed a notification."""

    native: bool = False
    toast: bool = False

    @property
    def delivered(self) -> bool:
        return self.native or self.toast

    @property
    def channel(self) -> str | None:
        """The primary channel used: ``"native"``, ``"toast"`` or None."""
        if self.native:
            return "native"
        if self.toast:
            return "toast"
        return None


class NotificationDispatcher:
    """Renders and delivers notifications with graceful degradation.

    The native channel is tried first. Any failure there (not permitted,
    False return, exception) falls back to an in-app toast. ``notify`` and
    ``show`` never raise.

    Args:
        native: OS notification channel, or None when unavailable.
        toast: In-app toast sink.
        toast_with_native: Also show a toast after a successful native
            notification (default from settings).
    """

    def __init__(
        self,
        native: NativeNotifier | None,
        toast: ToastSink | None,
        toast_with_native: bool | None = None,
    ) -> None:
        self._native = native
        self._toast = toast
        self._toast_with_native = (
            settings.toast_with_native if toast_with_native is None else toast_with_native
        )

    async def notify(self, occurrence: ReminderOccurrence) -> DeliveryResult:
        """Deliver a dose reminder for *occurrence*."""
        try:
            payload = presets.dose_reminder(
                occurrence.schedule_id,
                occurrence.peptide_name,
                occurrence.time_of_day,
                occurrence.amount_mg,
            )
        except Exception:
            logger.exception(
                "Could not build reminder payload for schedule %s", occurrence.schedule_id
            )
            return DeliveryResult()
        result = await self.show(payload)
        logger.debug(
            "Reminder for '%s' at %s delivered via %s",
            occurrence.protocol_name or occurrence.peptide_name,
            occurrence.time_of_day,
            result.channel,
        )
        return result

    async def show(self, payload: NotificationPayload) -> DeliveryResult:
        """Deliver any payload using the native-then-toast policy."""
        result = DeliveryResult()
        if not payload.toast_only:
            result.native = await self._send_native(payload)

        if not result.native or self._toast_with_native:
            result.toast = await self._send_toast(payload)

        if not result.delivered:
            logger.warning("Notification not delivered on any channel: %s", payload.title)
        return result

    async def _send_native(self, payload: NotificationPayload) -> bool:
        if self._native is None:
            return False
        try:
            ok = await self._native.notify(payload.title, payload.body, payload.tag)
        except Exception:
            logger.warning(
                "Native notification failed, falling back to toast", exc_info=True
            )
            return False
        if not ok:
            logger.debug("Native channel %s declined notification", self._native.name)
        return bool(ok)

    async def _send_toast(self, payload: NotificationPayload) -> bool:
        if self._toast is None:
            return False
        try:
            await self._toast.toast(payload.body, payload.severity)
        except Exception:
            logger.exception("Toast notification failed")
            return False
        return True
