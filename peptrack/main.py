"""PepTrack reminder service entry point."""

import asyncio
import contextlib
import logging

from peptrack.config import settings

logging.basicConfig(
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    level=getattr(logging, settings.log_level),
)
logger = logging.getLogger(__name__)


async def run() -> None:
    """Start the reminder scheduler and keep it running until cancelled."""
    from peptrack.notifications.desktop import DesktopNotifier
    from peptrack.notifications.dispatcher import NotificationDispatcher
    from peptrack.notifications.toast import InAppToastSink
    from peptrack.reminders.gateway import HttpReminderGateway
    from peptrack.reminders.service import ReminderScheduler

    desktop = DesktopNotifier()
    await desktop.request_permission()

    toasts = InAppToastSink()

    async def _log_toast(toast) -> None:
        logger.info("[toast:%s] %s", toast.severity, toast.body)

    toasts.subscribe(_log_toast)

    scheduler = ReminderScheduler(
        gateway=HttpReminderGateway(),
        dispatcher=NotificationDispatcher(native=desktop, toast=toasts),
    )
    if not scheduler.enabled:
        logger.warning("REMINDERS_ENABLED is false: no reminders will be sent")
        return

    logger.info("Polling %s for due reminders", settings.reminder_backend_url)
    async with scheduler:
        await asyncio.Event().wait()


def main() -> None:
    """Run the reminder service until interrupted."""
    with contextlib.suppress(KeyboardInterrupt):
        asyncio.run(run())


if __name__ == "__main__":
    main()
