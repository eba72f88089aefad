"""Desktop implementation of the NativeNotifier protocol (plyer)."""

from __future__ import annotations

import asyncio
import logging

from plyer import notification

from peptrack.config import settings

logger = logging.getLogger(__name__)

# Seconds the OS keeps the notification on screen, where supported.
DEFAULT_DISPLAY_SECONDS = 10


class DesktopNotifier:
    """Shows OS notifications through plyer.

    plyer has no permission prompt; "permission" here is the user's
    ``DESKTOP_NOTIFICATIONS_ENABLED`` setting, revoked automatically when
    the platform turns out to have no notification backend.
    """

    def __init__(
        self,
        app_name: str | None = None,
        enabled: bool | None = None,
        display_seconds: int = DEFAULT_DISPLAY_SECONDS,
    ) -> None:
        self._app_name = app_name or settings.app_name
        self._permission = settings.desktop_notifications_enabled if enabled is None else enabled
        self._display_seconds = display_seconds

    @property
    def name(self) -> str:
        return "desktop"

    @property
    def permission_granted(self) -> bool:
        return self._permission

    async def request_permission(self) -> bool:
        """Report whether native notifications may be shown."""
        if not self._permission:
            logger.info("Desktop notifications disabled; reminders will use in-app toasts")
        return self._permission

    async def notify(self, title: str, body: str, tag: str | None = None) -> bool:
        """Show a desktop notification. Returns False when not permitted.

        plyer cannot replace a notification by tag; *tag* is only logged.
        """
        if not self._permission:
            return False
        try:
            # plyer blocks on some platforms (dbus, win32), keep it off the loop
            await asyncio.to_thread(
                notification.notify,
                title=title,
                message=body,
                app_name=self._app_name,
                timeout=self._display_seconds,
            )
        except NotImplementedError:
            logger.warning("No desktop notification backend on this platform; disabling")
            self._permission = False
            return False
        logger.debug("Desktop notification shown (tag=%s)", tag)
        return True
