"""Tests for DesktopNotifier (plyer-backed native channel)."""

from unittest.mock import MagicMock, patch

import pytest

from peptrack.notifications.channels import NativeNotifier
from peptrack.notifications.desktop import DesktopNotifier


@pytest.fixture
def plyer_notification():
    with patch("peptrack.notifications.desktop.notification") as mock:
        mock.notify = MagicMock()
        yield mock


def test_satisfies_protocol() -> None:
    assert isinstance(DesktopNotifier(enabled=True), NativeNotifier)


def test_name_property() -> None:
    assert DesktopNotifier(enabled=True).name == "desktop"


async def test_notify_calls_plyer(plyer_notification) -> None:
    notifier = DesktopNotifier(app_name="PepTrack", enabled=True, display_seconds=5)

    ok = await notifier.notify("Dose Reminder", "Time for your dose", tag="dose-reminder-1")

    assert ok is True
    plyer_notification.notify.assert_called_once_with(
        title="Dose Reminder",
        message="Time for your dose",
        app_name="PepTrack",
        timeout=5,
    )


async def test_notify_when_disabled_returns_false(plyer_notification) -> None:
    notifier = DesktopNotifier(enabled=False)

    ok = await notifier.notify("t", "b")

    assert ok is False
    plyer_notification.notify.assert_not_called()


async def test_missing_backend_revokes_permission(plyer_notification) -> None:
    plyer_notification.notify.side_effect = NotImplementedError
    notifier = DesktopNotifier(enabled=True)

    assert await notifier.notify("t", "b") is False
    assert notifier.permission_granted is False

    # Not tried again once revoked
    assert await notifier.notify("t", "b") is False
    assert plyer_notification.notify.call_count == 1


async def test_other_errors_propagate(plyer_notification) -> None:
    plyer_notification.notify.side_effect = OSError("dbus unavailable")
    notifier = DesktopNotifier(enabled=True)

    with pytest.raises(OSError, match="dbus"):
        await notifier.notify("t", "b")
    assert notifier.permission_granted is True


async def test_request_permission_reflects_setting() -> None:
    assert await DesktopNotifier(enabled=True).request_permission() is True
    assert await DesktopNotifier(enabled=False).request_permission() is False
