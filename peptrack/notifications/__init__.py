"""Notification delivery: native OS notifications with in-app toast fallback."""

from peptrack.notifications.channels import NativeNotifier, ToastSink
from peptrack.notifications.dispatcher import DeliveryResult, NotificationDispatcher
from peptrack.notifications.presets import NotificationPayload
from peptrack.notifications.toast import InAppToastSink, Toast

__all__ = [
    "DeliveryResult",
    "InAppToastSink",
    "NativeNotifier",
    "NotificationDispatcher",
    "NotificationPayload",
    "Toast",
    "ToastSink",
]
