"""Dose reminder service: occurrence model, dedup, gateway and scheduler."""

from peptrack.reminders.dedup import DedupTracker
from peptrack.reminders.gateway import (
    GatewayError,
    GatewayResult,
    HttpReminderGateway,
    ReminderGateway,
    fetch_due_reminders,
)
from peptrack.reminders.models import ReminderOccurrence, notification_key
from peptrack.reminders.service import ReminderScheduler

__all__ = [
    "DedupTracker",
    "GatewayError",
    "GatewayResult",
    "HttpReminderGateway",
    "ReminderGateway",
    "ReminderOccurrence",
    "ReminderScheduler",
    "fetch_due_reminders",
    "notification_key",
]
