"""Notification payloads and presets for common PepTrack events."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

Severity = Literal["success", "error", "warning", "info"]


@dataclass(frozen=True)
class NotificationPayload:
    """What to show, independent of the channel that shows it.

    Attributes:
        title: Heading for native notifications (toasts show only the body).
        body: Main message text.
        tag: Identifier the OS can use to replace an earlier notification.
        severity: Toast style.
        toast_only: Skip the native channel and only show an in-app toast.
    """

    title: str
    body: str
    tag: str | None = None
    severity: Severity = "info"
    toast_only: bool = False


def _format_mg(amount: float) -> str:
    return f"{amount:g}mg"


def dose_reminder(
    schedule_id: str,
    peptide_name: str,
    time_of_day: str,
    amount_mg: float | None = None,
) -> NotificationPayload:
    """Reminder that a scheduled dose is due."""
    dose = f" ({_format_mg(amount_mg)})" if amount_mg else ""
    return NotificationPayload(
        title="Dose Reminder",
        body=f"Time for your {peptide_name} dose{dose} - scheduled for {time_of_day}",
        tag=f"dose-reminder-{schedule_id}",
        severity="info",
    )


def backup_success() -> NotificationPayload:
    return NotificationPayload(
        title="Backup Complete",
        body="Your data has been backed up successfully",
        severity="success",
    )


def backup_failed(reason: str) -> NotificationPayload:
    return NotificationPayload(
        title="Backup Failed",
        body=f"Backup failed: {reason}",
        severity="error",
    )


def vial_expiring(peptide_name: str, days: int) -> NotificationPayload:
    plural = "" if days == 1 else "s"
    return NotificationPayload(
        title="Vial Expiring Soon",
        body=f"Your {peptide_name} vial expires in {days} day{plural}",
        severity="warning",
    )


def low_stock(peptide_name: str, remaining_mg: float) -> NotificationPayload:
    return NotificationPayload(
        title="Low Stock Alert",
        body=f"Only {_format_mg(remaining_mg)} of {peptide_name} remaining",
        severity="warning",
    )


def price_change(peptide_name: str, change: str) -> NotificationPayload:
    return NotificationPayload(
        title="Price Change",
        body=f"{peptide_name} price {change}",
        severity="info",
    )
