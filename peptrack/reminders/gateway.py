"""Reminder source gateway: the boundary to the backend's due-reminder query."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable

import httpx
from pydantic import ValidationError

from peptrack.config import settings
from peptrack.reminders.models import ReminderOccurrence

logger = logging.getLogger(__name__)

PENDING_REMINDERS_PROCEDURE = "get_pending_dose_reminders"


class GatewayError(Exception):
    """The due-reminder query could not be completed."""


@runtime_checkable
class ReminderGateway(Protocol):
    """Anything that can list the currently due reminder occurrences.

    Implementations do no filtering or deduplication and may return the
    same occurrence on consecutive calls.
    """

    async def fetch_due(self) -> list[ReminderOccurrence]:
        """Return all due occurrences. Raises GatewayError on failure."""
        ...


@dataclass
class GatewayResult:
    """Outcome of one due-reminder query."""

    occurrences: list[ReminderOccurrence] = field(default_factory=list)
    error: str | None = None

    @property
    def success(self) -> bool:
        return self.error is None


async def fetch_due_reminders(gateway: ReminderGateway) -> GatewayResult:
    """Query *gateway* and fold any failure into a GatewayResult."""
    try:
        occurrences = await gateway.fetch_due()
    except GatewayError as exc:
        logger.warning("Reminder gateway failed: %s", exc)
        return GatewayResult(error=str(exc) or type(exc).__name__)
    except Exception as exc:
        logger.exception("Unexpected error from reminder gateway")
        return GatewayResult(error=f"{type(exc).__name__}: {exc}")
    return GatewayResult(occurrences=list(occurrences))


class HttpReminderGateway:
    """Calls the backend's ``get_pending_dose_reminders`` procedure over HTTP.

    The backend exposes its commands as ``POST {base_url}/invoke/{name}``
    with a JSON array of dose schedules in the response body.

    Args:
        base_url: Backend root URL (default from settings).
        timeout: Request timeout in seconds (default from settings).
        client: Optional shared ``httpx.AsyncClient``. When omitted a client
            is created per request.
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._base_url = (base_url or settings.reminder_backend_url).rstrip("/")
        self._timeout = timeout if timeout is not None else settings.reminder_request_timeout_seconds
        self._client = client

    @property
    def url(self) -> str:
        return f"{self._base_url}/invoke/{PENDING_REMINDERS_PROCEDURE}"

    async def fetch_due(self) -> list[ReminderOccurrence]:
        """POST the procedure call and parse the due occurrences."""
        try:
            if self._client is not None:
                resp = await self._client.post(self.url, json={}, timeout=self._timeout)
            else:
                async with httpx.AsyncClient(timeout=self._timeout) as client:
                    resp = await client.post(self.url, json={})
            resp.raise_for_status()
        except httpx.HTTPStatusError as exc:
            msg = f"Backend returned HTTP {exc.response.status_code}"
            raise GatewayError(msg) from exc
        except httpx.HTTPError as exc:
            msg = f"Backend request failed: {type(exc).__name__}"
            raise GatewayError(msg) from exc

        try:
            payload = resp.json()
        except ValueError as exc:
            msg = "Backend returned a non-JSON response"
            raise GatewayError(msg) from exc

        if not isinstance(payload, list):
            msg = f"Expected a list of reminders, got {type(payload).__name__}"
            raise GatewayError(msg)

        try:
            occurrences = [ReminderOccurrence.model_validate(item) for item in payload]
        except ValidationError as exc:
            msg = f"Malformed reminder payload ({exc.error_count()} error(s))"
            raise GatewayError(msg) from exc

        logger.debug("Backend reported %d due reminder(s)", len(occurrences))
        return occurrences
