"""ReminderOccurrence data model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ReminderOccurrence(BaseModel):
    """One due occurrence of a recurring dose schedule.

    Parsed from the backend's camelCase payload; Python code uses the
    snake_case attribute names. Fields the reminder service does not use
    (``createdAt``, ``updatedAt``...) are ignored.

    Attributes:
        schedule_id: Identifier of the recurring dose schedule (wire ``id``).
        protocol_id: Owning protocol, when the backend reports it.
        protocol_name: Display name of the protocol.
        peptide_name: Display name of the peptide.
        time_of_day: ``"HH:MM"`` daily slot this occurrence belongs to.
        amount_mg: Dose amount, optional for display.
        site: Injection site, if recorded.
        days_of_week: Days the schedule runs on (0=Sunday .. 6=Saturday).
        notes: Free-form schedule notes.
        enabled: Whether the schedule is enabled on the backend.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    schedule_id: str = Field(alias="id")
    protocol_id: str | None = Field(default=None, alias="protocolId")
    protocol_name: str = Field(default="", alias="protocolName")
    peptide_name: str = Field(alias="peptideName")
    time_of_day: str = Field(alias="timeOfDay")
    amount_mg: float | None = Field(default=None, alias="amountMg")
    site: str | None = None
    days_of_week: list[int] = Field(default_factory=list, alias="daysOfWeek")
    notes: str | None = None
    enabled: bool = True

    @property
    def notification_key(self) -> str:
        return notification_key(self.schedule_id, self.time_of_day)


def notification_key(schedule_id: str, time_of_day: str) -> str:
    """Build the dedup key identifying one occurrence of a schedule."""
    return f"{schedule_id}-{time_of_day}"
