"""Appointment entity - a booked or blocked time slot, optionally recurring."""

import json
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Literal, NamedTuple, Optional

from ..constants.appointments import BLOCK_SERVICE_ID, OVERRIDE_SUFFIXES


AppointmentStatus = Literal["CONFIRMED", "PENDING", "COMPLETED", "CANCELLED", "BLOCKED"]
AppointmentKind = Literal["series", "override", "standalone"]
Frequency = Literal["WEEKLY", "MONTHLY"]

STATUSES: tuple[str, ...] = ("CONFIRMED", "PENDING", "COMPLETED", "CANCELLED", "BLOCKED")


class SeriesKey(NamedTuple):
    """Associates override instances with the series they override."""

    time: str
    service_id: str
    client_name: str


@dataclass
class RecurrenceRule:
    """Repeat every `interval` weeks or months, optionally on several weekdays."""

    frequency: Frequency
    interval: int = 1
    days_of_week: list[int] = field(default_factory=list)  # 0=Sunday..6=Saturday
    end_date: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict) -> "RecurrenceRule":
        """Creates a RecurrenceRule from a dictionary."""
        return cls(
            frequency=data["frequency"],
            interval=int(data.get("interval", 1)),
            days_of_week=list(data.get("days_of_week") or []),
            end_date=data.get("end_date") or None,
        )

    def to_dict(self) -> dict:
        """Converts to dictionary."""
        return {
            "frequency": self.frequency,
            "interval": self.interval,
            "days_of_week": list(self.days_of_week),
            "end_date": self.end_date,
        }


def _load_json(value, default):
    if value is None or value == "":
        return default
    if isinstance(value, (list, dict)):
        return value
    return json.loads(value)


@dataclass
class Appointment:
    """A booking on a date and time; a recurrence rule turns it into a series.

    Dates (YYYY-MM-DD) and times (HH:MM) are kept as entered.
    """

    id: str
    date: str
    time: str
    service_id: str
    client_ids: list[str] = field(default_factory=list)
    client_names: list[str] = field(default_factory=list)
    status: AppointmentStatus = "CONFIRMED"
    recurrence: Optional[RecurrenceRule] = None
    number_of_people: Optional[int] = None
    override_price: Optional[Decimal] = None
    notes: Optional[str] = None
    kind: Optional[AppointmentKind] = None
    parent_id: Optional[str] = None

    def __post_init__(self):
        if self.kind is None:
            self.kind = self._infer_kind()

    def _infer_kind(self) -> AppointmentKind:
        if self.recurrence is not None:
            return "series"
        if self.id.endswith(OVERRIDE_SUFFIXES):
            return "override"
        return "standalone"

    @classmethod
    def from_dict(cls, data: dict) -> "Appointment":
        """Creates an Appointment from a dictionary (database row or payload)."""
        recurrence = _load_json(data.get("recurrence"), None)
        client_ids = _load_json(data.get("client_ids"), [])
        client_names = _load_json(data.get("client_names"), [])

        # Records written before multi-client support carry a single client.
        if not client_ids and data.get("client_id"):
            client_ids = [data["client_id"]]
        if not client_names and data.get("client_name"):
            client_names = [data["client_name"]]

        override_price = data.get("override_price")
        if override_price is not None and not isinstance(override_price, Decimal):
            override_price = Decimal(str(override_price))

        return cls(
            id=data["id"],
            date=data["date"],
            time=data["time"],
            service_id=data["service_id"],
            client_ids=list(client_ids),
            client_names=list(client_names),
            status=data.get("status", "CONFIRMED"),
            recurrence=RecurrenceRule.from_dict(recurrence) if recurrence else None,
            number_of_people=data.get("number_of_people"),
            override_price=override_price,
            notes=data.get("notes"),
            kind=data.get("kind"),
            parent_id=data.get("parent_id"),
        )

    def to_dict(self) -> dict:
        """Converts to dictionary."""
        return {
            "id": self.id,
            "date": self.date,
            "time": self.time,
            "service_id": self.service_id,
            "client_ids": list(self.client_ids),
            "client_names": list(self.client_names),
            "status": self.status,
            "recurrence": self.recurrence.to_dict() if self.recurrence else None,
            "number_of_people": self.number_of_people,
            "override_price": self.override_price,
            "notes": self.notes,
            "kind": self.kind,
            "parent_id": self.parent_id,
        }

    @property
    def primary_client_name(self) -> str:
        return self.client_names[0] if self.client_names else ""

    @property
    def series_key(self) -> SeriesKey:
        return SeriesKey(self.time, self.service_id, self.primary_client_name)

    @property
    def is_recurring(self) -> bool:
        return self.recurrence is not None

    @property
    def is_override(self) -> bool:
        """True for a one-off instance standing in for a series occurrence."""
        return self.kind == "override" and self.recurrence is None

    @property
    def is_blocked(self) -> bool:
        return self.service_id == BLOCK_SERVICE_ID or self.status == "BLOCKED"


@dataclass
class ResolvedAppointment:
    """An appointment as shown on one calendar date."""

    appointment: Appointment
    display_time: str
    sort_key: str
    duration_minutes: int

    @property
    def id(self) -> str:
        return self.appointment.id

    def to_dict(self) -> dict:
        """Converts to dictionary."""
        data = self.appointment.to_dict()
        data["display_time"] = self.display_time
        data["duration_minutes"] = self.duration_minutes
        return data
