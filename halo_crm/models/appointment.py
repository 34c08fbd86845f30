"""
Validated input for creating appointments and recurrence rules.
"""

import datetime as dt
from decimal import Decimal
from typing import Literal, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from ..domain.appointment import Appointment, RecurrenceRule


class RecurrenceRuleInput(BaseModel):
    """
    Repeat rule entered on the booking form.
    """

    frequency: Literal["WEEKLY", "MONTHLY"] = Field(..., description="Repeat unit")
    interval: int = Field(default=1, ge=1, description="Repeat every N weeks/months")
    days_of_week: list[int] = Field(
        default_factory=list, description="Weekdays, 0=Sunday..6=Saturday (WEEKLY only)"
    )
    end_date: Optional[dt.date] = Field(None, description="Last date, inclusive")

    @field_validator("days_of_week")
    @classmethod
    def check_weekdays(cls, value: list[int]) -> list[int]:
        if any(day < 0 or day > 6 for day in value):
            raise ValueError("days_of_week must be between 0 (Sunday) and 6 (Saturday)")
        return sorted(set(value))

    @model_validator(mode="after")
    def weekdays_only_for_weekly(self) -> "RecurrenceRuleInput":
        if self.frequency != "WEEKLY" and self.days_of_week:
            raise ValueError("days_of_week is only allowed for WEEKLY recurrence")
        return self

    def to_domain(self) -> RecurrenceRule:
        return RecurrenceRule(
            frequency=self.frequency,
            interval=self.interval,
            days_of_week=list(self.days_of_week),
            end_date=self.end_date.isoformat() if self.end_date else None,
        )


class AppointmentInput(BaseModel):
    """
    New appointment or blocked time as submitted by a form or the assistant.
    """

    date: dt.date = Field(..., description="Start date (YYYY-MM-DD)")
    time: str = Field(..., pattern=r"^\d{2}:\d{2}$", description="Start time HH:MM")
    service_id: str = Field(..., min_length=1)
    client_ids: list[str] = Field(default_factory=list)
    client_names: list[str] = Field(..., min_length=1, description="Primary client first")
    status: Literal["CONFIRMED", "PENDING", "COMPLETED", "CANCELLED", "BLOCKED"] = Field(
        default="CONFIRMED"
    )
    recurrence: Optional[RecurrenceRuleInput] = None
    number_of_people: Optional[int] = Field(None, ge=1)
    override_price: Optional[Decimal] = Field(None, ge=0)
    notes: Optional[str] = None

    model_config = {"str_strip_whitespace": True}

    @field_validator("time")
    @classmethod
    def check_clock(cls, value: str) -> str:
        dt.time.fromisoformat(value)
        return value

    @model_validator(mode="after")
    def end_after_start(self) -> "AppointmentInput":
        if self.recurrence and self.recurrence.end_date and self.recurrence.end_date < self.date:
            raise ValueError("recurrence end_date is before the appointment date")
        return self

    def to_domain(self, appointment_id: str) -> Appointment:
        """Builds the domain appointment under the given id."""
        return Appointment(
            id=appointment_id,
            date=self.date.isoformat(),
            time=self.time,
            service_id=self.service_id,
            client_ids=list(self.client_ids),
            client_names=list(self.client_names),
            status=self.status,
            recurrence=self.recurrence.to_domain() if self.recurrence else None,
            number_of_people=self.number_of_people,
            override_price=self.override_price,
            notes=self.notes or None,
        )
