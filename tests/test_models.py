"""Tests for appointment input validation."""

from decimal import Decimal

import pytest
from pydantic import ValidationError

from halo_crm.models import AppointmentInput, RecurrenceRuleInput


def booking(**overrides):
    data = {
        "date": "2024-03-04",
        "time": "10:00",
        "service_id": "s1",
        "client_names": ["Jane"],
    }
    data.update(overrides)
    return data


def test_valid_series_to_domain():
    payload = AppointmentInput(
        **booking(
            client_names=["Jane"],
            notes="  ",
            recurrence={"frequency": "WEEKLY", "days_of_week": [4, 1, 1], "end_date": "2024-06-30"},
            override_price="99.50",
        )
    )

    appointment = payload.to_domain("abc123")

    assert appointment.id == "abc123"
    assert appointment.date == "2024-03-04"
    assert appointment.client_names == ["Jane"]
    assert appointment.kind == "series"
    assert appointment.recurrence.days_of_week == [1, 4]
    assert appointment.recurrence.end_date == "2024-06-30"
    assert appointment.override_price == Decimal("99.50")
    assert appointment.notes is None


def test_standalone_to_domain():
    appointment = AppointmentInput(**booking()).to_domain("one")
    assert appointment.kind == "standalone"
    assert appointment.status == "CONFIRMED"


@pytest.mark.parametrize("time", ["9:00", "25:00", "10:60", "ten"])
def test_rejects_bad_times(time):
    with pytest.raises(ValidationError):
        AppointmentInput(**booking(time=time))


def test_rejects_bad_date_and_missing_client():
    with pytest.raises(ValidationError):
        AppointmentInput(**booking(date="2024-02-31"))
    with pytest.raises(ValidationError):
        AppointmentInput(**booking(client_names=[]))


def test_rejects_end_before_start():
    with pytest.raises(ValidationError):
        AppointmentInput(
            **booking(recurrence={"frequency": "MONTHLY", "end_date": "2024-03-01"})
        )


def test_recurrence_rules():
    with pytest.raises(ValidationError):
        RecurrenceRuleInput(frequency="WEEKLY", interval=0)
    with pytest.raises(ValidationError):
        RecurrenceRuleInput(frequency="WEEKLY", days_of_week=[7])
    with pytest.raises(ValidationError):
        RecurrenceRuleInput(frequency="MONTHLY", days_of_week=[1])
    with pytest.raises(ValidationError):
        RecurrenceRuleInput(frequency="DAILY")

    rule = RecurrenceRuleInput(frequency="MONTHLY", interval=3).to_domain()
    assert rule.frequency == "MONTHLY"
    assert rule.interval == 3
    assert rule.end_date is None
