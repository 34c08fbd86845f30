"""Tests for status changes on appointments and series occurrences."""

from decimal import Decimal

import pytest

from halo_crm.domain.appointment import RecurrenceRule
from halo_crm.errors import SeriesMutationError
from halo_crm.scheduling.lifecycle import (
    cancel_occurrence,
    complete_occurrence,
    find_override,
    remove_appointment,
    set_status,
)
from halo_crm.scheduling.dashboard import completed_revenue
from halo_crm.scheduling.occurrences import resolve_occurrences_for_date

from conftest import make_appointment


@pytest.fixture
def series(container):
    appointment = make_appointment(
        id="series-1", date="2024-02-26", recurrence=RecurrenceRule("WEEKLY", 1)
    )
    return container.appointments.save(appointment)


def test_completing_a_display_copy_creates_override(container, series):
    copy = resolve_occurrences_for_date([series], "2024-03-04")[0].appointment

    override = complete_occurrence(container.appointments, copy)

    assert override.id.endswith("_completed")
    assert override.kind == "override"
    assert override.parent_id == "series-1"
    assert override.recurrence is None
    assert override.date == "2024-03-04"
    assert override.status == "COMPLETED"

    stored_series = container.appointments.get_by_id("series-1")
    assert stored_series.status == "CONFIRMED"
    assert stored_series.date == "2024-02-26"
    assert stored_series.recurrence is not None

    resolved = resolve_occurrences_for_date(container.appointments.list_all(), "2024-03-04")
    assert [item.id for item in resolved] == [override.id]


def test_cancel_occurrence_with_explicit_date(container, series):
    override = cancel_occurrence(container.appointments, series, "2024-03-11")

    assert override.id.endswith("_cancelled")
    assert container.appointments.get_by_id(override.id).status == "CANCELLED"
    other_day = resolve_occurrences_for_date(container.appointments.list_all(), "2024-03-18")
    assert [item.id for item in other_day] == ["series-1"]


def test_series_date_must_be_an_occurrence(container, series):
    with pytest.raises(SeriesMutationError):
        complete_occurrence(container.appointments, series, "2024-03-05")


def test_series_status_cannot_change_in_place(container, series):
    with pytest.raises(SeriesMutationError):
        set_status(container.appointments, series, "PENDING", "2024-03-04")
    assert len(container.appointments.list_all()) == 1


def test_standalone_status_updates_in_place(container):
    appointment = container.appointments.save(make_appointment(id="one-off"))

    updated = set_status(container.appointments, appointment, "PENDING")

    assert updated.id == "one-off"
    assert container.appointments.get_by_id("one-off").status == "PENDING"
    assert len(container.appointments.list_all()) == 1


def test_remove_appointment(container, series):
    assert remove_appointment(container.appointments, "series-1")
    assert not remove_appointment(container.appointments, "series-1")
    assert container.appointments.list_all() == []


def test_repeated_changes_keep_one_override_per_date(container, series):
    first = complete_occurrence(container.appointments, series, "2024-03-04")
    again = complete_occurrence(container.appointments, series, "2024-03-04")
    assert again.id == first.id
    revenue = completed_revenue(
        container.appointments.list_all(), container.services.list_all()
    )
    assert revenue == Decimal("85")

    cancelled = cancel_occurrence(container.appointments, series, "2024-03-04")

    assert cancelled.id == first.id
    resolved = resolve_occurrences_for_date(container.appointments.list_all(), "2024-03-04")
    assert [(item.id, item.appointment.status) for item in resolved] == [(first.id, "CANCELLED")]
    assert len(container.appointments.list_all()) == 2


def test_existing_override_found_by_series_key(container, series):
    legacy = make_appointment(id="old1234_completed", date="2024-03-11", status="COMPLETED")
    container.appointments.save(legacy)

    assert find_override(container.appointments, series, "2024-03-11").id == "old1234_completed"
    assert find_override(container.appointments, series, "2024-03-18") is None

    cancel_occurrence(container.appointments, series, "2024-03-11")
    assert container.appointments.get_by_id("old1234_completed").status == "CANCELLED"
    assert len(container.appointments.list_all()) == 2
