"""Tests for dashboard lists and earnings."""

from decimal import Decimal

import pytest

from halo_crm.domain.appointment import RecurrenceRule
from halo_crm.domain.expense import BonusEntry, Expense
from halo_crm.scheduling.dashboard import (
    earnings_breakdown,
    financial_summary,
    past_appointments,
    today_agenda,
    upcoming_appointments,
)

from conftest import make_appointment

DEDUCTIBLE = ["Supplies", "Rent", "Marketing"]


@pytest.fixture
def completed():
    return [
        make_appointment(id="a1", status="COMPLETED"),
        make_appointment(
            id="a2",
            service_id="s4",
            status="COMPLETED",
            client_ids=[],
            client_names=["A", "B", "C"],
        ),
        make_appointment(id="a3", status="COMPLETED", override_price=Decimal("70")),
        make_appointment(id="a4", status="CONFIRMED"),
    ]


@pytest.fixture
def expenses():
    return [
        Expense("e1", "Shampoo", Decimal("120"), "2024-03-01", "Supplies"),
        Expense("e2", "Chair rent", Decimal("600"), "2024-03-01", "Rent"),
        Expense("e3", "Coffee", Decimal("30"), "2024-03-02", "Other"),
    ]


def test_financial_summary_with_write_offs(completed, services, expenses):
    bonus = [BonusEntry("b1", "Gift card", Decimal("50"), "2024-03-02")]

    summary = financial_summary(
        completed, services, expenses, bonus, Decimal("20"), Decimal("5000"), DEDUCTIBLE
    )

    assert summary.appointment_revenue == Decimal("350")
    assert summary.bonus_total == Decimal("50")
    assert summary.gross_revenue == Decimal("400")
    assert summary.total_expenses == Decimal("750")
    assert summary.total_write_offs == Decimal("720")
    assert summary.estimated_tax == Decimal("0")
    assert summary.net_earnings == Decimal("-350")
    assert summary.goal_progress == Decimal("8")


def test_financial_summary_tax_and_goal_cap(completed, services):
    summary = financial_summary(completed, services, [], [], Decimal("20"), Decimal("100"))

    assert summary.estimated_tax == Decimal("70")
    assert summary.net_earnings == Decimal("280")
    assert summary.goal_progress == Decimal("100")


def test_zero_goal_does_not_divide_by_zero(services):
    summary = financial_summary([], services, [], [], Decimal("20"), Decimal("0"))
    assert summary.goal_progress == Decimal("0")


def test_earnings_breakdown(completed, services, expenses):
    breakdown = earnings_breakdown(
        completed, services, expenses, [], Decimal("20"), Decimal("5000"), DEDUCTIBLE
    )

    assert breakdown["revenue_by_service"] == {
        "Bridal Party Styling": 195.0,
        "Signature Haircut": 155.0,
    }
    assert breakdown["expenses_by_category"] == {
        "Other": 30.0,
        "Rent": 600.0,
        "Supplies": 120.0,
    }
    assert breakdown["bonus_entries"] == []
    assert breakdown["totals"]["gross_revenue"] == 350.0


@pytest.fixture
def timeline():
    series = make_appointment(
        id="series-1", date="2024-03-06", recurrence=RecurrenceRule("WEEKLY", 1)
    )
    return [
        series,
        make_appointment(id="abc_completed", date="2024-03-06", status="COMPLETED"),
        make_appointment(id="tomorrow", date="2024-03-05", time="09:00", client_names=["Bo"]),
        make_appointment(id="last-week", date="2024-03-01", client_names=["Al"]),
        make_appointment(
            id="blocked", date="2024-03-02", service_id="BLOCK", status="BLOCKED"
        ),
        make_appointment(
            id="early-finish", date="2024-03-10", status="COMPLETED", client_names=["Cy"]
        ),
    ]


def test_upcoming_skips_overridden_series(timeline):
    upcoming = upcoming_appointments(timeline, "2024-03-04")
    assert [a.id for a in upcoming] == [
        "tomorrow",
        "abc_completed",
        "early-finish",
    ]


def test_past_is_newest_first_without_blocked_time(timeline):
    past = past_appointments(timeline, "2024-03-04")
    assert [a.id for a in past] == ["early-finish", "abc_completed", "last-week"]


def test_today_agenda_expands_series(timeline, services):
    agenda = today_agenda(timeline, "2024-03-13", services)
    assert [item.id for item in agenda] == ["series-1"]
    assert agenda[0].appointment.date == "2024-03-13"


def test_past_skips_block_service_whatever_its_status():
    appointments = [
        make_appointment(id="held", date="2024-03-01", service_id="BLOCK", status="CONFIRMED"),
        make_appointment(id="real", date="2024-03-01", time="11:00"),
    ]
    assert [a.id for a in past_appointments(appointments, "2024-03-04")] == ["real"]
