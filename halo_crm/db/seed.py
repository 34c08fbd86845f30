"""
Demo data for a small hair studio.

Creates services, a weekly recurring client with one completed occurrence,
a few one-off bookings, blocked time and expenses.

Run: halo seed
"""

from datetime import date, timedelta
from decimal import Decimal

from ..container import Container
from ..config import logger as log
from ..constants.config_keys import ConfigDefaults, ConfigKeys
from ..domain.appointment import Appointment, RecurrenceRule
from ..domain.expense import BonusEntry, Expense
from ..domain.service import Service
from ..scheduling.lifecycle import complete_occurrence
from ..scheduling.recurrence import week_dates


SERVICES = [
    Service("s1", "Signature Haircut", Decimal("85"), 60, "Wash, cut, and style."),
    Service("s2", "Color Consultation", Decimal("40"), 30, "Expert color matching."),
    Service("s3", "Full Balayage", Decimal("250"), 180, "Hand-painted highlights."),
    Service("s4", "Bridal Party Styling", Decimal("65"), 90, "Per guest.", price_per_person=True),
]


def seed_demo(container: Container, today: date | None = None) -> dict:
    """Loads demo data anchored on the week containing `today`.

    Returns:
        Counts of created records.
    """
    today = today or date.today()
    sunday = week_dates(today)[0]
    monday = sunday + timedelta(days=1)

    for service in SERVICES:
        container.services.save(service)

    container.config.set(ConfigKeys.TAX_RATE, ConfigDefaults.TAX_RATE, "Estimated tax %")
    container.config.set(
        ConfigKeys.MONTHLY_REVENUE_GOAL, ConfigDefaults.MONTHLY_REVENUE_GOAL, "Revenue goal"
    )

    series = Appointment(
        id="emma-weekly",
        date=(monday - timedelta(weeks=2)).isoformat(),
        time="10:00",
        service_id="s1",
        client_ids=["c1"],
        client_names=["Emma Thompson"],
        recurrence=RecurrenceRule("WEEKLY", 1, [1, 4]),
    )
    appointments = [
        series,
        Appointment(
            id="chen-color",
            date=today.isoformat(),
            time="14:30",
            service_id="s2",
            client_ids=["c2"],
            client_names=["Michael Chen"],
        ),
        Appointment(
            id="bridal",
            date=(today + timedelta(days=3)).isoformat(),
            time="08:00",
            service_id="s4",
            client_names=["Sophia Rodriguez", "Ava Rodriguez", "Mia Lopez"],
        ),
        Appointment(
            id="lunch-block",
            date=sunday.isoformat(),
            time="12:00",
            service_id="BLOCK",
            status="BLOCKED",
            client_names=["Lunch"],
            recurrence=RecurrenceRule("WEEKLY", 1, [1, 2, 3, 4, 5]),
        ),
    ]
    for appointment in appointments:
        container.appointments.save(appointment)

    complete_occurrence(container.appointments, series, monday - timedelta(weeks=1))

    expenses = [
        Expense("e1", "Shampoo restock", Decimal("120"), today.isoformat(), "Supplies"),
        Expense("e2", "Chair rent", Decimal("600"), today.replace(day=1).isoformat(), "Rent"),
    ]
    for expense in expenses:
        container.expenses.save_expense(expense)
    container.expenses.save_bonus_entry(
        BonusEntry("b1", "Gift card sale", Decimal("50"), today.isoformat())
    )

    counts = {
        "services": len(SERVICES),
        "appointments": len(appointments) + 1,
        "expenses": len(expenses),
        "bonus_entries": 1,
    }
    log.info("seed", "Demo data loaded", **counts)
    return counts
