"""Dashboard lists and business earnings."""

from collections import defaultdict
from dataclasses import asdict, dataclass
from decimal import Decimal
from typing import Iterable, Optional

from ..domain.appointment import Appointment, ResolvedAppointment
from ..domain.expense import BonusEntry, Expense
from ..domain.service import Service
from .occurrences import (
    ServiceLookup,
    index_services,
    build_override_index,
    is_overridden,
    resolve_occurrences_for_date,
)
from .pricing import resolve_price
from .recurrence import DateLike, to_date_str

ZERO = Decimal("0")
HUNDRED = Decimal("100")


def today_agenda(
    appointments: Iterable[Appointment],
    today: DateLike,
    services: ServiceLookup = None,
) -> list[ResolvedAppointment]:
    """Everything happening today, recurring occurrences included."""
    return resolve_occurrences_for_date(appointments, today, services=services)


def upcoming_appointments(
    appointments: Iterable[Appointment], today: DateLike
) -> list[Appointment]:
    """Stored appointments dated after today, earliest first."""
    appointments = list(appointments)
    today_str = to_date_str(today)
    index = build_override_index(appointments)
    upcoming = [
        a
        for a in appointments
        if a.date > today_str and not is_overridden(a, a.date, index)
    ]
    return sorted(upcoming, key=lambda a: a.date)


def past_appointments(
    appointments: Iterable[Appointment], today: DateLike
) -> list[Appointment]:
    """Completed or already-dated appointments, newest first. Blocked time is skipped."""
    appointments = list(appointments)
    today_str = to_date_str(today)
    index = build_override_index(appointments)
    past = [
        a
        for a in appointments
        if not a.is_blocked
        and (a.status == "COMPLETED" or a.date < today_str)
        and not is_overridden(a, a.date, index)
    ]
    return sorted(past, key=lambda a: (a.date, a.time), reverse=True)


@dataclass
class FinancialSummary:
    """Money totals for the business."""

    appointment_revenue: Decimal
    bonus_total: Decimal
    gross_revenue: Decimal
    total_expenses: Decimal
    total_write_offs: Decimal
    estimated_tax: Decimal
    net_earnings: Decimal
    goal_progress: Decimal

    def to_dict(self) -> dict:
        return {name: float(value) for name, value in asdict(self).items()}


def completed_revenue(
    appointments: Iterable[Appointment], services: ServiceLookup = None
) -> Decimal:
    """Sum of prices of completed appointments."""
    service_map = index_services(services)
    return sum(
        (
            resolve_price(a, service_map.get(a.service_id))
            for a in appointments
            if a.status == "COMPLETED"
        ),
        ZERO,
    )


def financial_summary(
    appointments: Iterable[Appointment],
    services: ServiceLookup,
    expenses: Iterable[Expense],
    bonus_entries: Iterable[BonusEntry],
    tax_rate: Decimal,
    monthly_goal: Decimal,
    deductible_categories: Optional[Iterable[str]] = None,
) -> FinancialSummary:
    """Computes revenue, expenses, tax and net earnings.

    Revenue counts completed appointments and bonus income. Tax applies to
    revenue minus deductible expenses, never below zero. Net earnings are
    revenue minus all expenses minus tax.
    """
    expenses = list(expenses)
    deductible = set(deductible_categories or ())

    appointment_revenue = completed_revenue(appointments, services)
    bonus_total = sum((entry.amount for entry in bonus_entries), ZERO)
    gross = appointment_revenue + bonus_total

    total_expenses = sum((e.amount for e in expenses), ZERO)
    write_offs = sum((e.amount for e in expenses if e.category in deductible), ZERO)

    taxable = max(ZERO, gross - write_offs)
    tax = taxable * Decimal(tax_rate) / HUNDRED
    net = gross - total_expenses - tax

    goal = Decimal(monthly_goal) or Decimal("1")
    progress = min(HUNDRED, gross / goal * HUNDRED)

    return FinancialSummary(
        appointment_revenue=appointment_revenue,
        bonus_total=bonus_total,
        gross_revenue=gross,
        total_expenses=total_expenses,
        total_write_offs=write_offs,
        estimated_tax=tax,
        net_earnings=net,
        goal_progress=progress,
    )


def earnings_breakdown(
    appointments: Iterable[Appointment],
    services: ServiceLookup,
    expenses: Iterable[Expense],
    bonus_entries: Iterable[BonusEntry],
    tax_rate: Decimal,
    monthly_goal: Decimal,
    deductible_categories: Optional[Iterable[str]] = None,
) -> dict:
    """Revenue per service, expenses per category and the summary totals."""
    appointments = list(appointments)
    expenses = list(expenses)
    bonus_entries = list(bonus_entries)
    service_map: dict[str, Service] = index_services(services)

    by_service: dict[str, Decimal] = defaultdict(lambda: ZERO)
    for appointment in appointments:
        if appointment.status != "COMPLETED":
            continue
        service = service_map.get(appointment.service_id)
        name = service.name if service else "Unknown Service"
        by_service[name] += resolve_price(appointment, service)

    by_category: dict[str, Decimal] = defaultdict(lambda: ZERO)
    for expense in expenses:
        by_category[expense.category] += expense.amount

    summary = financial_summary(
        appointments,
        service_map,
        expenses,
        bonus_entries,
        tax_rate,
        monthly_goal,
        deductible_categories,
    )
    return {
        "revenue_by_service": {k: float(v) for k, v in sorted(by_service.items())},
        "expenses_by_category": {k: float(v) for k, v in sorted(by_category.items())},
        "bonus_entries": [
            {"description": b.description, "amount": float(b.amount), "date": b.date}
            for b in bonus_entries
        ],
        "totals": summary.to_dict(),
    }
