"""Command line for Halo CRM.

Usage:
    halo seed                   # Load demo data
    halo agenda --date 2024-03-04
    halo week                   # Current Sunday-start week
    halo earnings
"""

import argparse
import sys
from datetime import date
from typing import Optional, Sequence

from dotenv import load_dotenv
from rich.console import Console
from rich.table import Table

from .container import Container, set_container
from .config.settings import BusinessSettings
from .db.seed import seed_demo
from .repositories.sqlite.factory import create_sqlite_container
from .scheduling.dashboard import financial_summary
from .scheduling.occurrences import (
    resolve_occurrences_for_date,
    resolve_occurrences_for_range,
)
from .scheduling.pricing import resolve_price
from .scheduling.recurrence import parse_local_date, week_dates

console = Console()


def _agenda_table(title: str, resolved, services) -> Table:
    table = Table(title=title)
    table.add_column("Time", style="cyan")
    table.add_column("Client")
    table.add_column("Service")
    table.add_column("Min", justify="right")
    table.add_column("Status")
    table.add_column("Price", justify="right", style="green")

    for item in resolved:
        appt = item.appointment
        service = services.get(appt.service_id)
        name = service.name if service else ("Blocked" if appt.is_blocked else "Unknown")
        repeat = " ↻" if appt.is_recurring else ""
        table.add_row(
            item.display_time,
            ", ".join(appt.client_names) + repeat,
            name,
            str(item.duration_minutes),
            appt.status,
            f"${float(resolve_price(appt, service)):.2f}",
        )
    return table


def cmd_seed(container: Container, args) -> int:
    counts = seed_demo(container)
    console.print(f"[green]Seeded[/green] {counts}")
    return 0


def cmd_agenda(container: Container, args) -> int:
    services = {s.id: s for s in container.services.list_all()}
    resolved = resolve_occurrences_for_date(
        container.appointments.list_all(),
        args.date,
        status_filter=args.status,
        services=services,
    )
    if not resolved:
        console.print(f"No appointments on {args.date}.")
        return 0
    console.print(_agenda_table(args.date, resolved, services))
    return 0


def cmd_week(container: Container, args) -> int:
    services = {s.id: s for s in container.services.list_all()}
    days = week_dates(args.date)
    by_day = resolve_occurrences_for_range(
        container.appointments.list_all(),
        days[0],
        days[-1],
        status_filter=args.status,
        services=services,
    )
    for day, resolved in by_day.items():
        if resolved:
            console.print(_agenda_table(day, resolved, services))
        else:
            console.print(f"[dim]{day}: free[/dim]")
    return 0


def cmd_earnings(container: Container, args) -> int:
    settings = BusinessSettings.load(container.config)
    summary = financial_summary(
        container.appointments.list_all(),
        container.services.list_all(),
        container.expenses.list_expenses(),
        container.expenses.list_bonus_entries(),
        settings.tax_rate,
        settings.monthly_revenue_goal,
        settings.deductible_categories,
    )
    table = Table(title=f"{settings.business_name} earnings")
    table.add_column("Item")
    table.add_column("Amount", justify="right")
    for label, value in summary.to_dict().items():
        if label == "goal_progress":
            table.add_row("goal progress", f"{value:.1f}%")
        else:
            table.add_row(label.replace("_", " "), f"${value:,.2f}")
    console.print(table)
    return 0


def _valid_date(value: str) -> str:
    if parse_local_date(value) is None:
        raise argparse.ArgumentTypeError(f"invalid date '{value}', expected YYYY-MM-DD")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="halo", description="Halo CRM scheduling")
    parser.add_argument("--db", help="SQLite database path (default: HALO_DB_PATH)")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("seed", help="Load demo data").set_defaults(func=cmd_seed)

    for name, func, help_text in (
        ("agenda", cmd_agenda, "Appointments for one day"),
        ("week", cmd_week, "Appointments for the week containing a day"),
    ):
        cmd = sub.add_parser(name, help=help_text)
        cmd.add_argument("--date", type=_valid_date, default=date.today().isoformat())
        cmd.add_argument("--status", default=None, help="Only show this status")
        cmd.set_defaults(func=func)

    sub.add_parser("earnings", help="Revenue, expenses and tax").set_defaults(
        func=cmd_earnings
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    load_dotenv()
    args = build_parser().parse_args(argv)
    container = create_sqlite_container(args.db)
    set_container(container)
    return args.func(container, args)


if __name__ == "__main__":
    sys.exit(main())
