"""Recurrence matching for appointment series.

Calendar dates are compared as local dates pinned to noon. A bare YYYY-MM-DD
read as UTC midnight shows up as the previous day in western timezones, which
shifts the weekday and breaks weekday based rules.
"""

from datetime import date, datetime, time, timedelta
from typing import Optional, Union

from ..config import logger as log
from ..domain.appointment import Appointment

NOON = time(12, 0)

DateLike = Union[str, date]


def to_date_str(value: DateLike) -> str:
    """Normalizes a date or datetime into its YYYY-MM-DD string."""
    if isinstance(value, datetime):
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()
    return value


def parse_local_date(value: Optional[DateLike]) -> Optional[datetime]:
    """Parses a calendar date as local noon; None when it cannot be parsed."""
    if value is None:
        return None
    if isinstance(value, datetime):
        return datetime.combine(value.date(), NOON)
    if isinstance(value, date):
        return datetime.combine(value, NOON)
    try:
        return datetime.combine(date.fromisoformat(value.strip()), NOON)
    except (AttributeError, ValueError):
        return None


def weekday_index(moment: datetime) -> int:
    """Weekday with Sunday as 0 and Saturday as 6."""
    return (moment.weekday() + 1) % 7


def week_start(moment: datetime) -> datetime:
    """The Sunday (at noon) starting the week that contains `moment`."""
    sunday = moment - timedelta(days=weekday_index(moment))
    return datetime.combine(sunday.date(), NOON)


def week_dates(anchor: DateLike) -> list[date]:
    """The seven dates of the Sunday-start week containing `anchor`."""
    parsed = parse_local_date(anchor)
    if parsed is None:
        return []
    start = week_start(parsed).date()
    return [start + timedelta(days=offset) for offset in range(7)]


def _is_multiple(count: int, interval: int) -> bool:
    return count >= 0 and count % interval == 0


def is_occurrence(appointment: Appointment, target_date: DateLike) -> bool:
    """Checks whether an appointment, or its series, falls on `target_date`."""
    target_str = to_date_str(target_date)
    if appointment.date == target_str:
        return True

    rule = appointment.recurrence
    if rule is None:
        return False

    base = parse_local_date(appointment.date)
    target = parse_local_date(target_str)
    if base is None or target is None:
        log.debug(
            "recurrence",
            "Unparseable date, exact match only",
            appointment_id=appointment.id,
            base=appointment.date,
            target=target_str,
        )
        return False

    if target < base:
        return False

    if rule.end_date:
        end = parse_local_date(rule.end_date)
        if end is not None and target > end:
            return False

    if rule.interval < 1:
        return False

    if rule.frequency == "WEEKLY":
        if rule.days_of_week:
            if weekday_index(target) not in rule.days_of_week:
                return False
            weeks = (week_start(target) - week_start(base)).days // 7
            return _is_multiple(weeks, rule.interval)

        days = (target - base).days
        if days % 7 != 0:
            return False
        return _is_multiple(days // 7, rule.interval)

    if rule.frequency == "MONTHLY":
        if target.day != base.day:
            return False
        months = (target.year - base.year) * 12 + (target.month - base.month)
        return _is_multiple(months, rule.interval)

    return False
