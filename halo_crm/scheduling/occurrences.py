"""Expands stored appointments into what a calendar shows on a given date."""

from dataclasses import replace
from datetime import timedelta
from typing import Iterable, Mapping, Optional, Union

from ..config import logger as log
from ..constants.appointments import ALL_STATUSES, FALLBACK_DURATION_MINUTES
from ..domain.appointment import Appointment, ResolvedAppointment, SeriesKey
from ..domain.service import Service
from .recurrence import DateLike, is_occurrence, parse_local_date, to_date_str

OverrideIndex = dict[SeriesKey, set[str]]
ServiceLookup = Union[Mapping[str, Service], Iterable[Service], None]


def format_time(time_24: str) -> str:
    """Formats HH:MM as a 12 hour clock time, e.g. '14:30' -> '2:30 PM'."""
    if not time_24:
        return ""
    try:
        hours, minutes = time_24.split(":")[:2]
        h, m = int(hours), int(minutes)
    except ValueError:
        return time_24
    suffix = "PM" if h >= 12 else "AM"
    return f"{h % 12 or 12}:{m:02d} {suffix}"


def index_services(services: ServiceLookup) -> dict[str, Service]:
    if services is None:
        return {}
    if isinstance(services, Mapping):
        return dict(services)
    return {service.id: service for service in services}


def build_override_index(appointments: Iterable[Appointment]) -> OverrideIndex:
    """Maps each series key to the dates where a one-off instance replaces it."""
    index: OverrideIndex = {}
    for appointment in appointments:
        if appointment.is_override:
            index.setdefault(appointment.series_key, set()).add(appointment.date)
    return index


def is_overridden(appointment: Appointment, date_str: str, index: OverrideIndex) -> bool:
    """True when a recurring appointment is replaced by an override on `date_str`."""
    if not appointment.is_recurring:
        return False
    return date_str in index.get(appointment.series_key, ())


def _matches_filter(appointment: Appointment, status_filter: Optional[str]) -> bool:
    if not status_filter or status_filter == ALL_STATUSES:
        return True
    return appointment.status == status_filter


def _resolve(
    appointments: list[Appointment],
    target: str,
    status_filter: Optional[str],
    services: dict[str, Service],
    index: OverrideIndex,
) -> list[ResolvedAppointment]:
    resolved: list[ResolvedAppointment] = []
    seen: set[str] = set()

    for appointment in appointments:
        if appointment.id in seen:
            continue
        if not _matches_filter(appointment, status_filter):
            continue
        if not is_occurrence(appointment, target):
            continue
        if is_overridden(appointment, target, index):
            log.debug(
                "occurrences",
                "Series occurrence overridden",
                appointment_id=appointment.id,
                date=target,
            )
            continue

        display = appointment
        if appointment.is_recurring and appointment.date != target:
            display = replace(appointment, date=target)

        service = services.get(appointment.service_id)
        resolved.append(
            ResolvedAppointment(
                appointment=display,
                display_time=format_time(appointment.time),
                sort_key=appointment.time,
                duration_minutes=(
                    service.duration_minutes if service else FALLBACK_DURATION_MINUTES
                ),
            )
        )
        seen.add(appointment.id)

    resolved.sort(key=lambda item: item.sort_key)
    return resolved


def resolve_occurrences_for_date(
    appointments: Iterable[Appointment],
    target_date: DateLike,
    status_filter: Optional[str] = None,
    services: ServiceLookup = None,
) -> list[ResolvedAppointment]:
    """Returns the appointments visible on `target_date`, ordered by time.

    Recurring series are expanded onto the date unless a completed or
    cancelled override covers it. Matches for a series on a date other than
    its start are returned as copies carrying the viewed date; the stored
    appointments are never modified.

    Args:
        appointments: Full appointment collection.
        target_date: Date to resolve, YYYY-MM-DD or a date.
        status_filter: Only keep this status; None or "ALL" keeps everything.
        services: Services used to look up durations.

    Returns:
        Resolved appointments sorted by start time.
    """
    appointments = list(appointments)
    index = build_override_index(appointments)
    return _resolve(
        appointments,
        to_date_str(target_date),
        status_filter,
        index_services(services),
        index,
    )


def resolve_occurrences_for_range(
    appointments: Iterable[Appointment],
    start_date: DateLike,
    end_date: DateLike,
    status_filter: Optional[str] = None,
    services: ServiceLookup = None,
) -> dict[str, list[ResolvedAppointment]]:
    """Resolves every date from `start_date` to `end_date` inclusive.

    Returns:
        Mapping of YYYY-MM-DD to that day's resolved appointments, in date order.
        Empty when either bound cannot be parsed.
    """
    start = parse_local_date(start_date)
    end = parse_local_date(end_date)
    if start is None or end is None:
        log.warn("occurrences", "Invalid range", start=start_date, end=end_date)
        return {}

    appointments = list(appointments)
    index = build_override_index(appointments)
    service_map = index_services(services)

    days: dict[str, list[ResolvedAppointment]] = {}
    current = start.date()
    while current <= end.date():
        key = current.isoformat()
        days[key] = _resolve(appointments, key, status_filter, service_map, index)
        current += timedelta(days=1)

    log.debug(
        "occurrences",
        "Range resolved",
        start=start.date(),
        end=end.date(),
        total=sum(len(items) for items in days.values()),
    )
    return days
