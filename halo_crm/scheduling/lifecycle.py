"""Status changes for appointments and single occurrences of a series.

A series is never edited to record what happened on one date. Completing or
cancelling one of its occurrences stores a separate override appointment for
that date instead, and the resolver hides the series there.
"""

import uuid
from dataclasses import replace
from typing import Optional

from ..config import logger as log
from ..constants.appointments import CANCELLED_SUFFIX, COMPLETED_SUFFIX
from ..domain.appointment import Appointment, AppointmentStatus
from ..errors import SeriesMutationError
from ..repositories.interfaces.appointment_repository import IAppointmentRepository
from .recurrence import DateLike, is_occurrence, to_date_str

_OVERRIDE_SUFFIX = {"COMPLETED": COMPLETED_SUFFIX, "CANCELLED": CANCELLED_SUFFIX}


def _short_id() -> str:
    return uuid.uuid4().hex[:7]


def materialize_override(
    series: Appointment, status: AppointmentStatus, on_date: str
) -> Appointment:
    """Builds the one-off instance recording `status` for one series date."""
    suffix = _OVERRIDE_SUFFIX.get(status)
    if suffix is None:
        raise SeriesMutationError(
            f"Only COMPLETED or CANCELLED can be recorded for one occurrence, got {status}"
        )
    return replace(
        series,
        id=f"{_short_id()}{suffix}",
        date=on_date,
        status=status,
        recurrence=None,
        kind="override",
        parent_id=series.id,
    )


def find_override(
    repository: IAppointmentRepository, series: Appointment, on_date: str
) -> Optional[Appointment]:
    """The stored override standing in for `series` on `on_date`, if any."""
    for candidate in repository.list_all():
        if not candidate.is_override or candidate.date != on_date:
            continue
        if candidate.parent_id == series.id or candidate.series_key == series.series_key:
            return candidate
    return None


def set_status(
    repository: IAppointmentRepository,
    appointment: Appointment,
    status: AppointmentStatus,
    on_date: Optional[DateLike] = None,
) -> Appointment:
    """Records a status change and returns the appointment that now holds it.

    Args:
        repository: Where appointments are stored.
        appointment: The stored appointment or a resolved display copy.
        status: New status.
        on_date: Viewed date for a series occurrence. Defaults to the
            appointment's own date, which for a display copy is the viewed date.

    Raises:
        SeriesMutationError: If a series would be changed in place, or the
            date is not one of its occurrences.
    """
    if not appointment.is_recurring:
        updated = replace(appointment, status=status)
        repository.save(updated)
        log.info(
            "lifecycle",
            "Status updated",
            appointment_id=appointment.id,
            status=status,
        )
        return updated

    target = to_date_str(on_date) if on_date is not None else appointment.date
    if not is_occurrence(appointment, target):
        raise SeriesMutationError(
            f"Series {appointment.id} does not occur on {target}"
        )

    existing = find_override(repository, appointment, target)
    if existing is not None:
        updated = replace(existing, status=status)
        repository.save(updated)
        log.info(
            "lifecycle",
            "Override status updated",
            series_id=appointment.id,
            override_id=existing.id,
            date=target,
            status=status,
        )
        return updated

    override = materialize_override(appointment, status, target)
    repository.save(override)
    log.info(
        "lifecycle",
        "Occurrence overridden",
        series_id=appointment.id,
        override_id=override.id,
        date=target,
        status=status,
    )
    return override


def complete_occurrence(
    repository: IAppointmentRepository,
    appointment: Appointment,
    on_date: Optional[DateLike] = None,
) -> Appointment:
    """Marks an appointment, or one occurrence of a series, as completed."""
    return set_status(repository, appointment, "COMPLETED", on_date)


def cancel_occurrence(
    repository: IAppointmentRepository,
    appointment: Appointment,
    on_date: Optional[DateLike] = None,
) -> Appointment:
    """Marks an appointment, or one occurrence of a series, as cancelled."""
    return set_status(repository, appointment, "CANCELLED", on_date)


def remove_appointment(repository: IAppointmentRepository, appointment_id: str) -> bool:
    """Deletes an appointment; removing a series removes every future occurrence."""
    removed = repository.delete(appointment_id)
    if not removed:
        log.warn("lifecycle", "Nothing to remove", appointment_id=appointment_id)
    return removed
