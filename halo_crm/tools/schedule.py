"""Tools for reading and changing the appointment schedule."""

import uuid
from datetime import date

from langchain_core.tools import tool
from pydantic import ValidationError

from ..container import get_container
from ..config import logger as log
from ..domain.appointment import STATUSES
from ..errors import SeriesMutationError
from ..models.appointment import AppointmentInput
from ..scheduling.lifecycle import set_status
from ..scheduling.occurrences import resolve_occurrences_for_date
from ..scheduling.pricing import resolve_price
from ..scheduling.recurrence import parse_local_date


@tool
def get_schedule(date: str = "") -> dict | str:
    """Gets the appointment schedule for a date, recurring appointments included.

    Args:
        date: Date in YYYY-MM-DD format. Defaults to today.

    Returns:
        Appointments for the date ordered by time, or an error message.
    """
    target = date or _today()
    if parse_local_date(target) is None:
        return f"Invalid date '{date}'. Use YYYY-MM-DD."

    log.info("tools.schedule", "get_schedule called", date=target)
    container = get_container()
    services = {s.id: s for s in container.services.list_all()}
    resolved = resolve_occurrences_for_date(
        container.appointments.list_all(), target, services=services
    )

    appointments = []
    for item in resolved:
        appt = item.appointment
        service = services.get(appt.service_id)
        appointments.append(
            {
                "appointment_id": appt.id,
                "time": item.display_time,
                "client": appt.primary_client_name,
                "clients": list(appt.client_names),
                "service": service.name if service else "Unknown Service",
                "duration_minutes": item.duration_minutes,
                "status": appt.status,
                "recurring": appt.is_recurring,
                "price": float(resolve_price(appt, service)),
            }
        )

    return {"date": target, "count": len(appointments), "appointments": appointments}


@tool
def book_appointment(
    client_name: str,
    service_name: str,
    date: str,
    time: str,
    notes: str = "",
) -> dict | str:
    """Books a new appointment for a client.

    Args:
        client_name: Name of the client.
        service_name: Name of the service (partial match OK).
        date: Date in YYYY-MM-DD format.
        time: Time in HH:MM 24-hour format (e.g. 14:30).
        notes: Optional notes.

    Returns:
        Booked appointment details or error message.
    """
    log.info(
        "tools.schedule",
        "book_appointment called",
        client=client_name,
        service=service_name,
        date=date,
        time=time,
    )
    container = get_container()

    service = container.services.find_by_name(service_name)
    if not service:
        names = [f"{s.name} ({s.price_formatted})" for s in container.services.list_all()]
        log.warn("tools.schedule", "Service not found", service_name=service_name)
        if names:
            return f"Service '{service_name}' not found. Available services: {', '.join(names)}"
        return f"Service '{service_name}' not found."

    try:
        payload = AppointmentInput(
            date=date,
            time=time,
            service_id=service.id,
            client_names=[client_name],
            number_of_people=1 if service.price_per_person else None,
            notes=notes,
        )
    except ValidationError as e:
        log.warn("tools.schedule", "Invalid booking", errors=e.error_count())
        return f"Invalid booking: {e.errors()[0]['msg']}"

    appointment = container.appointments.save(payload.to_domain(uuid.uuid4().hex[:9]))

    return {
        "success": True,
        "appointment_id": appointment.id,
        "details": {
            "client": client_name,
            "service": service.name,
            "date": appointment.date,
            "time": appointment.time,
            "duration_minutes": service.duration_minutes,
            "price": float(resolve_price(appointment, service)),
        },
    }


@tool
def update_appointment_status(appointment_id: str, status: str, date: str = "") -> dict | str:
    """Marks an appointment as completed, cancelled, confirmed, pending, or blocked.

    For a recurring appointment only one occurrence is changed, so the date
    of that occurrence is required and only COMPLETED or CANCELLED apply.

    Args:
        appointment_id: The appointment ID.
        status: New status (CONFIRMED, PENDING, COMPLETED, CANCELLED, BLOCKED).
        date: Occurrence date in YYYY-MM-DD format, required for recurring appointments.

    Returns:
        The updated appointment or error message.
    """
    status = status.strip().upper()
    if status not in STATUSES:
        return f"Invalid status '{status}'. Use one of: {', '.join(STATUSES)}."

    container = get_container()
    appointment = container.appointments.get_by_id(appointment_id)
    if not appointment:
        return f"Appointment {appointment_id} not found."

    if appointment.is_recurring and not date:
        return "This is a recurring appointment. Tell me which date to update (YYYY-MM-DD)."

    try:
        updated = set_status(
            container.appointments, appointment, status, on_date=date or None
        )
    except SeriesMutationError as e:
        log.warn("tools.schedule", "Rejected status change", error=str(e))
        return f"Could not update: {e}"

    return {
        "success": True,
        "appointment_id": updated.id,
        "series_id": updated.parent_id,
        "date": updated.date,
        "time": updated.time,
        "status": updated.status,
    }


def _today() -> str:
    return date.today().isoformat()
