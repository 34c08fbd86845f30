"""Price of an appointment given its service."""

from decimal import Decimal
from typing import Optional

from ..domain.appointment import Appointment
from ..domain.service import Service


def headcount(appointment: Appointment) -> int:
    """People billed for a per-person service.

    Uses the explicit headcount, then the number of client ids, then the number
    of client names, then 1.
    """
    return (
        appointment.number_of_people
        or len(appointment.client_ids)
        or len(appointment.client_names)
        or 1
    )


def resolve_price(appointment: Appointment, service: Optional[Service]) -> Decimal:
    """Returns what the appointment is worth. A manual override always wins."""
    if appointment.override_price is not None:
        return appointment.override_price
    if service is None:
        return Decimal("0")
    if service.price_per_person:
        return service.price * headcount(appointment)
    return service.price
