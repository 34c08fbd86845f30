"""Interface for appointment repository."""

from abc import ABC, abstractmethod
from typing import Optional

from ...domain.appointment import Appointment


class IAppointmentRepository(ABC):
    """Contract for appointment storage."""

    @abstractmethod
    def list_all(self) -> list[Appointment]:
        """Gets every stored appointment, series and overrides included."""
        pass

    @abstractmethod
    def get_by_id(self, appointment_id: str) -> Optional[Appointment]:
        """Gets an appointment by ID."""
        pass

    @abstractmethod
    def save(self, appointment: Appointment) -> Appointment:
        """Creates or replaces an appointment."""
        pass

    @abstractmethod
    def delete(self, appointment_id: str) -> bool:
        """Removes an appointment. Returns False when it did not exist."""
        pass
