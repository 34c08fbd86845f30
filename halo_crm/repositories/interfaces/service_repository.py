"""Interface for service repository."""

from abc import ABC, abstractmethod
from typing import Optional

from ...domain.service import Service


class IServiceRepository(ABC):
    """Contract for service data access."""

    @abstractmethod
    def list_all(self) -> list[Service]:
        """Gets all services."""
        pass

    @abstractmethod
    def get_by_id(self, service_id: str) -> Optional[Service]:
        """Gets a service by ID."""
        pass

    @abstractmethod
    def find_by_name(self, name: str) -> Optional[Service]:
        """Finds a service by partial, case-insensitive name."""
        pass

    @abstractmethod
    def save(self, service: Service) -> Service:
        """Creates or replaces a service."""
        pass
