"""Dependency injection container for repository access."""

from dataclasses import dataclass
from typing import Optional

from .repositories.interfaces.system_config_repository import ISystemConfigRepository
from .repositories.interfaces.service_repository import IServiceRepository
from .repositories.interfaces.appointment_repository import IAppointmentRepository
from .repositories.interfaces.expense_repository import IExpenseRepository


@dataclass
class Container:
    """Holds all repository instances for dependency injection."""

    config: ISystemConfigRepository
    services: IServiceRepository
    appointments: IAppointmentRepository
    expenses: IExpenseRepository


_container: Optional[Container] = None


def get_container() -> Container:
    """Returns the global container instance.

    Raises:
        RuntimeError: If container has not been initialized.
    """
    if _container is None:
        raise RuntimeError(
            "Container not initialized. Call set_container() in the application entry point."
        )
    return _container


def set_container(container: Container) -> None:
    """Sets the global container instance."""
    global _container
    _container = container


def reset_container() -> None:
    """Resets the global container. Useful for testing."""
    global _container
    _container = None
