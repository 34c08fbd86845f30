"""Factory for creating Container with SQLite implementation."""

from typing import Optional

from ...container import Container
from .connection import SQLiteConnection
from .system_config_repository import SQLiteSystemConfigRepository
from .service_repository import SQLiteServiceRepository
from .appointment_repository import SQLiteAppointmentRepository
from .expense_repository import SQLiteExpenseRepository


def create_sqlite_container(db_path: Optional[str] = None) -> Container:
    """Creates a Container with SQLite repository implementations.

    Args:
        db_path: Path to database file. Falls back to HALO_DB_PATH.

    Returns:
        Container: Configured with SQLite repositories.
    """
    connection = SQLiteConnection(db_path)

    return Container(
        config=SQLiteSystemConfigRepository(connection),
        services=SQLiteServiceRepository(connection),
        appointments=SQLiteAppointmentRepository(connection),
        expenses=SQLiteExpenseRepository(connection),
    )
