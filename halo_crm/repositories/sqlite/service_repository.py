"""SQLite implementation of ServiceRepository."""

from typing import Optional

from ..interfaces.service_repository import IServiceRepository
from ...domain.service import Service
from ...config import logger as log
from .connection import SQLiteConnection


class SQLiteServiceRepository(IServiceRepository):
    """SQLite implementation of service repository."""

    def __init__(self, connection: SQLiteConnection):
        self._conn = connection

    def list_all(self) -> list[Service]:
        """Gets all services."""
        log.debug("repo.service", "list_all")
        with self._conn.get_connection() as conn:
            cursor = conn.cursor()
            cursor.execute("SELECT * FROM services ORDER BY name")
            results = [Service.from_dict(dict(row)) for row in cursor.fetchall()]
            log.debug("repo.service", "list_all result", count=len(results))
            return results

    def get_by_id(self, service_id: str) -> Optional[Service]:
        """Gets a service by ID."""
        log.debug("repo.service", "get_by_id", service_id=service_id)
        with self._conn.get_connection() as conn:
            cursor = conn.cursor()
            cursor.execute("SELECT * FROM services WHERE id = ?", (service_id,))
            row = cursor.fetchone()
            return Service.from_dict(dict(row)) if row else None

    def find_by_name(self, name: str) -> Optional[Service]:
        """Finds a service by partial, case-insensitive name."""
        log.debug("repo.service", "find_by_name", name=name)
        with self._conn.get_connection() as conn:
            cursor = conn.cursor()
            cursor.execute(
                """SELECT * FROM services
                   WHERE LOWER(name) LIKE LOWER(?)
                   ORDER BY name""",
                (f"%{name}%",),
            )
            row = cursor.fetchone()
            result = Service.from_dict(dict(row)) if row else None
            log.debug(
                "repo.service",
                "find_by_name result",
                found=result is not None,
                matched_name=result.name if result else None,
            )
            return result

    def save(self, service: Service) -> Service:
        """Creates or replaces a service."""
        log.info("repo.service", "save", service_id=service.id, name=service.name)
        with self._conn.get_connection() as conn:
            cursor = conn.cursor()
            cursor.execute(
                """INSERT OR REPLACE INTO services
                   (id, name, price, duration_minutes, description, price_per_person)
                   VALUES (?, ?, ?, ?, ?, ?)""",
                (
                    service.id,
                    service.name,
                    service.price,
                    service.duration_minutes,
                    service.description,
                    int(service.price_per_person),
                ),
            )
        return service
