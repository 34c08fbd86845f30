"""SQLite implementation of AppointmentRepository."""

import json
from datetime import datetime
from typing import Optional

from ..interfaces.appointment_repository import IAppointmentRepository
from ...domain.appointment import Appointment
from ...config import logger as log
from .connection import SQLiteConnection


class SQLiteAppointmentRepository(IAppointmentRepository):
    """SQLite implementation of appointment repository."""

    def __init__(self, connection: SQLiteConnection):
        self._conn = connection

    def list_all(self) -> list[Appointment]:
        """Gets every stored appointment."""
        log.debug("repo.appointment", "list_all")
        with self._conn.get_connection() as conn:
            cursor = conn.cursor()
            cursor.execute("SELECT * FROM appointments ORDER BY date, time, id")
            results = [Appointment.from_dict(dict(row)) for row in cursor.fetchall()]
            log.debug("repo.appointment", "list_all result", count=len(results))
            return results

    def get_by_id(self, appointment_id: str) -> Optional[Appointment]:
        """Gets an appointment by ID."""
        log.debug("repo.appointment", "get_by_id", appointment_id=appointment_id)
        with self._conn.get_connection() as conn:
            cursor = conn.cursor()
            cursor.execute("SELECT * FROM appointments WHERE id = ?", (appointment_id,))
            row = cursor.fetchone()
            result = Appointment.from_dict(dict(row)) if row else None
            log.debug(
                "repo.appointment",
                "get_by_id result",
                found=result is not None,
                kind=result.kind if result else None,
            )
            return result

    def save(self, appointment: Appointment) -> Appointment:
        """Creates or replaces an appointment, keeping its creation time."""
        log.info(
            "repo.appointment",
            "save",
            appointment_id=appointment.id,
            kind=appointment.kind,
            date=appointment.date,
            time=appointment.time,
            status=appointment.status,
        )
        now = datetime.now()
        with self._conn.get_connection() as conn:
            cursor = conn.cursor()
            cursor.execute(
                """INSERT INTO appointments (
                    id, date, time, service_id, client_ids, client_names, status,
                    recurrence, number_of_people, override_price, notes, kind,
                    parent_id, created_at, updated_at
                ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
                ON CONFLICT(id) DO UPDATE SET
                    date = excluded.date,
                    time = excluded.time,
                    service_id = excluded.service_id,
                    client_ids = excluded.client_ids,
                    client_names = excluded.client_names,
                    status = excluded.status,
                    recurrence = excluded.recurrence,
                    number_of_people = excluded.number_of_people,
                    override_price = excluded.override_price,
                    notes = excluded.notes,
                    kind = excluded.kind,
                    parent_id = excluded.parent_id,
                    updated_at = excluded.updated_at""",
                (
                    appointment.id,
                    appointment.date,
                    appointment.time,
                    appointment.service_id,
                    json.dumps(appointment.client_ids),
                    json.dumps(appointment.client_names),
                    appointment.status,
                    (
                        json.dumps(appointment.recurrence.to_dict())
                        if appointment.recurrence
                        else None
                    ),
                    appointment.number_of_people,
                    appointment.override_price,
                    appointment.notes,
                    appointment.kind,
                    appointment.parent_id,
                    now,
                    now,
                ),
            )
        log.debug("repo.appointment", "save success", appointment_id=appointment.id)
        return appointment

    def delete(self, appointment_id: str) -> bool:
        """Removes an appointment."""
        log.info("repo.appointment", "delete", appointment_id=appointment_id)
        with self._conn.get_connection() as conn:
            cursor = conn.cursor()
            cursor.execute("DELETE FROM appointments WHERE id = ?", (appointment_id,))
            success = cursor.rowcount > 0
            log.debug("repo.appointment", "delete result", success=success)
            return success
