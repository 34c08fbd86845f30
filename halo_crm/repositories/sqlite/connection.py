"""SQLite connection management."""

import sqlite3
from contextlib import contextmanager
from datetime import datetime
from decimal import Decimal
from pathlib import Path
from typing import Optional

from ...config.env import get_db_path


def adapt_datetime(val: datetime) -> str:
    return val.isoformat()


def adapt_decimal(val: Decimal) -> str:
    return str(val)


def convert_datetime(val: bytes) -> datetime:
    return datetime.fromisoformat(val.decode())


def convert_decimal(val: bytes) -> Decimal:
    return Decimal(val.decode())


# Appointment dates and times are TEXT columns: they are kept exactly as entered.
sqlite3.register_adapter(datetime, adapt_datetime)
sqlite3.register_adapter(Decimal, adapt_decimal)
sqlite3.register_converter("DATETIME", convert_datetime)
sqlite3.register_converter("DECIMAL", convert_decimal)


class SQLiteConnection:
    """Manages SQLite connection with transaction context manager."""

    def __init__(self, db_path: Optional[str] = None):
        """Initializes connection.

        Args:
            db_path: Path to database file. Falls back to HALO_DB_PATH.
        """
        self.db_path = get_db_path(db_path)
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        self._init_tables()

    @contextmanager
    def get_connection(self):
        """Context manager for getting a connection with transaction."""
        conn = sqlite3.connect(
            self.db_path,
            detect_types=sqlite3.PARSE_DECLTYPES | sqlite3.PARSE_COLNAMES,
        )
        conn.row_factory = sqlite3.Row
        try:
            yield conn
            conn.commit()
        except Exception:
            conn.rollback()
            raise
        finally:
            conn.close()

    def _init_tables(self):
        """Initializes all database tables."""
        with self.get_connection() as conn:
            cursor = conn.cursor()

            cursor.execute(
                """
                CREATE TABLE IF NOT EXISTS system_config (
                    key TEXT PRIMARY KEY,
                    value TEXT NOT NULL,
                    description TEXT,
                    updated_at DATETIME
                )
            """
            )

            cursor.execute(
                """
                CREATE TABLE IF NOT EXISTS services (
                    id TEXT PRIMARY KEY,
                    name TEXT NOT NULL,
                    price DECIMAL NOT NULL,
                    duration_minutes INTEGER NOT NULL,
                    description TEXT,
                    price_per_person INTEGER DEFAULT 0
                )
            """
            )

            cursor.execute(
                """
                CREATE TABLE IF NOT EXISTS appointments (
                    id TEXT PRIMARY KEY,
                    date TEXT NOT NULL,
                    time TEXT NOT NULL,
                    service_id TEXT NOT NULL,
                    client_ids TEXT DEFAULT '[]',
                    client_names TEXT DEFAULT '[]',
                    status TEXT DEFAULT 'CONFIRMED',
                    recurrence TEXT,
                    number_of_people INTEGER,
                    override_price DECIMAL,
                    notes TEXT,
                    kind TEXT NOT NULL,
                    parent_id TEXT,
                    created_at DATETIME,
                    updated_at DATETIME
                )
            """
            )

            cursor.execute(
                """
                CREATE TABLE IF NOT EXISTS expenses (
                    id TEXT PRIMARY KEY,
                    name TEXT NOT NULL,
                    amount DECIMAL NOT NULL,
                    date TEXT NOT NULL,
                    category TEXT DEFAULT 'Other'
                )
            """
            )

            cursor.execute(
                """
                CREATE TABLE IF NOT EXISTS bonus_entries (
                    id TEXT PRIMARY KEY,
                    description TEXT NOT NULL,
                    amount DECIMAL NOT NULL,
                    date TEXT NOT NULL
                )
            """
            )

            cursor.execute(
                "CREATE INDEX IF NOT EXISTS idx_appointments_date ON appointments(date)"
            )
            cursor.execute(
                "CREATE INDEX IF NOT EXISTS idx_appointments_kind ON appointments(kind)"
            )
            cursor.execute(
                "CREATE INDEX IF NOT EXISTS idx_expenses_date ON expenses(date)"
            )
