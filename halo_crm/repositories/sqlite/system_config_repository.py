"""SQLite implementation of SystemConfigRepository."""

from datetime import datetime
from typing import Optional

from ..interfaces.system_config_repository import ISystemConfigRepository
from ...domain.system_config import SystemConfig
from .connection import SQLiteConnection


class SQLiteSystemConfigRepository(ISystemConfigRepository):
    """SQLite implementation of business settings repository."""

    def __init__(self, connection: SQLiteConnection):
        self._conn = connection

    def get(self, key: str) -> Optional[SystemConfig]:
        """Gets a setting by key."""
        with self._conn.get_connection() as conn:
            cursor = conn.cursor()
            cursor.execute("SELECT * FROM system_config WHERE key = ?", (key,))
            row = cursor.fetchone()
            return SystemConfig.from_dict(dict(row)) if row else None

    def get_value(self, key: str, default: Optional[str] = None) -> Optional[str]:
        config = self.get(key)
        return config.value if config else default

    def get_all(self) -> list[SystemConfig]:
        with self._conn.get_connection() as conn:
            cursor = conn.cursor()
            cursor.execute("SELECT * FROM system_config ORDER BY key")
            return [SystemConfig.from_dict(dict(row)) for row in cursor.fetchall()]

    def set(self, key: str, value: str, description: Optional[str] = None) -> SystemConfig:
        """Creates or updates a setting, keeping the old description if none given."""
        now = datetime.now()
        with self._conn.get_connection() as conn:
            cursor = conn.cursor()
            cursor.execute(
                """INSERT INTO system_config (key, value, description, updated_at)
                   VALUES (?, ?, ?, ?)
                   ON CONFLICT(key) DO UPDATE SET
                       value = excluded.value,
                       description = COALESCE(excluded.description, system_config.description),
                       updated_at = excluded.updated_at""",
                (key, value, description, now),
            )
        return SystemConfig(key=key, value=value, description=description, updated_at=now)

    def delete(self, key: str) -> bool:
        with self._conn.get_connection() as conn:
            cursor = conn.cursor()
            cursor.execute("DELETE FROM system_config WHERE key = ?", (key,))
            return cursor.rowcount > 0
