"""Environment variables configuration."""

import os
from pathlib import Path
from typing import Optional

DEFAULT_DB_PATH = Path.cwd() / "data" / "halo.db"


def get_business_name() -> str:
    """Returns the business display name from environment variable."""
    return os.getenv("BUSINESS_NAME", "Halo Studio")


def get_db_path(override: Optional[str] = None) -> Path:
    """Returns the SQLite database path, explicit override first."""
    if override:
        return Path(override)
    return Path(os.getenv("HALO_DB_PATH", str(DEFAULT_DB_PATH)))


def get_log_level() -> str:
    return os.getenv("LOG_LEVEL", "info").lower()
