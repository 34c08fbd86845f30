"""SystemConfig entity - a stored business setting."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass
class SystemConfig:
    """A key-value business setting; values are stored as text."""

    key: str
    value: str
    description: Optional[str] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_dict(cls, data: dict) -> "SystemConfig":
        """Creates a SystemConfig from a dictionary."""
        return cls(
            key=data["key"],
            value=data["value"],
            description=data.get("description"),
            updated_at=data.get("updated_at"),
        )
