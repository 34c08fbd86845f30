"""Interface for business settings repository."""

from abc import ABC, abstractmethod
from typing import Optional

from ...domain.system_config import SystemConfig


class ISystemConfigRepository(ABC):
    """Contract for key-value business settings."""

    @abstractmethod
    def get(self, key: str) -> Optional[SystemConfig]:
        """Gets a setting by key."""
        pass

    @abstractmethod
    def get_value(self, key: str, default: Optional[str] = None) -> Optional[str]:
        """Gets a setting value, or `default` when unset."""
        pass

    @abstractmethod
    def get_all(self) -> list[SystemConfig]:
        pass

    @abstractmethod
    def set(self, key: str, value: str, description: Optional[str] = None) -> SystemConfig:
        """Creates or updates a setting."""
        pass

    @abstractmethod
    def delete(self, key: str) -> bool:
        pass
