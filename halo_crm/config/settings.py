"""Business settings loaded from the system_config table."""

from dataclasses import dataclass
from decimal import Decimal

from ..constants.config_keys import ConfigDefaults, ConfigKeys
from ..repositories.interfaces.system_config_repository import ISystemConfigRepository
from .env import get_business_name


@dataclass
class BusinessSettings:
    """Runtime business settings."""

    business_name: str
    tax_rate: Decimal
    monthly_revenue_goal: Decimal
    deductible_categories: list[str]

    @classmethod
    def load(cls, config: ISystemConfigRepository) -> "BusinessSettings":
        """Loads settings, falling back to defaults for anything unset."""
        categories = config.get_value(
            ConfigKeys.DEDUCTIBLE_CATEGORIES, ConfigDefaults.DEDUCTIBLE_CATEGORIES
        )
        return cls(
            business_name=get_business_name(),
            tax_rate=Decimal(
                config.get_value(ConfigKeys.TAX_RATE, ConfigDefaults.TAX_RATE)
            ),
            monthly_revenue_goal=Decimal(
                config.get_value(
                    ConfigKeys.MONTHLY_REVENUE_GOAL, ConfigDefaults.MONTHLY_REVENUE_GOAL
                )
            ),
            deductible_categories=[c.strip() for c in categories.split(",") if c.strip()],
        )
