"""Business configuration keys."""


class ConfigKeys:
    """Keys for business settings stored in the system_config table."""

    TAX_RATE = "tax_rate"
    MONTHLY_REVENUE_GOAL = "monthly_revenue_goal"
    DEDUCTIBLE_CATEGORIES = "deductible_categories"


class ConfigDefaults:
    """Default values for business settings."""

    TAX_RATE = "20"
    MONTHLY_REVENUE_GOAL = "5000"
    DEDUCTIBLE_CATEGORIES = "Supplies,Rent,Marketing"
