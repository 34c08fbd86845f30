"""Tools for business statistics and earnings."""

from langchain_core.tools import tool

from ..container import get_container
from ..config import logger as log
from ..config.settings import BusinessSettings
from ..scheduling.dashboard import earnings_breakdown, financial_summary


@tool
def get_business_stats() -> dict:
    """Gets business info and key statistics: appointments, revenue, expenses, net earnings and monthly goal.

    Returns:
        Business statistics.
    """
    log.info("tools.business", "get_business_stats called")
    container = get_container()
    settings = BusinessSettings.load(container.config)

    appointments = container.appointments.list_all()
    services = container.services.list_all()
    summary = financial_summary(
        appointments,
        services,
        container.expenses.list_expenses(),
        container.expenses.list_bonus_entries(),
        settings.tax_rate,
        settings.monthly_revenue_goal,
        settings.deductible_categories,
    )

    return {
        "business_name": settings.business_name,
        "services": len(services),
        "appointments": len(appointments),
        "recurring_series": sum(1 for a in appointments if a.is_recurring),
        "completed_appointments": sum(1 for a in appointments if a.status == "COMPLETED"),
        "revenue": float(summary.gross_revenue),
        "expenses": float(summary.total_expenses),
        "estimated_tax": float(summary.estimated_tax),
        "net_earnings": float(summary.net_earnings),
        "monthly_goal": float(settings.monthly_revenue_goal),
        "goal_progress_percent": round(float(summary.goal_progress), 1),
    }


@tool
def get_earnings_breakdown() -> dict:
    """Gets a financial breakdown: revenue by service, expenses by category, bonus income, and totals.

    Returns:
        Earnings breakdown.
    """
    log.info("tools.business", "get_earnings_breakdown called")
    container = get_container()
    settings = BusinessSettings.load(container.config)

    return earnings_breakdown(
        container.appointments.list_all(),
        container.services.list_all(),
        container.expenses.list_expenses(),
        container.expenses.list_bonus_entries(),
        settings.tax_rate,
        settings.monthly_revenue_goal,
        settings.deductible_categories,
    )
