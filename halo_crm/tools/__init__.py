"""
Assistant tools for Halo CRM
"""

from .schedule import get_schedule, book_appointment, update_appointment_status
from .business import get_business_stats, get_earnings_breakdown

__all__ = [
    # Schedule
    "get_schedule",
    "book_appointment",
    "update_appointment_status",
    # Business
    "get_business_stats",
    "get_earnings_breakdown",
]

tools = [
    get_schedule,
    book_appointment,
    update_appointment_status,
    get_business_stats,
    get_earnings_breakdown,
]
