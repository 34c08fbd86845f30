"""
Input schemas for Halo CRM
"""
from .appointment import AppointmentInput, RecurrenceRuleInput

__all__ = [
    "AppointmentInput",
    "RecurrenceRuleInput",
]
