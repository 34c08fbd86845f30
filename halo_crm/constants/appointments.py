"""Appointment-related constants."""

# Service id used for blocked (unavailable) time.
BLOCK_SERVICE_ID = "BLOCK"

COMPLETED_SUFFIX = "_completed"
CANCELLED_SUFFIX = "_cancelled"
OVERRIDE_SUFFIXES = (COMPLETED_SUFFIX, CANCELLED_SUFFIX)

# Display fallback when an appointment's service no longer exists.
FALLBACK_DURATION_MINUTES = 60

# Status filter value meaning "no filter".
ALL_STATUSES = "ALL"
