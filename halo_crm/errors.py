"""Exceptions raised by Halo CRM."""


class HaloError(Exception):
    """Base class for application errors."""


class SeriesMutationError(HaloError):
    """Raised when a change would rewrite a recurring series in place."""
