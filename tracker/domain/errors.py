"""Domain error taxonomy — mapped to HTTP statuses by the API layer."""


class TrackerError(Exception):
    """Base class for all errors raised by the service."""


class ValidationError(TrackerError):
    """Malformed identifier, boolean or payload (HTTP 400)."""


class DateParseError(ValidationError):
    """A timestamp matched none of the accepted formats."""


class NotFoundError(TrackerError):
    """Unknown id, or no assignment matched (HTTP 404)."""


class StoreError(TrackerError):
    """Persistence-layer failure (HTTP 500)."""
