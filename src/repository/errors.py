class TripPlannerError(Exception):
    """Base class for errors raised by the repositories."""


class ValidationError(TripPlannerError):
    """A required field is missing or blank. Raised before any remote call."""

    def __init__(self, message: str, fields: tuple[str, ...] = ()):
        super().__init__(message)
        self.fields = fields


class StoreUnavailable(TripPlannerError):
    """The record store call failed (network, server or auth)."""


class NotFound(StoreUnavailable):
    """The addressed row does not exist."""
