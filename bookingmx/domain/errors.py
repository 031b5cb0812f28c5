"""
Error taxonomy shared by the reservation and graph modules.

Each error carries the HTTP status an API layer should answer with, so
callers can map failures without a lookup table of their own.
"""


class ReservationError(Exception):
    """Base class for every error raised by bookingmx."""

    kind = "error"
    http_status = 500

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class InvalidInput(ReservationError):
    """Malformed or rule-violating input: bad dates, unknown city, negative distance."""

    kind = "invalid_input"
    http_status = 400


class NotFound(ReservationError):
    """The referenced identifier does not exist."""

    kind = "not_found"
    http_status = 404


class InvalidState(ReservationError):
    """The operation is not allowed in the entity's current state."""

    kind = "invalid_state"
    http_status = 400
