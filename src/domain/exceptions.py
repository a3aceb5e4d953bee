"""
Domain exceptions - Semantic error types for the verification email gate.

Each exception carries the HTTP status code and the user-safe message the
gate reports for it. Infrastructure details never appear in the message.
"""


class RegistrationError(Exception):
    """Base class for registration domain errors."""

    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(RegistrationError):
    """Inbound payload is malformed."""

    status_code = 400


class NotFoundError(RegistrationError):
    """No registration exists for the requested id."""

    status_code = 404


class ConflictError(RegistrationError):
    """Request does not match the stored registration, or it is already verified."""

    status_code = 400


class RateLimitedError(RegistrationError):
    """Request arrived inside the resend cooldown window."""

    status_code = 429


class DependencyError(RegistrationError):
    """Storage or mail transport failure."""

    status_code = 500
