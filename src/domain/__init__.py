"""
Domain layer - Pure business logic with zero framework imports.

This package contains the verification email gate and message composer.
It defines its own port interfaces for storage and mail transport so the
adapters can be swapped for in-memory fakes.
"""

from .composer import build_verification_link, compose, compose_text
from .exceptions import (
    ConflictError,
    DependencyError,
    NotFoundError,
    RateLimitedError,
    RegistrationError,
    ValidationError,
)
from .ports import (
    Delivered,
    DeliveryFailed,
    EmailSender,
    OutboundEmail,
    RegistrationRecord,
    RegistrationRepository,
    SendResult,
)
from .registration import Outcome, RegistrationEmailService, RequestState
from .validation import RegistrationEmailRequest, validate_payload

__all__ = [
    "ConflictError",
    "Delivered",
    "DeliveryFailed",
    "DependencyError",
    "EmailSender",
    "NotFoundError",
    "Outcome",
    "OutboundEmail",
    "RateLimitedError",
    "RegistrationEmailRequest",
    "RegistrationEmailService",
    "RegistrationError",
    "RegistrationRecord",
    "RegistrationRepository",
    "RequestState",
    "SendResult",
    "ValidationError",
    "build_verification_link",
    "compose",
    "compose_text",
    "validate_payload",
]
