"""
Port interfaces - Protocol definitions for infrastructure abstraction.

This module defines the data the domain reads from infrastructure and the
interfaces (ports) adapters implement.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Protocol, Union


@dataclass(frozen=True)
class RegistrationRecord:
    """
    Pending registration as stored in the ``registrations`` table.

    Read-only to this service: the verification-confirmation flow owns
    ``verified`` and ``verification_token``.
    """

    id: str
    email: str
    full_name: str
    verified: bool
    verification_token: str
    created_at: datetime | None


@dataclass(frozen=True)
class OutboundEmail:
    """A single HTML email ready for the transport."""

    sender: str
    recipient: str
    subject: str
    html_body: str
    text_body: str


@dataclass(frozen=True)
class Delivered:
    """Transport accepted the message."""


@dataclass(frozen=True)
class DeliveryFailed:
    """Transport could not deliver the message."""

    reason: str


SendResult = Union[Delivered, DeliveryFailed]


class RegistrationRepository(Protocol):
    """Port interface for registration lookup."""

    async def find_by_id(self, registration_id: str) -> RegistrationRecord | None:
        """
        Fetch a registration by its id.

        Args:
            registration_id: Opaque registration identifier

        Returns:
            The matching record, or None if no row exists

        Raises:
            DependencyError: If the store cannot be queried
        """
        ...


class EmailSender(Protocol):
    """Port interface for email delivery."""

    async def send(self, message: OutboundEmail) -> SendResult:
        """
        Deliver one email.

        Transport failures are reported as DeliveryFailed, not raised.
        """
        ...
