"""
Registration email service - Request gate for verification emails.

This module decides whether a verification email may be sent for a pending
registration and, if so, composes and dispatches it.

Request Lifecycle
=================

States:
- RECEIVED: Payload accepted for processing
- VALIDATING: Shape, match, state and cooldown checks in progress
- SENDING: All checks passed, message handed to the transport

Terminal states:
- REJECTED: A client-side check failed (400 or 429)
- LOOKUP_FAILED: The registration store could not be queried (500)
- NOT_FOUND: No registration for the requested id (404)
- SENT: Transport accepted the message (200)
- SEND_FAILED: Composition or transport failed (500)

Checks run strictly in order and the first failure ends the request:
shape -> lookup -> email/token match -> already verified -> cooldown.

Cooldown
========
The window is measured from the record's ``created_at``, not from the last
send. Requests up to ``grace_seconds`` after creation pass so the initial
email goes out; requests strictly between ``grace_seconds`` and
``cooldown_seconds`` are rejected; later requests pass again. A record
without ``created_at`` is never inside the window.
"""

import logging
import secrets
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any

from .composer import SUBJECT, build_verification_link, compose, compose_text
from .exceptions import (
    ConflictError,
    DependencyError,
    NotFoundError,
    RateLimitedError,
    RegistrationError,
    ValidationError,
)
from .ports import (
    DeliveryFailed,
    EmailSender,
    OutboundEmail,
    RegistrationRecord,
    RegistrationRepository,
)
from .validation import RegistrationEmailRequest, validate_payload

logger = logging.getLogger(__name__)

DEFAULT_SENDER = "Digital Skills Training <noreply@dependify.com>"
SEND_FAILED_MESSAGE = "Failed to send email"


class RequestState(str, Enum):
    """Lifecycle states of a single email request."""

    RECEIVED = "RECEIVED"
    VALIDATING = "VALIDATING"
    SENDING = "SENDING"
    REJECTED = "REJECTED"
    LOOKUP_FAILED = "LOOKUP_FAILED"
    NOT_FOUND = "NOT_FOUND"
    SENT = "SENT"
    SEND_FAILED = "SEND_FAILED"


@dataclass(frozen=True)
class Outcome:
    """
    Terminal result of handling one request.

    ``error`` is the user-safe message for every state except SENT.
    """

    state: RequestState
    status_code: int
    error: str | None = None

    @property
    def sent(self) -> bool:
        return self.state is RequestState.SENT


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _as_aware(value: datetime) -> datetime:
    # Naive timestamps from the store are UTC.
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def _same(stored: str, supplied: str) -> bool:
    # JSON may carry lone surrogates.
    return secrets.compare_digest(
        stored.encode("utf-8", "surrogatepass"), supplied.encode("utf-8", "surrogatepass")
    )


@dataclass
class RegistrationEmailService:
    """
    Domain service for sending registration verification emails.

    Holds no per-request state; every call reads what it needs from the
    repository, so concurrent requests are independent.
    """

    repository: RegistrationRepository
    email_sender: EmailSender
    app_url: str
    sender: str = DEFAULT_SENDER
    grace_seconds: float = 5
    cooldown_seconds: float = 60
    clock: Callable[[], datetime] = field(default=_utcnow)

    async def handle(self, payload: Mapping[str, Any]) -> Outcome:
        """
        Run the gate for one decoded request body and send the email if allowed.

        Args:
            payload: Decoded JSON body

        Returns:
            Outcome describing the terminal state and HTTP status
        """
        logger.debug("Request state: %s", RequestState.RECEIVED.value)
        try:
            logger.debug("Request state: %s", RequestState.VALIDATING.value)
            request = self._validate(payload)
            record = await self._lookup(request.registration_id)
            self._check_match(request, record)
            self._check_not_verified(record)
            self._check_cooldown(record)
        except DependencyError as exc:
            return Outcome(RequestState.LOOKUP_FAILED, exc.status_code, exc.message)
        except NotFoundError as exc:
            return Outcome(RequestState.NOT_FOUND, exc.status_code, exc.message)
        except RegistrationError as exc:
            return Outcome(RequestState.REJECTED, exc.status_code, exc.message)

        return await self._send(request)

    def _validate(self, payload: Mapping[str, Any]) -> RegistrationEmailRequest:
        try:
            return validate_payload(payload)
        except ValidationError as exc:
            logger.warning("Validation error: %s", exc.message)
            raise

    async def _lookup(self, registration_id: str) -> RegistrationRecord:
        try:
            record = await self.repository.find_by_id(registration_id)
        except DependencyError:
            logger.error("Database error looking up registration: %s", registration_id)
            raise

        if record is None:
            logger.warning("Registration not found: %s", registration_id)
            raise NotFoundError("Registration not found")
        return record

    def _check_match(self, request: RegistrationEmailRequest, record: RegistrationRecord) -> None:
        # Evaluate both comparisons so a mismatch on either takes the same path.
        email_ok = _same(record.email, request.email)
        token_ok = _same(record.verification_token, request.verification_token)
        if not (email_ok and token_ok):
            logger.warning("Email or token mismatch for registration: %s", record.id)
            raise ConflictError("Invalid request")

    def _check_not_verified(self, record: RegistrationRecord) -> None:
        if record.verified:
            logger.info("Registration already verified: %s", record.id)
            raise ConflictError("Email already verified")

    def _check_cooldown(self, record: RegistrationRecord) -> None:
        if record.created_at is None:
            # No creation time: treat as long past, outside the window.
            logger.warning("Registration has no created_at, skipping cooldown: %s", record.id)
            return
        elapsed = (self.clock() - _as_aware(record.created_at)).total_seconds()
        if self.grace_seconds < elapsed < self.cooldown_seconds:
            logger.info(
                "Rate limited - too soon to resend: %s (%.1fs since creation)",
                record.id,
                elapsed,
            )
            raise RateLimitedError("Please wait before requesting another email")

    async def _send(self, request: RegistrationEmailRequest) -> Outcome:
        logger.debug("Request state: %s", RequestState.SENDING.value)
        logger.info("Sending verification email for registration: %s", request.registration_id)
        try:
            link = build_verification_link(self.app_url, request.verification_token)
            message = OutboundEmail(
                sender=self.sender,
                recipient=request.email,
                subject=SUBJECT,
                html_body=compose(request.name, link),
                text_body=compose_text(request.name, link),
            )
            result = await self.email_sender.send(message)
        except Exception:
            logger.exception(
                "Error sending registration email: %s", request.registration_id
            )
            return Outcome(RequestState.SEND_FAILED, 500, SEND_FAILED_MESSAGE)

        if isinstance(result, DeliveryFailed):
            logger.error(
                "Error sending registration email: %s - %s",
                request.registration_id,
                result.reason,
            )
            return Outcome(RequestState.SEND_FAILED, 500, SEND_FAILED_MESSAGE)

        logger.info("Verification email sent for registration: %s", request.registration_id)
        return Outcome(RequestState.SENT, 200)
