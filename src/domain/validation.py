"""
Payload validation - Shape checks for the inbound email request.

Checks run in a fixed order and the first failure wins, so a payload with
several bad fields always reports the same error.
"""

import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from .exceptions import ValidationError

MAX_NAME_LENGTH = 200
MAX_EMAIL_LENGTH = 254

# Applied with fullmatch; "$" would also accept a trailing newline.
EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")


@dataclass(frozen=True)
class RegistrationEmailRequest:
    """Validated request to (re)send a verification email."""

    name: str
    email: str
    registration_id: str
    verification_token: str


def _is_present_string(value: Any) -> bool:
    return isinstance(value, str) and value != ""


def _utf16_length(value: str) -> int:
    # Limits count UTF-16 code units, so astral characters weigh two.
    return len(value.encode("utf-16-le", "surrogatepass")) // 2


def validate_payload(payload: Mapping[str, Any]) -> RegistrationEmailRequest:
    """
    Validate a decoded JSON payload.

    Args:
        payload: Decoded request body using the wire field names
            (``name``, ``email``, ``registrationId``, ``verificationToken``)

    Returns:
        RegistrationEmailRequest with the values exactly as received

    Raises:
        ValidationError: With the message for the first failing field
    """
    name = payload.get("name")
    if not _is_present_string(name) or _utf16_length(name) > MAX_NAME_LENGTH:
        raise ValidationError("Invalid name")

    email = payload.get("email")
    if not _is_present_string(email) or _utf16_length(email) > MAX_EMAIL_LENGTH:
        raise ValidationError("Invalid email")
    if not EMAIL_PATTERN.fullmatch(email):
        raise ValidationError("Invalid email format")

    registration_id = payload.get("registrationId")
    if not _is_present_string(registration_id):
        raise ValidationError("Invalid registration ID")

    verification_token = payload.get("verificationToken")
    if not _is_present_string(verification_token):
        raise ValidationError("Invalid verification token")

    return RegistrationEmailRequest(
        name=name,
        email=email,
        registration_id=registration_id,
        verification_token=verification_token,
    )
