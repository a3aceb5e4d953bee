"""
Console email sender adapter - Implements EmailSender protocol.

This module provides a console-based implementation of the domain's
email sender port, logging outbound messages for local development
instead of contacting a mail relay.
"""

import logging
import re

from src.domain.ports import Delivered, OutboundEmail, SendResult

logger = logging.getLogger(__name__)

_LINK_PATTERN = re.compile(r'href="([^"]+)"')


class ConsoleEmailSender:
    """
    Implements EmailSender protocol via console logging.

    Uses structural subtyping - no explicit inheritance from Protocol.
    Selected with EMAIL_BACKEND=console.
    """

    async def send(self, message: OutboundEmail) -> SendResult:
        """
        Log the message envelope and verification link (simulates delivery).

        The link is logged at INFO level so it can be followed from the
        development server output.
        """
        match = _LINK_PATTERN.search(message.html_body)
        link = match.group(1) if match else "-"
        logger.info(
            "[VERIFICATION] To: %s Subject: %s Link: %s",
            message.recipient,
            message.subject,
            link,
        )
        return Delivered()
