"""
SMTP email sender adapter - Implements EmailSender protocol.

Sends one multipart (plain text + HTML) message per call using the
standard library SMTP client. The blocking client runs in a worker thread
so only the calling request waits on the network.
"""

import asyncio
import logging
import smtplib
from email.message import EmailMessage

from src.domain.ports import Delivered, DeliveryFailed, OutboundEmail, SendResult

logger = logging.getLogger(__name__)


class SmtpEmailSender:
    """
    Implements EmailSender protocol via SMTP with STARTTLS and login.

    Uses structural subtyping - no explicit inheritance from Protocol.
    A new connection is opened per message; nothing is pooled.
    """

    def __init__(
        self,
        host: str,
        port: int,
        username: str,
        password: str,
        starttls: bool = True,
        timeout: float = 15,
    ) -> None:
        self._host = host
        self._port = port
        self._username = username
        self._password = password
        self._starttls = starttls
        self._timeout = timeout

    async def send(self, message: OutboundEmail) -> SendResult:
        """
        Deliver a message through the configured relay.

        SMTP protocol and socket errors are returned as DeliveryFailed.
        """
        try:
            await asyncio.to_thread(self._send_blocking, self._build_message(message))
        except (smtplib.SMTPException, OSError) as e:
            logger.error("SMTP delivery to %s:%s failed: %s", self._host, self._port, e)
            return DeliveryFailed(reason=f"{type(e).__name__}: {e}")

        logger.info("SMTP relay accepted message for %s", message.recipient)
        return Delivered()

    def _build_message(self, message: OutboundEmail) -> EmailMessage:
        msg = EmailMessage()
        msg["From"] = message.sender
        msg["To"] = message.recipient
        msg["Subject"] = message.subject
        msg.set_content(message.text_body)
        msg.add_alternative(message.html_body, subtype="html")
        return msg

    def _send_blocking(self, msg: EmailMessage) -> None:
        with smtplib.SMTP(self._host, self._port, timeout=self._timeout) as server:
            if self._starttls:
                server.starttls()
            server.login(self._username, self._password)
            server.send_message(msg)
