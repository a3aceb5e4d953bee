"""
Unit tests for SmtpEmailSender adapter.

Tests verify the SMTP conversation and that transport errors become
DeliveryFailed results instead of exceptions. smtplib.SMTP is patched;
no network connection is made.
"""

import smtplib
from unittest.mock import MagicMock, patch

import pytest

from src.adapters.smtp.relay import SmtpEmailSender
from src.domain.ports import Delivered, DeliveryFailed, OutboundEmail

MESSAGE = OutboundEmail(
    sender="Digital Skills Training <noreply@dependify.com>",
    recipient="a@b.com",
    subject="Verify",
    html_body='<p><a href="https://x.org/verify-email?token=T1">Verify</a></p>',
    text_body="https://x.org/verify-email?token=T1",
)


def build_sender(starttls: bool = True) -> SmtpEmailSender:
    return SmtpEmailSender(
        host="smtp.example.org",
        port=587,
        username="login",
        password="secret",
        starttls=starttls,
        timeout=5,
    )


@pytest.fixture
def smtp_server():
    """Patch smtplib.SMTP and yield the server object used in the with-block."""
    with patch("src.adapters.smtp.relay.smtplib.SMTP") as smtp_cls:
        server = MagicMock()
        smtp_cls.return_value.__enter__.return_value = server
        server.smtp_cls = smtp_cls
        yield server


class TestSmtpEmailSenderProtocol:
    """Tests for EmailSender protocol compliance."""

    def test_no_explicit_inheritance(self) -> None:
        """SmtpEmailSender uses structural subtyping, not inheritance."""
        assert SmtpEmailSender.__bases__ == (object,)


class TestSend:
    """Tests for send()."""

    @pytest.mark.asyncio
    async def test_successful_send_returns_delivered(self, smtp_server: MagicMock) -> None:
        """Relay conversation: connect, STARTTLS, login, send."""
        result = await build_sender().send(MESSAGE)

        assert result == Delivered()
        smtp_server.smtp_cls.assert_called_once_with("smtp.example.org", 587, timeout=5)
        smtp_server.starttls.assert_called_once()
        smtp_server.login.assert_called_once_with("login", "secret")
        smtp_server.send_message.assert_called_once()

    @pytest.mark.asyncio
    async def test_starttls_can_be_disabled(self, smtp_server: MagicMock) -> None:
        """STARTTLS is skipped when disabled."""
        await build_sender(starttls=False).send(MESSAGE)

        smtp_server.starttls.assert_not_called()

    @pytest.mark.asyncio
    async def test_message_headers_and_parts(self, smtp_server: MagicMock) -> None:
        """Message carries envelope headers and text + HTML parts."""
        await build_sender().send(MESSAGE)

        msg = smtp_server.send_message.call_args[0][0]
        assert msg["From"] == MESSAGE.sender
        assert msg["To"] == "a@b.com"
        assert msg["Subject"] == "Verify"
        assert msg.get_body(preferencelist=("html",)).get_content().strip() == MESSAGE.html_body
        assert msg.get_body(preferencelist=("plain",)).get_content().strip() == MESSAGE.text_body

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "error",
        [
            smtplib.SMTPAuthenticationError(535, b"Authentication failed"),
            smtplib.SMTPRecipientsRefused({"a@b.com": (550, b"No such user")}),
            ConnectionRefusedError("connection refused"),
            TimeoutError("timed out"),
        ],
    )
    async def test_transport_error_returns_delivery_failed(
        self, smtp_server: MagicMock, error: Exception
    ) -> None:
        """SMTP and socket errors are reported, not raised."""
        smtp_server.send_message.side_effect = error

        result = await build_sender().send(MESSAGE)

        assert isinstance(result, DeliveryFailed)
        assert type(error).__name__ in result.reason

    @pytest.mark.asyncio
    async def test_connect_error_returns_delivery_failed(self, smtp_server: MagicMock) -> None:
        """Failure to open the connection is reported."""
        smtp_server.smtp_cls.side_effect = OSError("no route to host")

        result = await build_sender().send(MESSAGE)

        assert result == DeliveryFailed(reason="OSError: no route to host")
