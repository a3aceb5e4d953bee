"""Email sender adapters - SMTP and development console implementations."""

from .console import ConsoleEmailSender
from .relay import SmtpEmailSender

__all__ = ["ConsoleEmailSender", "SmtpEmailSender"]
