"""
FastAPI dependencies - Dependency injection factories.

This module is the composition root: it wires settings, the registration
repository and the email sender into the domain service. Tests replace any
of these through ``app.dependency_overrides``.
"""

from fastapi import Depends, Request
from psycopg_pool import AsyncConnectionPool

from src.adapters.repository.postgres import PostgresRegistrationRepository
from src.adapters.smtp.console import ConsoleEmailSender
from src.adapters.smtp.relay import SmtpEmailSender
from src.config.settings import Settings, get_settings
from src.domain.ports import EmailSender
from src.domain.registration import RegistrationEmailService


def get_pool(request: Request) -> AsyncConnectionPool:
    """
    Get connection pool from app state.

    The pool is created during app lifespan startup and stored in app.state.
    """
    return request.app.state.pool


def get_repository(request: Request) -> PostgresRegistrationRepository:
    """Create repository with connection pool from app state."""
    pool = get_pool(request)
    return PostgresRegistrationRepository(pool)


def get_email_sender(settings: Settings = Depends(get_settings)) -> EmailSender:
    """Build the email sender selected by EMAIL_BACKEND."""
    if settings.email_backend == "console":
        return ConsoleEmailSender()
    return SmtpEmailSender(
        host=settings.smtp_host,
        port=settings.smtp_port,
        username=settings.smtp_login,
        password=settings.smtp_password,
        starttls=settings.smtp_starttls,
        timeout=settings.smtp_timeout_seconds,
    )


def get_registration_email_service(
    repository: PostgresRegistrationRepository = Depends(get_repository),
    email_sender: EmailSender = Depends(get_email_sender),
    settings: Settings = Depends(get_settings),
) -> RegistrationEmailService:
    """
    Create the registration email service with injected dependencies.

    Only plain configuration values reach the domain layer.
    """
    return RegistrationEmailService(
        repository=repository,
        email_sender=email_sender,
        app_url=settings.app_url,
        sender=settings.mail_from,
        grace_seconds=settings.resend_grace_seconds,
        cooldown_seconds=settings.resend_cooldown_seconds,
    )
