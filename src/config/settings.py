"""
Application settings - pydantic-settings configuration.

This module defines application configuration using pydantic-settings
for environment variable loading with validation and defaults. Storage and
mail credentials have no defaults: a missing value fails at startup.
"""

from functools import lru_cache
from typing import Literal

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        populate_by_name=True,
    )

    # Database configuration
    database_url: str
    pool_min_size: int = 1  # Minimum connections in pool
    pool_max_size: int = 10  # Maximum connections in pool

    # Mail transport
    email_backend: Literal["smtp", "console"] = "smtp"
    smtp_host: str = "smtp-relay.brevo.com"
    smtp_port: int = 587
    smtp_starttls: bool = True
    smtp_timeout_seconds: float = 15
    smtp_login: str = Field(validation_alias=AliasChoices("smtp_login", "brevo_smtp_login"))
    smtp_password: str = Field(
        validation_alias=AliasChoices("smtp_password", "brevo_smtp_password")
    )
    mail_from: str = "Digital Skills Training <noreply@dependify.com>"

    # Verification email settings
    app_url: str = "https://register.uslaccafrica.org"
    resend_grace_seconds: float = 5  # Initial email window after record creation
    resend_cooldown_seconds: float = 60  # Resends blocked until this age

    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
