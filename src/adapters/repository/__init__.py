"""Repository adapters - Database implementations."""

from .postgres import PostgresRegistrationRepository

__all__ = ["PostgresRegistrationRepository"]
