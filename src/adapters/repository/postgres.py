"""
PostgreSQL repository adapter - Implements RegistrationRepository protocol.

This module provides the PostgreSQL implementation of the domain's
repository port using psycopg3's async connection pool with raw SQL.

The ``registrations`` table is owned by the sign-up flow. This adapter only
reads it: no UPDATE or INSERT is ever issued from here.
"""

import logging

import psycopg
from psycopg.rows import dict_row
from psycopg_pool import AsyncConnectionPool

from src.domain.exceptions import DependencyError
from src.domain.ports import RegistrationRecord

logger = logging.getLogger(__name__)


class PostgresRegistrationRepository:
    """
    Implements RegistrationRepository protocol via psycopg3.

    Uses structural subtyping - no explicit inheritance from Protocol.
    All SQL uses parameterized queries for security.
    """

    def __init__(self, pool: AsyncConnectionPool) -> None:
        """
        Initialize repository with connection pool.

        Args:
            pool: psycopg3 AsyncConnectionPool for database connections
        """
        self._pool = pool

    async def find_by_id(self, registration_id: str) -> RegistrationRecord | None:
        """
        Fetch a registration by id.

        Args:
            registration_id: Value of the ``id`` column, passed through as text

        Returns:
            RegistrationRecord, or None if no row matches

        Raises:
            DependencyError: On any database error, including an id the
                column type cannot parse
        """
        sql = """
            SELECT id, email, full_name, verified, verification_token, created_at
            FROM registrations
            WHERE id = %s
        """

        try:
            async with self._pool.connection() as conn, conn.cursor(row_factory=dict_row) as cursor:
                await cursor.execute(sql, (registration_id,))
                row = await cursor.fetchone()
        except psycopg.Error as e:
            logger.error("Registration lookup failed: %s - %s", registration_id, e)
            raise DependencyError("Database error") from e

        if row is None:
            return None

        return RegistrationRecord(
            id=str(row["id"]),
            email=row["email"],
            full_name=row["full_name"] or "",
            verified=bool(row["verified"]),
            verification_token=row["verification_token"] or "",
            created_at=row["created_at"],
        )
