"""
PostgreSQL repository adapter - Implements AccountRepository protocol.

This module provides the PostgreSQL implementation of the domain's
repository port using psycopg3 with raw SQL.

Uniqueness of email and handle is enforced by UNIQUE constraints on the
accounts table. The domain service checks availability before inserting,
but two concurrent registrations can both pass that check; the loser's
INSERT then fails with UniqueViolation, which surfaces as StorageError.

Every psycopg error is translated to StorageError so the domain never
depends on driver exception types.
"""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

import psycopg
from psycopg_pool import ConnectionPool

from src.domain.exceptions import StorageError
from src.domain.ports import Account

logger = logging.getLogger(__name__)

_ACCOUNT_COLUMNS = (
    "id, email, password_digest, handle, display_name, "
    "phone_number, gender, signature, avatar, location"
)


def _to_account(row: tuple) -> Account:
    return Account(
        id=row[0],
        email=row[1],
        password=row[2],
        handle=row[3],
        display_name=row[4],
        phone_number=row[5],
        gender=row[6],
        signature=row[7],
        avatar=row[8],
        location=row[9],
    )


class PostgresAccountRepository:
    """
    Implements AccountRepository protocol via psycopg3.

    Uses structural subtyping - no explicit inheritance from Protocol.
    All SQL uses parameterized queries for security.
    """

    def __init__(self, pool: ConnectionPool) -> None:
        """
        Initialize repository with connection pool.

        Args:
            pool: psycopg3 ConnectionPool for database connections
        """
        self._pool = pool

    @contextmanager
    def _cursor(self) -> Iterator[psycopg.Cursor]:
        try:
            with self._pool.connection() as conn, conn.cursor() as cursor:
                yield cursor
        except psycopg.Error as e:
            raise StorageError(str(e)) from e

    def _fetch_one(self, column: str, value: object) -> Account | None:
        sql = f"SELECT {_ACCOUNT_COLUMNS} FROM accounts WHERE {column} = %s"
        with self._cursor() as cursor:
            cursor.execute(sql, (value,))
            row = cursor.fetchone()
        return _to_account(row) if row is not None else None

    def get_by_email(self, email: str) -> Account | None:
        return self._fetch_one("email", email)

    def get_by_handle(self, handle: str) -> Account | None:
        return self._fetch_one("handle", handle)

    def get_by_id(self, account_id: int) -> Account | None:
        return self._fetch_one("id", account_id)

    def insert(self, account: Account) -> int:
        """
        Insert a new account row.

        The id is assigned by the database and written back onto `account`.

        Raises:
            StorageError: On any database error, including a duplicate
                email or handle
        """
        sql = """
            INSERT INTO accounts (email, password_digest, handle, display_name,
                                  phone_number, gender, signature, avatar, location)
            VALUES (%s, %s, %s, %s, %s, %s, %s, %s, %s)
            RETURNING id
        """

        with self._cursor() as cursor:
            cursor.execute(
                sql,
                (
                    account.email,
                    account.password,
                    account.handle,
                    account.display_name,
                    account.phone_number,
                    account.gender,
                    account.signature,
                    account.avatar,
                    account.location,
                ),
            )
            row = cursor.fetchone()
            cursor.connection.commit()
            if row is not None:
                account.id = row[0]
            return cursor.rowcount

    def update(self, account: Account) -> int:
        """
        Update profile fields of an existing account.

        NULL fields leave the stored value unchanged. Email, password
        digest and handle are not part of the statement.
        """
        sql = """
            UPDATE accounts
            SET display_name = COALESCE(%s, display_name),
                phone_number = COALESCE(%s, phone_number),
                gender = COALESCE(%s, gender),
                signature = COALESCE(%s, signature),
                avatar = COALESCE(%s, avatar),
                location = COALESCE(%s, location),
                updated_at = NOW()
            WHERE id = %s
        """

        with self._cursor() as cursor:
            cursor.execute(
                sql,
                (
                    account.display_name,
                    account.phone_number,
                    account.gender,
                    account.signature,
                    account.avatar,
                    account.location,
                    account.id,
                ),
            )
            cursor.connection.commit()
            return cursor.rowcount

    def ping(self) -> None:
        """Round-trip a trivial query. Raises StorageError when unreachable."""
        with self._cursor() as cursor:
            cursor.execute("SELECT 1")


def run_migrations(pool: ConnectionPool) -> None:
    """
    Execute all SQL migration files from the migrations directory.

    Migrations are executed in sorted order (alphabetically by filename).
    Each migration should be idempotent (use IF NOT EXISTS, etc.).

    Args:
        pool: psycopg3 ConnectionPool instance
    """
    # Structure: src/adapters/repository/postgres.py -> migrations/
    migrations_dir = Path(__file__).parent.parent.parent.parent / "migrations"

    if not migrations_dir.exists():
        logger.warning(f"Migrations directory not found: {migrations_dir}")
        return

    sql_files = sorted(migrations_dir.glob("*.sql"))

    if not sql_files:
        logger.info("No migration files found")
        return

    logger.info(f"Running {len(sql_files)} migration(s)")

    for sql_file in sql_files:
        logger.info(f"Executing migration: {sql_file.name}")
        try:
            with pool.connection() as conn:
                conn.execute(sql_file.read_text())

            logger.info(f"Migration complete: {sql_file.name}")
        except Exception as e:
            logger.error(f"Migration failed: {sql_file.name} - {e}")
            raise RuntimeError(f"Database migration failed: {sql_file.name}") from e
