"""User table operations.

IMPORT CONVENTION:
- Core accesses these through core.user property
- NO direct import needed when using Core API

All statements are single SQL statements; sqlite3.Error propagates to the
caller, which decides how to report it.
"""

import sqlite3


class UserOperations:
    """Statements against the users table."""

    def __init__(self, conn: sqlite3.Connection):
        """Initialize user operations with a database connection.

        Args:
            conn: SQLite connection with row_factory set to sqlite3.Row
        """
        self._conn = conn

    def count_by_email(self, email: str) -> int:
        """Number of accounts registered under email (0 or 1)."""
        row = self._conn.execute(
            "SELECT COUNT(*) FROM users WHERE email = ?",
            (email,)
        ).fetchone()
        return row[0]

    def exists(self, email: str) -> bool:
        return self.count_by_email(email) > 0

    def get_password_hash(self, email: str) -> str | None:
        """Stored bcrypt hash for email, or None if no such account."""
        row = self._conn.execute(
            "SELECT password_hash FROM users WHERE email = ?",
            (email,)
        ).fetchone()
        return row["password_hash"] if row else None

    def create(self, email: str, password_hash: str) -> None:
        """Insert a new account.

        Raises:
            sqlite3.IntegrityError: If email is already registered
        """
        self._conn.execute(
            "INSERT INTO users (email, password_hash) VALUES (?, ?)",
            (email, password_hash)
        )

    def update_password_hash(self, email: str, password_hash: str) -> bool:
        """Overwrite the stored hash in place.

        Returns:
            True if a row was updated, False if email is not registered
        """
        cursor = self._conn.execute(
            "UPDATE users SET password_hash = ? WHERE email = ?",
            (password_hash, email)
        )
        return cursor.rowcount > 0
