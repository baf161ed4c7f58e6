"""Database module for authcore.

This module provides the storage handle used by the HTTP handlers.

ARCHITECTURE:
- Database holds only configuration (path); it is safe to share across threads
- Each request gets its own Core, which owns one sqlite3 connection
- Core closes its connection on context exit, committing or rolling back
- Entity operations are exposed as Core properties (core.user)

The handlers never see a module-level connection. The Database instance is
passed to create_app() and from there into the blueprint factory.
"""

import sqlite3
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .user import UserOperations

SCHEMA_PATH = Path(__file__).parent.parent / "schema" / "schema.sql"


class Core:
    """
    Per-request database Core with entity operations.

    Must be used as a context manager. The connection commits on a clean
    exit, rolls back when an exception escapes, and is always closed.
    """

    def __init__(self, connection: sqlite3.Connection):
        """Initialize Core with a database connection.

        Args:
            connection: SQLite connection with row_factory set to sqlite3.Row
        """
        self._conn = connection
        self._user_ops = None

    @property
    def user(self) -> "UserOperations":
        """User operations.

        Lazy-loaded to avoid circular import issues.
        """
        if self._user_ops is None:
            from .user import UserOperations
            self._user_ops = UserOperations(self._conn)
        return self._user_ops

    def __enter__(self) -> "Core":
        return self

    def commit(self) -> None:
        """Commit now; the context exit commits again as a no-op.

        Raises:
            sqlite3.Error: If the commit fails (e.g. database is locked)
        """
        self._conn.commit()

    def __exit__(self, exc_type, exc_val, exc_tb):
        try:
            if exc_type is None:
                self._conn.commit()
            else:
                self._conn.rollback()
        finally:
            self._conn.close()


class Database:
    """Storage handle shared by all request handlers.

    Opens a fresh connection per Core, so concurrent requests never share a
    sqlite3 connection object. SQLite's own locking serializes writers.
    """

    def __init__(self, database_path: str, work_factor: int = 10):
        """
        Args:
            database_path: Path to the SQLite file (":memory:" is not useful
                here since every Core opens its own connection)
            work_factor: bcrypt cost used when hashing passwords for this store
        """
        self.database_path = database_path
        self.work_factor = work_factor

    def connect(self) -> sqlite3.Connection:
        """Create a fresh database connection.

        Returns:
            SQLite connection with row_factory set to sqlite3.Row
        """
        db_path = Path(self.database_path)
        db_path.parent.mkdir(parents=True, exist_ok=True)

        conn = sqlite3.connect(str(db_path))
        conn.row_factory = sqlite3.Row
        return conn

    def get_core(self) -> Core:
        """
        Get a database Core for one unit of work.

        Examples:
            >>> with database.get_core() as core:
            ...     core.user.get_password_hash("a@x.com")
        """
        return Core(self.connect())

    def init_db(self) -> None:
        """Apply schema.sql. Safe to run on every startup."""
        with open(SCHEMA_PATH, "r") as f:
            schema_sql = f.read()

        conn = self.connect()
        try:
            conn.executescript(schema_sql)
            conn.commit()
        finally:
            conn.close()

    def ping(self) -> None:
        """Run a trivial query.

        Raises:
            sqlite3.Error: If the database cannot be reached
        """
        conn = self.connect()
        try:
            conn.execute("SELECT 1").fetchone()
        finally:
            conn.close()


__all__ = ["Core", "Database"]
