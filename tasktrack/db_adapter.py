"""
Database adapter abstraction layer for supporting multiple database backends.
"""
import logging
import sqlite3
from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Optional, Tuple

logger = logging.getLogger(__name__)


class DatabaseType(Enum):
    """Database type enumeration."""
    SQLITE = "sqlite"
    POSTGRESQL = "postgresql"


class BaseDatabaseAdapter(ABC):
    """Abstract base class for database adapters."""

    db_type: DatabaseType
    # Largest value the primary key column can hold
    max_row_id: int = 2**63 - 1

    def __init__(self, connection_string: str):
        """
        Initialize database adapter.

        Args:
            connection_string: Database connection string (path for SQLite, URI for PostgreSQL)
        """
        self.connection_string = connection_string

    @abstractmethod
    def connect(self):
        """Get a database connection."""
        pass

    def close(self, conn):
        """Close a database connection."""
        conn.close()

    @abstractmethod
    def execute(self, cursor, query: str, params: Optional[Tuple] = None):
        """Execute a query with parameters."""
        pass

    @abstractmethod
    def insert_returning_id(self, cursor, query: str, params: Tuple) -> Optional[int]:
        """Execute an INSERT and return the generated row ID (None if unavailable)."""
        pass

    @abstractmethod
    def normalize_query(self, query: str) -> str:
        """Normalize SQL query for this database backend."""
        pass

    @abstractmethod
    def get_pk_type(self) -> str:
        """Get primary key type definition."""
        pass

    def get_timestamp_type(self) -> str:
        """Column type for creation timestamps."""
        return "TIMESTAMP"

    def to_db_timestamp(self, value) -> Any:
        """Convert a datetime into the value bound for a TIMESTAMP column."""
        return value


class SQLiteAdapter(BaseDatabaseAdapter):
    """SQLite database adapter."""

    db_type = DatabaseType.SQLITE

    def connect(self):
        # One connection per operation; sqlite serializes writers itself.
        conn = sqlite3.connect(self.connection_string, timeout=30.0)
        conn.row_factory = sqlite3.Row
        return conn

    def execute(self, cursor, query: str, params: Optional[Tuple] = None):
        if params:
            return cursor.execute(query, params)
        else:
            return cursor.execute(query)

    def insert_returning_id(self, cursor, query: str, params: Tuple) -> Optional[int]:
        self.execute(cursor, query, params)
        return cursor.lastrowid

    def normalize_query(self, query: str) -> str:
        # SQLite uses ? placeholders and AUTOINCREMENT, which is already the default
        return query

    def get_pk_type(self) -> str:
        return "INTEGER PRIMARY KEY AUTOINCREMENT"

    def to_db_timestamp(self, value) -> Any:
        # The stdlib default datetime adapter is deprecated; store ISO-8601 text.
        return value.isoformat()


class PostgreSQLAdapter(BaseDatabaseAdapter):
    """PostgreSQL database adapter."""

    db_type = DatabaseType.POSTGRESQL
    # SERIAL is a 4-byte integer
    max_row_id = 2**31 - 1

    def connect(self):
        import psycopg2

        conn = psycopg2.connect(self.connection_string)
        conn.set_session(autocommit=False)
        return conn

    def execute(self, cursor, query: str, params: Optional[Tuple] = None):
        normalized_query = self.normalize_query(query)
        if params:
            return cursor.execute(normalized_query, params)
        else:
            return cursor.execute(normalized_query)

    def insert_returning_id(self, cursor, query: str, params: Tuple) -> Optional[int]:
        # PostgreSQL has no lastrowid for SERIAL keys; ask for it explicitly
        self.execute(cursor, f"{query.rstrip().rstrip(';')} RETURNING id", params)
        result = cursor.fetchone()
        if result:
            return result[0]
        return None

    def normalize_query(self, query: str) -> str:
        # Replace ? with %s for PostgreSQL
        # Replace INTEGER PRIMARY KEY AUTOINCREMENT with SERIAL PRIMARY KEY
        normalized = query.replace("?", "%s")
        normalized = normalized.replace("INTEGER PRIMARY KEY AUTOINCREMENT", "SERIAL PRIMARY KEY")
        return normalized

    def get_pk_type(self) -> str:
        return "SERIAL PRIMARY KEY"

    def get_timestamp_type(self) -> str:
        return "TIMESTAMPTZ"


def get_database_adapter(
    db_type: Optional[str] = None,
    connection_string: Optional[str] = None,
) -> BaseDatabaseAdapter:
    """
    Factory function to get the appropriate database adapter.

    Args:
        db_type: 'sqlite' or 'postgresql'. If None, uses settings.
        connection_string: Database connection string. If None, uses settings.

    Returns:
        Database adapter instance
    """
    from tasktrack.config import get_settings

    settings = get_settings()
    db_type = (db_type or settings.db_type).lower()

    if db_type == DatabaseType.POSTGRESQL.value:
        if connection_string is None:
            connection_string = settings.database_url
        if not connection_string:
            raise ValueError("DATABASE_URL is required when DB_TYPE=postgresql")
        logger.info("Using PostgreSQL database")
        return PostgreSQLAdapter(connection_string)

    if db_type != DatabaseType.SQLITE.value:
        raise ValueError(f"Unsupported database type: {db_type}")

    if connection_string is None:
        connection_string = settings.database_path
    logger.info(f"Using SQLite database at {connection_string}")
    return SQLiteAdapter(connection_string)
