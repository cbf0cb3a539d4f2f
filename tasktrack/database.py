"""
Database handle for tasktrack.

TaskDatabase opens the configured backend, ensures the schema exists and
composes the task repository. It is constructed once at process start and
passed to whatever needs it; nothing in the package keeps a global instance.
"""
import logging
from typing import Any, Optional

from tasktrack.config import ensure_database_directory, get_settings
from tasktrack.db_adapter import BaseDatabaseAdapter, DatabaseType, get_database_adapter
from tasktrack.exceptions import DatabaseError
from tasktrack.storage import SchemaManager, TaskStore

logger = logging.getLogger(__name__)


class TaskDatabase:
    """Backing store for tasks."""

    def __init__(
        self,
        db_path: Optional[str] = None,
        *,
        db_type: Optional[str] = None,
        adapter: Optional[BaseDatabaseAdapter] = None,
        sql_echo: Optional[bool] = None,
    ):
        """
        Open the database and create the tasks table if it is missing.

        Args:
            db_path: SQLite file path or PostgreSQL DSN (defaults from settings)
            db_type: 'sqlite' or 'postgresql' (defaults from settings)
            adapter: Pre-built adapter; overrides db_path and db_type
            sql_echo: Log every statement at DEBUG (defaults from settings)

        Raises:
            DatabaseError: If the database cannot be opened or the schema
                cannot be created. Callers treat this as fatal.
        """
        settings = get_settings()
        self.sql_echo = settings.sql_echo if sql_echo is None else sql_echo

        try:
            self.adapter = adapter or get_database_adapter(db_type, db_path)
        except ValueError as e:
            raise DatabaseError(str(e), original_error=e, operation="CONNECT") from e

        self.db_type = self.adapter.db_type.value
        if self.adapter.db_type == DatabaseType.SQLITE:
            ensure_database_directory(self.adapter.connection_string)

        self.schema = SchemaManager(
            adapter=self.adapter,
            get_connection=self._get_connection,
            execute_with_logging=self._execute_with_logging,
        )
        try:
            self.schema.initialize_schema()
        except Exception as e:
            raise DatabaseError(
                f"Failed to initialize database: {e}",
                original_error=e,
                operation="CREATE TABLE",
            ) from e

        self.tasks = TaskStore(
            get_connection=self._get_connection,
            adapter=self.adapter,
            execute_insert=self._execute_insert,
            execute_with_logging=self._execute_with_logging,
        )
        logger.info(f"Task database ready ({self.db_type})")

    def _get_connection(self):
        """Get a new database connection from the adapter."""
        return self.adapter.connect()

    def _execute_with_logging(self, cursor, query: str, params: Optional[tuple] = None) -> Any:
        """Execute a query, logging the statement when sql_echo is enabled."""
        if self.sql_echo:
            logger.debug(f"SQL: {' '.join(query.split())} params={params}")
        return self.adapter.execute(cursor, query, params)

    def _execute_insert(self, cursor, query: str, params: tuple) -> Optional[int]:
        """Execute an INSERT and return the generated ID."""
        if self.sql_echo:
            logger.debug(f"SQL: {' '.join(query.split())} params={params}")
        return self.adapter.insert_returning_id(cursor, query, params)
