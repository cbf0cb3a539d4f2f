"""
Schema management for database initialization.

The whole schema is a single ``tasks`` table, created with IF NOT EXISTS so
initialization can run on every start.
"""
import logging
from typing import Callable, Any

from tasktrack.db_adapter import BaseDatabaseAdapter

logger = logging.getLogger(__name__)

TASKS_TABLE = "tasks"


class SchemaManager:
    """Manages database schema initialization and creation."""

    def __init__(
        self,
        adapter: BaseDatabaseAdapter,
        get_connection: Callable[[], Any],
        execute_with_logging: Callable[..., Any]
    ):
        """
        Initialize SchemaManager.

        Args:
            adapter: Database adapter instance
            get_connection: Function to get database connection
            execute_with_logging: Function to execute queries with logging
        """
        self.adapter = adapter
        self._get_connection = get_connection
        self._execute_with_logging = execute_with_logging

    def initialize_schema(self):
        """Create the tasks table if it does not exist yet."""
        conn = self._get_connection()
        try:
            cursor = conn.cursor()
            self._create_tasks_schema(cursor)
            conn.commit()
            logger.info("Database schema initialized")
        except Exception as e:
            logger.error(f"Failed to initialize schema: {e}")
            raise
        finally:
            self.adapter.close(conn)

    def _create_tasks_schema(self, cursor):
        """Create tasks table."""
        query = f"""
            CREATE TABLE IF NOT EXISTS {TASKS_TABLE} (
                id {self.adapter.get_pk_type()},
                title TEXT NOT NULL,
                description TEXT NOT NULL,
                status TEXT NOT NULL,
                created_at {self.adapter.get_timestamp_type()} NOT NULL
            )
        """
        self._execute_with_logging(cursor, query)
