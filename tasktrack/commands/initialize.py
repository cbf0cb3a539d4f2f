"""
Initialize command - Create the database and its schema without starting the server.
"""
import os
import logging

from tasktrack.__main__ import Command
from tasktrack.config import get_settings
from tasktrack.database import TaskDatabase
from tasktrack.exceptions import DatabaseError

logger = logging.getLogger(__name__)


class InitializeCommand(Command):
    """Command to initialize the database without starting the server."""

    @classmethod
    def get_name(cls) -> str:
        """Override to return 'init' instead of 'initialize'."""
        return "init"

    @classmethod
    def get_description(cls) -> str:
        return "Create the database and the tasks table if missing (does not start server)"

    @classmethod
    def add_arguments(cls, parser):
        """Add initialize-specific arguments."""
        parser.add_argument(
            "--database-path",
            type=str,
            default=None,
            help="Path to SQLite database file (overrides TASKS_DB_PATH and config defaults)"
        )

    def init(self):
        super().init()
        settings = get_settings()
        self.db_type = settings.db_type

        if getattr(self.args, "database_path", None):
            self.db_path = os.path.abspath(self.args.database_path)
        elif self.db_type == "postgresql":
            self.db_path = settings.database_url
        else:
            self.db_path = settings.database_path

        if self.db_type == "sqlite":
            logger.info(f"Database path: {self.db_path}")

    def run(self) -> int:
        """Run database initialization."""
        try:
            TaskDatabase(self.db_path, db_type=self.db_type)
        except DatabaseError as e:
            logger.error(f"Failed to initialize database: {e.message}", exc_info=True)
            return 1

        logger.info("Database initialization complete")
        return 0
