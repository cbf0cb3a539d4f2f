"""
FastAPI application factory.
"""
import logging
from typing import Optional

from fastapi import FastAPI

from tasktrack import __version__
from tasktrack.api.routes import tasks
from tasktrack.config import Settings, get_settings
from tasktrack.exceptions.handlers import setup_exception_handlers
from tasktrack.middleware.setup import setup_middleware
from tasktrack.storage import TaskRepository

logger = logging.getLogger(__name__)


def create_app(
    repository: Optional[TaskRepository] = None,
    settings: Optional[Settings] = None,
) -> FastAPI:
    """
    Build the task API.

    Args:
        repository: Repository used by the handlers. When None, the configured
            database is opened (and its schema created) right here, so a broken
            database aborts startup with DatabaseError.
        settings: Settings to use (defaults to get_settings())

    Returns:
        Configured FastAPI application
    """
    settings = settings or get_settings()

    if repository is None:
        from tasktrack.database import TaskDatabase

        connection_string = (
            settings.database_url if settings.db_type == "postgresql" else settings.database_path
        )
        repository = TaskDatabase(
            connection_string,
            db_type=settings.db_type,
            sql_echo=settings.sql_echo,
        ).tasks

    app = FastAPI(title="tasktrack", version=__version__)
    app.state.task_repository = repository

    setup_middleware(app, settings)
    setup_exception_handlers(app)
    app.include_router(tasks.router)

    logger.info(f"Application created with {type(repository).__name__}")
    return app
