"""
Pytest configuration and shared fixtures.
"""
import pytest
from fastapi.testclient import TestClient

from tasktrack.app import create_app
from tasktrack.config import Settings, get_settings
from tasktrack.database import TaskDatabase

from tests.fakes import InMemoryTaskRepository

TEST_ORIGIN = "http://localhost:3000"


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    """Keep environment overrides and the cached settings out of tests."""
    for var in ("TASKS_DB_PATH", "DB_TYPE", "DATABASE_URL", "DATABASE_PATH", "CORS_ALLOW_ORIGIN"):
        monkeypatch.delenv(var, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def temp_db_path(tmp_path):
    """Path to a fresh SQLite database file."""
    return str(tmp_path / "data" / "test_tasks.db")


@pytest.fixture
def task_db(temp_db_path):
    """Initialized TaskDatabase on a temporary SQLite file."""
    return TaskDatabase(temp_db_path, db_type="sqlite", sql_echo=True)


@pytest.fixture
def store(task_db):
    """TaskStore backed by the temporary database."""
    return task_db.tasks


@pytest.fixture
def app_settings(temp_db_path):
    return Settings(database_path=temp_db_path, cors_allow_origin=TEST_ORIGIN)


@pytest.fixture
def fake_repository():
    return InMemoryTaskRepository()


@pytest.fixture
def client(fake_repository, app_settings):
    """Test client for an app wired to the in-memory repository."""
    app = create_app(repository=fake_repository, settings=app_settings)
    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client


@pytest.fixture
def store_client(store, app_settings):
    """Test client for an app wired to the real SQLite store."""
    app = create_app(repository=store, settings=app_settings)
    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client
