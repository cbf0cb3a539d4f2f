"""
Unified configuration for database paths and other settings.

The database path resolution:
1. Checks TASKS_DB_PATH environment variable first
2. Falls back to DATABASE_PATH from the environment or a .env file
3. Falls back to data/tasks.db under the project root

This module uses Pydantic Settings for type-safe configuration management
with support for .env files and environment variable overrides.
"""
import os
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Default database path, relative to the project root
DEFAULT_DB_PATH = "data/tasks.db"


class Settings(BaseSettings):
    """Application settings for tasktrack.

    All configuration values can be set via environment variables or .env file.
    Defaults are provided for development convenience.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ============================================================================
    # Database Configuration
    # ============================================================================
    database_path: str = ""  # Will be resolved by validator
    db_type: str = "sqlite"  # "sqlite" or "postgresql"
    database_url: str = ""  # PostgreSQL DSN, only used when db_type is postgresql
    sql_echo: bool = False  # SQL query logging

    # ============================================================================
    # Logging Configuration
    # ============================================================================
    log_level: str = "INFO"

    # ============================================================================
    # HTTP Server Configuration
    # ============================================================================
    host: str = "0.0.0.0"
    port: int = 8080
    cors_allow_origin: str = "http://localhost:3000"

    @field_validator("db_type")
    @classmethod
    def validate_db_type(cls, v: str) -> str:
        v = v.lower()
        if v not in ("sqlite", "postgresql"):
            raise ValueError(f"db_type must be 'sqlite' or 'postgresql', got '{v}'")
        return v

    @field_validator("database_path", mode="before")
    @classmethod
    def resolve_database_path(cls, v: Optional[str]) -> str:
        """
        Resolve database path.

        Resolution order:
        1. TASKS_DB_PATH environment variable (highest priority)
        2. Value from .env file or Settings field (if provided)
        3. Project-relative default path

        Returns:
            Absolute path to the database file
        """
        env_path = os.getenv("TASKS_DB_PATH")
        if env_path:
            return os.path.abspath(env_path)

        if v:
            return os.path.abspath(v)

        project_root = Path(__file__).resolve().parent.parent
        return os.path.abspath(str(project_root / DEFAULT_DB_PATH))


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance (singleton pattern)."""
    return Settings()


def get_database_path() -> str:
    """Get the resolved SQLite database path."""
    return get_settings().database_path


def ensure_database_directory(db_path: Optional[str] = None) -> None:
    """
    Ensure the database directory exists.

    Args:
        db_path: Path to the database file. If None, uses get_database_path().
    """
    if db_path is None:
        db_path = get_database_path()
    db_dir = os.path.dirname(os.path.abspath(db_path))
    if db_dir:
        os.makedirs(db_dir, exist_ok=True)
