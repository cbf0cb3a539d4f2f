"""
Integration tests for database initialization.

Tests that:
1. TaskDatabase creates the tasks table with the expected columns
2. Initialization is idempotent and keeps existing rows
3. Failures abort initialization with DatabaseError
4. The init command creates a usable database
"""
import os
import sqlite3
from argparse import Namespace
from unittest.mock import MagicMock

import pytest

from tasktrack.commands.initialize import InitializeCommand
from tasktrack.database import TaskDatabase
from tasktrack.db_adapter import SQLiteAdapter
from tasktrack.exceptions import DatabaseError
from tasktrack.models import Task


def table_columns(db_path):
    conn = sqlite3.connect(db_path)
    try:
        cursor = conn.cursor()
        cursor.execute("PRAGMA table_info(tasks)")
        return {row[1]: row for row in cursor.fetchall()}
    finally:
        conn.close()


def test_creates_database_file_and_directory(temp_db_path):
    assert not os.path.exists(temp_db_path)

    TaskDatabase(temp_db_path, db_type="sqlite")

    assert os.path.exists(temp_db_path)


def test_tasks_table_has_required_columns(task_db, temp_db_path):
    columns = table_columns(temp_db_path)

    assert set(columns) == {"id", "title", "description", "status", "created_at"}
    # PRAGMA table_info: (cid, name, type, notnull, dflt_value, pk)
    assert columns["id"][5] == 1
    for name in ("title", "description", "status", "created_at"):
        assert columns[name][3] == 1, f"{name} should be NOT NULL"


def test_initialization_is_idempotent(temp_db_path):
    first = TaskDatabase(temp_db_path, db_type="sqlite")
    first.tasks.create(Task(title="survives", status="pending"))

    second = TaskDatabase(temp_db_path, db_type="sqlite")

    assert [t.title for t in second.tasks.get_all()] == ["survives"]


def test_unopenable_database_raises_database_error(tmp_path):
    # A directory cannot be opened as a SQLite database file
    directory = tmp_path / "not_a_file"
    directory.mkdir()

    with pytest.raises(DatabaseError) as exc_info:
        TaskDatabase(str(directory), db_type="sqlite")

    assert exc_info.value.operation == "CREATE TABLE"


def test_schema_failure_raises_database_error(temp_db_path):
    adapter = SQLiteAdapter(temp_db_path)
    broken = MagicMock(wraps=adapter)
    broken.db_type = adapter.db_type
    broken.connection_string = temp_db_path
    broken.get_pk_type.return_value = "INTEGER PRIMARY KEY AUTOINCREMENT"
    broken.execute.side_effect = sqlite3.OperationalError("near \"TABLE\": syntax error")

    with pytest.raises(DatabaseError, match="syntax error"):
        TaskDatabase(adapter=broken)


def test_unsupported_db_type_raises_database_error(temp_db_path):
    with pytest.raises(DatabaseError, match="Unsupported database type"):
        TaskDatabase(temp_db_path, db_type="oracle")


def test_initialize_command_creates_database(temp_db_path):
    cmd = InitializeCommand(Namespace(database_path=temp_db_path))
    with cmd:
        result = cmd.run()

    assert result == 0
    assert "created_at" in table_columns(temp_db_path)


def test_initialize_command_reports_failure(tmp_path):
    directory = tmp_path / "not_a_file"
    directory.mkdir()

    cmd = InitializeCommand(Namespace(database_path=str(directory)))
    with cmd:
        result = cmd.run()

    assert result == 1
