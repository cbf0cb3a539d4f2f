"""
Tests for the command framework and entry point.
"""
from argparse import Namespace
from unittest.mock import patch

import pytest

from tasktrack.__main__ import build_parser, main
from tasktrack.commands.cli import CLICommand
from tasktrack.commands.server import ServerCommand
from tasktrack.exceptions import DatabaseError


def test_parser_registers_commands():
    parser = build_parser()

    args = parser.parse_args(["init", "--database-path", "/tmp/x.db"])
    assert args.command == "init"
    assert args.database_path == "/tmp/x.db"

    args = parser.parse_args(["server", "--port", "9000"])
    assert args.command == "server"
    assert args.port == 9000
    assert args.init_only is False


def test_main_without_command_prints_help():
    assert main([]) == 1


def test_main_init_creates_database(temp_db_path):
    assert main(["init", "--database-path", temp_db_path]) == 0


def test_server_init_fails_when_database_cannot_open(tmp_path, monkeypatch):
    directory = tmp_path / "not_a_file"
    directory.mkdir()
    monkeypatch.setenv("TASKS_DB_PATH", str(directory))
    args = Namespace(host="127.0.0.1", port=8080, log_level="info", reload=False, init_only=False)

    with pytest.raises(DatabaseError):
        ServerCommand(args).init()


def test_server_runs_uvicorn(temp_db_path, monkeypatch):
    monkeypatch.setenv("TASKS_DB_PATH", temp_db_path)
    args = Namespace(host="127.0.0.1", port=8123, log_level="info", reload=False, init_only=False)

    with patch("tasktrack.commands.server.uvicorn.Server") as mock_server:
        with ServerCommand(args) as cmd:
            result = cmd.run()

    assert result == 0
    mock_server.return_value.run.assert_called_once()
    config = mock_server.call_args[0][0]
    assert config.port == 8123


def test_cli_command_passes_arguments_through():
    with patch("tasktrack.cli.make_request") as mock_request:
        mock_request.return_value.json.return_value = []
        cmd = CLICommand(Namespace(cli_args=["list"]))
        with cmd:
            result = cmd.run()

    assert result == 0
    mock_request.assert_called_once()
