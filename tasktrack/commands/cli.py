"""
CLI command - Run the command-line client.

This wraps the click-based client in tasktrack.cli.
"""
import argparse
import logging

from tasktrack.__main__ import Command

logger = logging.getLogger(__name__)


class CLICommand(Command):
    """Run the tasktrack command-line client."""

    @classmethod
    def add_arguments(cls, parser):
        parser.add_argument(
            "cli_args",
            nargs=argparse.REMAINDER,
            help="Arguments to pass to the CLI tool"
        )

    def run(self) -> int:
        """Run the CLI tool."""
        from tasktrack.cli import cli

        click_args = getattr(self.args, "cli_args", None) or []
        try:
            cli.main(args=click_args, prog_name="tasktrack cli")
            return 0
        except SystemExit as e:
            return e.code if e.code is not None else 0
