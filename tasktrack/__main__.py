#!/usr/bin/env python3
"""
tasktrack - Main entry point

This module provides the Command base class and manages the command lifecycle.
"""
import argparse
import sys
import logging
from abc import ABC, abstractmethod
from typing import Optional, Dict

from tasktrack.config import get_settings
from tasktrack.logging_config import setup_logging

logger = logging.getLogger(__name__)


class Command(ABC):
    """
    Base class for all commands.

    Commands follow a lifecycle:
    1. init() - Initialize resources
    2. run() - Execute the command
    3. cleanup() - Clean up resources

    Commands can declare arguments using add_arguments().
    """

    def __init__(self, args: Optional[argparse.Namespace] = None):
        self.args = args
        self._initialized = False
        self._cleaned_up = False

    @classmethod
    def get_name(cls) -> str:
        """Get the command name (used in CLI)."""
        # Convert class name like "ServerCommand" to "server"
        return cls.__name__.replace("Command", "").lower()

    @classmethod
    def get_description(cls) -> str:
        """Get command description for help text."""
        return cls.__doc__ or f"{cls.__name__} command"

    @classmethod
    def add_arguments(cls, parser: argparse.ArgumentParser) -> None:
        """Add command-specific arguments to the parser."""
        pass

    def init(self) -> None:
        """
        Initialize the command.

        Called before run(). Override to set up resources, validate arguments, etc.
        """
        if self._initialized:
            return

        self._initialized = True
        logger.debug(f"Initialized {self.__class__.__name__}")

    @abstractmethod
    def run(self) -> int:
        """
        Execute the command.

        Returns:
            Exit code (0 for success, non-zero for failure)
        """
        pass

    def cleanup(self) -> None:
        """
        Clean up resources.

        Called after run() (even if run() raises an exception).
        """
        if self._cleaned_up:
            return

        self._cleaned_up = True
        logger.debug(f"Cleaned up {self.__class__.__name__}")

    def __enter__(self):
        self.init()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.cleanup()
        return False  # Don't suppress exceptions


_COMMANDS: Dict[str, type] = {}


def register_command(command_class: type) -> None:
    """Register a command class."""
    _COMMANDS[command_class.get_name()] = command_class


def get_command(name: str) -> Optional[type]:
    """Get a registered command class by name."""
    return _COMMANDS.get(name)


def list_commands() -> Dict[str, type]:
    """List all registered commands."""
    return _COMMANDS.copy()


def build_parser() -> argparse.ArgumentParser:
    """Register the built-in commands and build the top-level parser."""
    # Imported here; the command modules import Command from this module
    from tasktrack.commands.server import ServerCommand
    from tasktrack.commands.initialize import InitializeCommand
    from tasktrack.commands.cli import CLICommand

    for command_class in (ServerCommand, InitializeCommand, CLICommand):
        register_command(command_class)

    parser = argparse.ArgumentParser(
        description="tasktrack - task tracking REST API",
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    subparsers = parser.add_subparsers(
        dest="command",
        help="Command to run",
        metavar="COMMAND"
    )
    for name, cmd_class in _COMMANDS.items():
        subparser = subparsers.add_parser(
            name,
            help=cmd_class.get_description(),
            description=cmd_class.get_description()
        )
        cmd_class.add_arguments(subparser)
    return parser


def main(argv=None) -> int:
    """Main entry point for the tasktrack package."""
    setup_logging(get_settings().log_level)

    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    cmd_class = get_command(args.command)
    if not cmd_class:
        print(f"Unknown command: {args.command}", file=sys.stderr)
        return 1

    try:
        with cmd_class(args) as cmd:
            return cmd.run()
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return 130
    except Exception as e:
        logger.exception(f"Command failed: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
