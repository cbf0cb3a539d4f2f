"""
Server command - Run the web server.
"""
import logging

import uvicorn

from tasktrack.__main__ import Command
from tasktrack.config import get_settings

logger = logging.getLogger(__name__)


class ServerCommand(Command):
    """Run the tasktrack web server."""

    @classmethod
    def add_arguments(cls, parser):
        """Add server-specific arguments."""
        settings = get_settings()
        parser.add_argument(
            "--host",
            default=settings.host,
            help=f"Host to bind to (default: {settings.host} or HOST env var)"
        )
        parser.add_argument(
            "--port",
            type=int,
            default=settings.port,
            help=f"Port to bind to (default: {settings.port} or PORT env var)"
        )
        parser.add_argument(
            "--log-level",
            default=settings.log_level.lower(),
            choices=["debug", "info", "warning", "error", "critical"],
            help="Log level (default: INFO or LOG_LEVEL env var)"
        )
        parser.add_argument(
            "--reload",
            action="store_true",
            help="Enable auto-reload (development mode)"
        )
        parser.add_argument(
            "--init-only",
            action="store_true",
            help="Initialize the database, then exit (does not start server)"
        )

    def init(self):
        """Open the database and build the application.

        A DatabaseError here propagates and aborts startup.
        """
        super().init()
        if self.args.init_only:
            return

        from tasktrack.app import create_app

        self.app = create_app()
        logger.info(f"Server initialized on {self.args.host}:{self.args.port}")

    def run(self) -> int:
        """Run the web server or initialize database if --init-only is set."""
        if self.args.init_only:
            from argparse import Namespace
            from tasktrack.commands.initialize import InitializeCommand

            with InitializeCommand(Namespace(database_path=None)) as init_cmd:
                return init_cmd.run()

        config = uvicorn.Config(
            self.app,
            host=self.args.host,
            port=self.args.port,
            log_level=self.args.log_level,
            access_log=True,
            reload=self.args.reload,
            timeout_keep_alive=30,
            timeout_graceful_shutdown=30,
        )
        server = uvicorn.Server(config)

        try:
            logger.info(f"Starting server on {self.args.host}:{self.args.port}")
            server.run()
            return 0
        except KeyboardInterrupt:
            logger.info("Received keyboard interrupt, shutting down...")
            return 130

    def cleanup(self):
        """Clean up server resources."""
        super().cleanup()
        logger.info("Server stopped")
