"""
Middleware setup and configuration.
"""
from tasktrack.config import Settings
from tasktrack.middleware.cors import CORSHeadersMiddleware


def setup_middleware(app, settings: Settings):
    """Set up all middleware for the FastAPI application."""
    app.add_middleware(CORSHeadersMiddleware, allow_origin=settings.cors_allow_origin)
