"""
Exception handlers and standard exceptions for the application.
"""
from tasktrack.exceptions.errors import (
    ServiceError,
    NotFoundError,
    ValidationError,
    DatabaseError,
    TaskNotFoundError,
    to_http_status,
)

__all__ = [
    "ServiceError",
    "NotFoundError",
    "ValidationError",
    "DatabaseError",
    "TaskNotFoundError",
    "to_http_status",
]
