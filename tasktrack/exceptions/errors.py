"""
Standard Exception Hierarchy for tasktrack

All exceptions inherit from ServiceError. The storage layer raises
NotFoundError (the targeted row does not exist) and DatabaseError (any other
persistence fault). ValidationError is raised only at the HTTP boundary for
malformed request payloads.
"""
from typing import Any


# ============================================================================
# Base Exception Class
# ============================================================================

class ServiceError(Exception):
    """Base exception for all service errors.

    Attributes:
        message: Human-readable error message
        context: Dictionary of additional context
        original_error: Optional original exception that caused this error
    """

    def __init__(
        self,
        message: str,
        *,
        context: dict[str, Any] | None = None,
        original_error: Exception | None = None
    ):
        super().__init__(message)
        self.message = message
        self.context = context or {}
        self.original_error = original_error

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for serialization."""
        result = {
            "error_type": self.__class__.__name__,
            "message": self.message,
        }
        if self.context:
            result["context"] = self.context
        if self.original_error:
            result["original_error"] = {
                "type": type(self.original_error).__name__,
                "message": str(self.original_error)
            }
        return result


# ============================================================================
# Common Exception Types
# ============================================================================

class NotFoundError(ServiceError):
    """Raised when a requested resource is not found.

    Attributes:
        resource_type: Type of resource (e.g., "Task")
        resource_id: ID of the resource that was not found
    """

    def __init__(
        self,
        resource_type: str,
        resource_id: str | int,
        *,
        message: str | None = None,
        context: dict[str, Any] | None = None
    ):
        if message is None:
            message = f"{resource_type} with ID '{resource_id}' not found"

        super().__init__(message, context=context)
        self.resource_type = resource_type
        self.resource_id = str(resource_id)
        self.context.setdefault("resource_type", resource_type)
        self.context.setdefault("resource_id", str(resource_id))


class ValidationError(ServiceError):
    """Raised when a request payload is malformed.

    Attributes:
        field: Optional field name that failed validation
    """

    def __init__(
        self,
        message: str,
        *,
        field: str | None = None,
        context: dict[str, Any] | None = None
    ):
        super().__init__(message, context=context)
        self.field = field
        if field is not None:
            self.context.setdefault("field", field)


class DatabaseError(ServiceError):
    """Raised when a database operation fails.

    The message of the underlying driver error is preserved so it can be
    reported back to the caller.

    Attributes:
        operation: Optional database operation that failed (e.g., "INSERT", "SELECT")
        original_error: Optional original database exception
    """

    def __init__(
        self,
        message: str,
        *,
        original_error: Exception | None = None,
        operation: str | None = None,
        context: dict[str, Any] | None = None
    ):
        super().__init__(message, context=context, original_error=original_error)
        self.operation = operation
        if operation is not None:
            self.context.setdefault("operation", operation)


# ============================================================================
# Service-Specific Exceptions
# ============================================================================

class TaskNotFoundError(NotFoundError):
    """Raised when a task is not found."""

    def __init__(self, task_id: str | int, **kwargs):
        super().__init__("Task", task_id, **kwargs)
        self.task_id = str(task_id)


# ============================================================================
# HTTP status mapping
# ============================================================================

_STATUS_CODE_MAP = {
    NotFoundError: 404,
    ValidationError: 400,
    DatabaseError: 500,
}


def to_http_status(exc: ServiceError, default_status_code: int = 500) -> int:
    """Map a ServiceError to the HTTP status code reported to clients."""
    for exc_type, status_code in _STATUS_CODE_MAP.items():
        if isinstance(exc, exc_type):
            return status_code
    return default_status_code


__all__ = [
    "ServiceError",
    "NotFoundError",
    "ValidationError",
    "DatabaseError",
    "TaskNotFoundError",
    "to_http_status",
]
