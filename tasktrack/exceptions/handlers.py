"""
Exception handlers for the application.

Every error response is plain text: the error message for storage failures,
a fixed "Invalid input" for malformed payloads.
"""
import logging

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse

from tasktrack.exceptions.errors import (
    ServiceError,
    NotFoundError,
    ValidationError,
    to_http_status,
)

logger = logging.getLogger(__name__)

INVALID_INPUT = "Invalid input"


async def global_exception_handler(request: Request, exc: Exception) -> PlainTextResponse:
    """
    Global exception handler for unhandled exceptions.
    """
    logger.error(
        f"Unhandled exception in {request.method} {request.url.path}: {str(exc)}",
        exc_info=True,
        extra={
            "method": request.method,
            "path": request.url.path,
            "exception_type": type(exc).__name__,
        }
    )
    return PlainTextResponse(str(exc) or "Internal server error", status_code=500)


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> PlainTextResponse:
    """
    Report undecodable or invalid request bodies as 400 Invalid input.
    """
    errors = []
    for error in exc.errors():
        field = " -> ".join(str(loc) for loc in error["loc"])
        errors.append(f"{field}: {error['msg']}")

    logger.warning(
        f"Validation error in {request.method} {request.url.path}: {', '.join(errors)}",
        extra={
            "method": request.method,
            "path": request.url.path,
            "errors": errors,
        }
    )
    return PlainTextResponse(INVALID_INPUT, status_code=400)


async def service_error_handler(request: Request, exc: ServiceError) -> PlainTextResponse:
    """
    Handler for ServiceError exceptions raised by the repository.
    """
    log_level = logging.WARNING if isinstance(exc, (NotFoundError, ValidationError)) else logging.ERROR
    logger.log(
        log_level,
        f"Service error in {request.method} {request.url.path}: {exc.message}",
        exc_info=log_level >= logging.ERROR,
        extra={
            "method": request.method,
            "path": request.url.path,
            "error_type": exc.__class__.__name__,
            "error_message": exc.message,
        }
    )

    status_code = to_http_status(exc)
    body = INVALID_INPUT if isinstance(exc, ValidationError) else exc.message
    return PlainTextResponse(body, status_code=status_code)


def setup_exception_handlers(app):
    """
    Register exception handlers with the FastAPI app.
    """
    app.add_exception_handler(ServiceError, service_error_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, global_exception_handler)
