"""
Adapters for third-party libraries.
"""
from tasktrack.adapters.http_client import (
    HTTPClientAdapterFactory,
    HTTPResponse,
    HTTPError,
    HTTPStatusError,
    TimeoutException,
    RequestError,
)

__all__ = [
    "HTTPClientAdapterFactory",
    "HTTPResponse",
    "HTTPError",
    "HTTPStatusError",
    "TimeoutException",
    "RequestError",
]
