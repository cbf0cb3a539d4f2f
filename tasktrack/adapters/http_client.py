"""
Adapter for HTTP client library (httpx).
Isolates httpx-specific imports to make library replacement easier.
"""
from abc import ABC, abstractmethod
from typing import Optional, Any

import httpx


class HTTPResponse:
    """Abstracted HTTP response interface."""

    def __init__(self, response):
        self._response = response

    def raise_for_status(self) -> None:
        """Raise HTTPStatusError if status code indicates error."""
        self._response.raise_for_status()

    def json(self) -> Any:
        return self._response.json()


class HTTPClientAdapter(ABC):
    """Abstract adapter for HTTP client operations."""

    @abstractmethod
    def get(self, url: str, **kwargs) -> HTTPResponse:
        pass

    @abstractmethod
    def post(self, url: str, **kwargs) -> HTTPResponse:
        pass

    @abstractmethod
    def put(self, url: str, **kwargs) -> HTTPResponse:
        pass

    @abstractmethod
    def delete(self, url: str, **kwargs) -> HTTPResponse:
        pass


class HttpxClientAdapter(HTTPClientAdapter):
    """httpx implementation of HTTPClientAdapter."""

    def __init__(self, timeout: Optional[float] = None, **kwargs):
        self._client = httpx.Client(timeout=timeout, **kwargs)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def get(self, url: str, **kwargs) -> HTTPResponse:
        return HTTPResponse(self._client.get(url, **kwargs))

    def post(self, url: str, **kwargs) -> HTTPResponse:
        return HTTPResponse(self._client.post(url, **kwargs))

    def put(self, url: str, **kwargs) -> HTTPResponse:
        return HTTPResponse(self._client.put(url, **kwargs))

    def delete(self, url: str, **kwargs) -> HTTPResponse:
        return HTTPResponse(self._client.delete(url, **kwargs))

    def close(self):
        self._client.close()


class HTTPClientAdapterFactory:
    """Factory for creating HTTP client adapters."""

    @staticmethod
    def create_client(timeout: Optional[float] = None, **kwargs) -> HttpxClientAdapter:
        """Create synchronous HTTP client adapter."""
        return HttpxClientAdapter(timeout=timeout, **kwargs)


# Export exception classes for callers that should not import httpx directly
HTTPError = httpx.HTTPError
HTTPStatusError = httpx.HTTPStatusError
TimeoutException = httpx.TimeoutException
RequestError = httpx.RequestError
