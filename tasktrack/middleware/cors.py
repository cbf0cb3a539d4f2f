"""
Cross-origin headers middleware for the task API.

Adds the CORS headers to every response and answers OPTIONS preflight
requests directly, without reaching the route handlers.
"""
import logging

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

logger = logging.getLogger(__name__)

ALLOW_METHODS = "GET, POST, PUT, DELETE, OPTIONS"
ALLOW_HEADERS = "Content-Type, Authorization"


class CORSHeadersMiddleware(BaseHTTPMiddleware):
    """Middleware for adding cross-origin headers to all responses."""

    def __init__(self, app, allow_origin: str = "*"):
        super().__init__(app)
        self.allow_origin = allow_origin
        logger.info(
            "CORS headers middleware initialized",
            extra={"allow_origin": self.allow_origin},
        )

    def _apply_headers(self, response: Response) -> Response:
        response.headers["Access-Control-Allow-Origin"] = self.allow_origin
        response.headers["Access-Control-Allow-Methods"] = ALLOW_METHODS
        response.headers["Access-Control-Allow-Headers"] = ALLOW_HEADERS
        response.headers["Access-Control-Allow-Credentials"] = "true"
        return response

    async def dispatch(self, request: Request, call_next):
        if request.method == "OPTIONS":
            return self._apply_headers(Response(status_code=200))

        response = await call_next(request)
        return self._apply_headers(response)
