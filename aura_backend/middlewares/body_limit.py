"""Middleware Starlette qui refuse les corps de requête trop volumineux.

Les images arrivent en base64 dans du JSON; la limite se lit sur l'en-tête Content-Length.
"""

from collections.abc import Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from aura_backend.apigw.errors import create_error_response
from aura_backend.core.http_constants import HTTP_PAYLOAD_TOO_LARGE, MAX_BODY_BYTES


class BodySizeLimitMiddleware(BaseHTTPMiddleware):
    """Répond 413 quand Content-Length dépasse `max_bytes`."""

    def __init__(self, app: ASGIApp, max_bytes: int = MAX_BODY_BYTES) -> None:
        super().__init__(app)
        self.max_bytes = max_bytes

    async def dispatch(self, request, call_next: Callable):
        length = request.headers.get("content-length")
        if length and length.isdigit() and int(length) > self.max_bytes:
            return create_error_response(
                HTTP_PAYLOAD_TOO_LARGE,
                "Request body too large",
                f"limit is {self.max_bytes} bytes",
            )
        return await call_next(request)
