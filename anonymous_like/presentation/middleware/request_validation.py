"""Request size limit.

A like body is two short strings; anything larger is rejected before the
handler checks out a database connection.
"""

import structlog
from fastapi import Request, status
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import PlainTextResponse, Response

from ..responses import cors_headers

logger = structlog.get_logger()

MAX_REQUEST_SIZE = 64 * 1024  # 64 KiB


class RequestSizeLimitMiddleware(BaseHTTPMiddleware):
    """Rejects requests whose Content-Length exceeds the configured limit."""

    def __init__(self, app, max_size: int = MAX_REQUEST_SIZE, allow_origin: str = "*") -> None:
        super().__init__(app)
        self._max_size = max_size
        self._headers = cors_headers(allow_origin)

    async def dispatch(self, request: Request, call_next) -> Response:
        content_length = request.headers.get("content-length")

        if content_length:
            try:
                size = int(content_length)
            except ValueError:
                logger.warning(
                    "Invalid Content-Length header",
                    content_length=content_length,
                    path=request.url.path,
                )
            else:
                if size > self._max_size:
                    logger.warning(
                        "Request rejected: payload too large",
                        content_length=size,
                        max_size=self._max_size,
                        path=request.url.path,
                    )
                    return PlainTextResponse(
                        f"Request body too large. Maximum size: {self._max_size} bytes",
                        status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
                        headers=self._headers,
                    )

        return await call_next(request)
