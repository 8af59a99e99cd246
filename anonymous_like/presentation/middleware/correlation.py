"""
Correlation IDs for like requests.

A client supplied X-Request-ID (or X-Correlation-ID) is reused only when it
is a short token of letters, digits, dots, dashes and underscores; anything
else is replaced by a fresh uuid4. The ID ends up in log records, SQL comments
and the response headers.
"""

from uuid import uuid4

import structlog
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from ...domain import client_ip
from ...infrastructure.logging import is_valid_correlation_id, set_correlation_id

logger = structlog.get_logger()


def request_correlation_id(request: Request) -> str:
    incoming = request.headers.get("X-Request-ID") or request.headers.get("X-Correlation-ID")
    if is_valid_correlation_id(incoming):
        return incoming
    if incoming:
        logger.warning("Discarding malformed request ID", length=len(incoming))
    return str(uuid4())


class CorrelationIdMiddleware(BaseHTTPMiddleware):
    """Tags every request with a correlation ID and logs its start and end."""

    async def dispatch(self, request: Request, call_next) -> Response:
        cid = request_correlation_id(request)
        set_correlation_id(cid)

        with structlog.contextvars.bound_contextvars(
            method=request.method,
            path=request.url.path,
            client_ip=client_ip(request.headers.get("x-forwarded-for")),
        ):
            logger.info("Request started")
            response = await call_next(request)
            logger.info("Request completed", status_code=response.status_code)

        response.headers["X-Request-ID"] = cid
        response.headers["X-Correlation-ID"] = cid
        return response
