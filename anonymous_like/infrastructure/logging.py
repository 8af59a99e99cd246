"""
Structured logging for the like service.

Every record is rendered as one JSON line carrying the service name and, while
a request is in flight, its correlation ID. The same ID tags SQL statements,
so it is restricted to a safe character set before it is stored.
"""

import logging
import re
import sys
import time
from contextvars import ContextVar

import structlog

# Context variable for request correlation
correlation_id: ContextVar[str] = ContextVar("correlation_id", default="")

_CORRELATION_ID = re.compile(r"^[A-Za-z0-9._-]{1,64}$")
_UNSAFE_CORRELATION_CHARS = re.compile(r"[^A-Za-z0-9._-]")


def configure_logging(service_name: str, debug: bool = False) -> None:
    """
    Route structlog through stdlib logging to stdout as JSON.

    Args:
        service_name: Added to every record as `service`
        debug: Emit debug level records
    """
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=logging.DEBUG if debug else logging.INFO,
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            _request_context(service_name),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
    )


def _request_context(service_name: str):
    """Processor adding the service name and the current correlation ID."""

    def processor(logger, method_name, event_dict):
        event_dict["service"] = service_name
        cid = correlation_id.get()
        if cid:
            event_dict["correlation_id"] = cid
        return event_dict

    return processor


def is_valid_correlation_id(value: str | None) -> bool:
    """Whether a client supplied request ID can be used as is."""
    return bool(value) and _CORRELATION_ID.match(value) is not None


def safe_correlation_id(value: str) -> str:
    """Drop every character that could break out of a SQL comment."""
    return _UNSAFE_CORRELATION_CHARS.sub("", value)[:64]


def set_correlation_id(cid: str) -> None:
    """Set correlation ID for current context."""
    correlation_id.set(cid)


class Timer:
    """
    Context manager measuring wall time.

    Usage:
        with Timer() as t:
            await verifier.verify(token, ip)
        logger.info("Captcha verified", duration_ms=t.duration_ms)
    """

    def __init__(self):
        self._start: float = 0
        self._end: float = 0

    def __enter__(self) -> "Timer":
        self._start = time.perf_counter()
        return self

    def __exit__(self, *args) -> None:
        self._end = time.perf_counter()

    @property
    def duration_ms(self) -> float:
        return round((self._end - self._start) * 1000, 2)


def sanitize_for_logging(value: str, visible_chars: int = 8) -> str:
    """Keep the first `visible_chars` of a secret, e.g. a captcha token."""
    if not value:
        return ""
    if len(value) <= visible_chars:
        return value
    return value[:visible_chars] + "..."
