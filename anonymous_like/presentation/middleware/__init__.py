from .correlation import CorrelationIdMiddleware
from .request_validation import RequestSizeLimitMiddleware

__all__ = [
    "CorrelationIdMiddleware",
    "RequestSizeLimitMiddleware",
]
