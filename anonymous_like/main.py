from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI

from . import __version__
from .config import settings
from .infrastructure.logging import configure_logging
from .presentation.api.dependencies import get_database
from .presentation.api.v1 import health, likes
from .presentation.middleware import CorrelationIdMiddleware, RequestSizeLimitMiddleware

configure_logging(settings.service_name, debug=settings.debug)

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    # The pool opens connections on first checkout, nothing to warm up here
    logger.info(
        "Starting application",
        service=settings.service_name,
        response_style=settings.response_style.value,
        pool_size=settings.db_pool_size,
    )

    yield

    await get_database().close()
    logger.info("Application shutdown complete")


app = FastAPI(
    title="Anonymous Like API",
    description="Captcha-gated anonymous likes for strategies",
    version=__version__,
    lifespan=lifespan,
)

# Order matters - first added = last executed
app.add_middleware(RequestSizeLimitMiddleware, allow_origin=settings.cors_allow_origin)
app.add_middleware(CorrelationIdMiddleware)  # Request tracing (runs first)

app.include_router(health.router)
app.include_router(likes.router)
