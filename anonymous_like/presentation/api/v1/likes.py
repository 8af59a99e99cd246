import structlog
from fastapi import APIRouter, Depends, Request, Response

from ....application.ports.inbound import LikeStrategyUseCase
from ...responses import LikeResponseFormatter
from ..dependencies import get_like_service, get_response_formatter

router = APIRouter(tags=["likes"])
logger = structlog.get_logger()


@router.options("/", include_in_schema=False)
@router.options("/like", include_in_schema=False)
async def preflight(
    formatter: LikeResponseFormatter = Depends(get_response_formatter),
) -> Response:
    """CORS preflight, answered without touching the datastore."""
    return formatter.preflight()


@router.post(
    "/",
    summary="Like a strategy",
    description="Record one anonymous like per IP address and strategy per 24 hours.",
)
@router.post("/like", include_in_schema=False)
async def like_strategy(
    request: Request,
    service: LikeStrategyUseCase = Depends(get_like_service),
    formatter: LikeResponseFormatter = Depends(get_response_formatter),
) -> Response:
    # The body is read raw and validated by the service so that malformed
    # input goes through the same error path as downstream failures.
    try:
        raw_body = await request.body()
        outcome = await service.execute(raw_body, request.headers.get("x-forwarded-for"))
    except Exception as e:
        logger.error(
            "Like request failed",
            error=str(e),
            error_type=type(e).__name__,
            exc_info=True,
        )
        return formatter.error(e)

    return formatter.outcome(outcome)
