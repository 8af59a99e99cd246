import asyncio

import structlog

from ...domain import AnonymousLike, client_ip
from ...infrastructure.logging import Timer, sanitize_for_logging
from ..dtos import LikeOutcome, LikeRequestDTO
from ..ports.inbound import LikeStrategyUseCase
from ..ports.outbound import CaptchaVerifier, LikeRepository, LikeStore

logger = structlog.get_logger()


class LikeStrategyService(LikeStrategyUseCase):
    """Application service implementing the anonymous like use case."""

    def __init__(self, store: LikeStore, captcha_verifier: CaptchaVerifier):
        self._store = store
        self._captcha = captcha_verifier

    async def execute(self, raw_body: bytes, forwarded_for: str | None) -> LikeOutcome:
        # The connection is checked out before the body is parsed, so a bad
        # body must still leave through the context exit.
        async with self._store.acquire() as likes:
            with Timer() as t:
                request = LikeRequestDTO.model_validate_json(raw_body)
                ip = client_ip(forwarded_for)
                outcome = await self._like(likes, request, ip)

            logger.info(
                "Like request handled",
                outcome=outcome.value,
                strategy=request.strategy,
                client_ip=ip,
                duration_ms=t.duration_ms,
            )
            return outcome

    async def _like(self, likes: LikeRepository, request: LikeRequestDTO, ip: str) -> LikeOutcome:
        if not await self._captcha.verify(request.token, ip):
            logger.info(
                "Captcha rejected",
                token=sanitize_for_logging(request.token),
                client_ip=ip,
            )
            return LikeOutcome.CAPTCHA_FAILED

        strategy_found, already_liked = await asyncio.gather(
            likes.strategy_exists(request.strategy),
            likes.liked_within_window(request.strategy, ip),
        )

        if not strategy_found:
            return LikeOutcome.STRATEGY_NOT_FOUND

        if already_liked:
            return LikeOutcome.ALREADY_LIKED

        # Not atomic with the lookup above: two racing requests for the same
        # (strategy, ip) can both get here.
        await likes.add(AnonymousLike(strategy_id=request.strategy, ip_addr=ip))
        return LikeOutcome.SUCCESS
