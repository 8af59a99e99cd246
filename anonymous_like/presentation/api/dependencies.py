from ...application.services import LikeStrategyService
from ...config import settings
from ...infrastructure.captcha import TurnstileVerifier
from ...infrastructure.persistence import Database, PostgresLikeStore
from ..responses import LikeResponseFormatter

# Singleton database instance, created on first use
_database: Database | None = None


def get_database() -> Database:
    global _database
    if _database is None:
        _database = Database(
            settings.async_database_url,
            pool_size=settings.db_pool_size,
            pool_timeout=settings.db_pool_timeout,
        )
    return _database


def get_captcha_verifier() -> TurnstileVerifier:
    return TurnstileVerifier(
        secret=settings.captcha_secret,
        verify_url=settings.captcha_verify_url,
    )


def get_like_service() -> LikeStrategyService:
    return LikeStrategyService(
        store=PostgresLikeStore(get_database()),
        captcha_verifier=get_captcha_verifier(),
    )


def get_response_formatter() -> LikeResponseFormatter:
    return LikeResponseFormatter(
        style=settings.response_style,
        allow_origin=settings.cors_allow_origin,
    )
