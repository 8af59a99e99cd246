from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from sqlalchemy import Interval, cast, insert, literal, literal_column, select
from sqlalchemy.ext.asyncio import AsyncConnection
from sqlalchemy.sql import func

from ...application.ports.outbound import LikeRepository, LikeStore
from ...domain import LIKE_WINDOW, AnonymousLike
from .database import Database
from .models import AnonLikeModel, StrategyModel

# Compared against the datastore clock, not the application clock
_LIKE_WINDOW_SQL = cast(literal(LIKE_WINDOW, Interval()), Interval())


def strategy_exists_stmt(strategy_id: str):
    return (
        select(literal_column("1"))
        .select_from(StrategyModel)
        .where(StrategyModel.id == strategy_id)
    )


def recent_like_stmt(strategy_id: str, ip_addr: str):
    return (
        select(literal_column("1"))
        .select_from(AnonLikeModel)
        .where(
            AnonLikeModel.strategy == strategy_id,
            AnonLikeModel.ip_addr == ip_addr,
            AnonLikeModel.created_at > func.now() - _LIKE_WINDOW_SQL,
        )
    )


def insert_like_stmt(like: AnonymousLike):
    return (
        insert(AnonLikeModel)
        .values(strategy=like.strategy_id, ip_addr=like.ip_addr)
        # created_at is filled in by the datastore and not read back
        .inline()
    )


class PostgresLikeRepository(LikeRepository):
    def __init__(self, connection: AsyncConnection):
        self._conn = connection

    async def strategy_exists(self, strategy_id: str) -> bool:
        result = await self._conn.execute(strategy_exists_stmt(strategy_id))
        return result.first() is not None

    async def liked_within_window(self, strategy_id: str, ip_addr: str) -> bool:
        result = await self._conn.execute(recent_like_stmt(strategy_id, ip_addr))
        return result.first() is not None

    async def add(self, like: AnonymousLike) -> None:
        await self._conn.execute(insert_like_stmt(like))


class PostgresLikeStore(LikeStore):
    def __init__(self, database: Database):
        self._database = database

    @asynccontextmanager
    async def acquire(self) -> AsyncIterator[PostgresLikeRepository]:
        async with self._database.connect() as conn:
            yield PostgresLikeRepository(conn)
