from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncConnection, create_async_engine

from ..logging import correlation_id, safe_correlation_id


def tag_with_correlation_id(conn, cursor, statement, parameters, context, executemany):
    """Prefix a statement with /* correlation_id=<id> */ for the datastore logs."""
    cid = safe_correlation_id(correlation_id.get(""))
    if cid:
        statement = f"/* correlation_id={cid} */ {statement}"
    return statement, parameters


class Database:
    """Process-wide pool of datastore connections.

    Connections are opened lazily on first checkout and the pool never grows
    past `pool_size`. A request that finds every connection checked out waits
    for one to come back, indefinitely unless `pool_timeout` is set.
    """

    def __init__(self, url: str, pool_size: int = 3, pool_timeout: float | None = None) -> None:
        self._engine = create_async_engine(
            url,
            echo=False,
            pool_size=pool_size,
            max_overflow=0,
            pool_timeout=pool_timeout,
            pool_pre_ping=True,
            # Each statement commits on its own, there is no wrapping transaction
            isolation_level="AUTOCOMMIT",
        )
        event.listen(
            self._engine.sync_engine,
            "before_cursor_execute",
            tag_with_correlation_id,
            retval=True,
        )

    @property
    def pool(self):
        return self._engine.pool

    @asynccontextmanager
    async def connect(self) -> AsyncIterator[AsyncConnection]:
        """Check out one pooled connection, returning it on every exit path."""
        async with self._engine.connect() as conn:
            yield conn

    async def close(self) -> None:
        """Close the pool."""
        await self._engine.dispose()
