"""
Outbound ports for like persistence.

A LikeStore hands out one LikeRepository per request. Each repository is bound
to a single pooled connection which goes back to the pool when the
`acquire()` context exits.
"""

from abc import ABC, abstractmethod
from contextlib import AbstractAsyncContextManager

from ....domain import AnonymousLike


class LikeRepository(ABC):
    @abstractmethod
    async def strategy_exists(self, strategy_id: str) -> bool:
        pass

    @abstractmethod
    async def liked_within_window(self, strategy_id: str, ip_addr: str) -> bool:
        """Whether `ip_addr` already liked the strategy during the last day."""
        pass

    @abstractmethod
    async def add(self, like: AnonymousLike) -> None:
        pass


class LikeStore(ABC):
    @abstractmethod
    def acquire(self) -> AbstractAsyncContextManager[LikeRepository]:
        """Check out a connection and wrap it in a repository."""
        pass
