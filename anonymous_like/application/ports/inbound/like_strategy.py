from abc import ABC, abstractmethod

from ...dtos import LikeOutcome


class LikeStrategyUseCase(ABC):
    """Inbound port for liking a strategy anonymously."""

    @abstractmethod
    async def execute(self, raw_body: bytes, forwarded_for: str | None) -> LikeOutcome:
        """Record a like for the strategy named in `raw_body`."""
        ...
