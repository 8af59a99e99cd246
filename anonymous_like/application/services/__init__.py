from .like_strategy_service import LikeStrategyService

__all__ = ["LikeStrategyService"]
