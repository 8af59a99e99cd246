from .like_strategy import LikeStrategyUseCase

__all__ = ["LikeStrategyUseCase"]
