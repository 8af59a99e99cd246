from .like_dto import LikeOutcome, LikeRequestDTO

__all__ = ["LikeOutcome", "LikeRequestDTO"]
