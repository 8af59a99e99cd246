from .database import Database
from .like_repository import PostgresLikeRepository, PostgresLikeStore

__all__ = ["Database", "PostgresLikeRepository", "PostgresLikeStore"]
