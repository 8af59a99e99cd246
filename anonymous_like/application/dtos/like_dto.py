from enum import Enum

from pydantic import BaseModel, ConfigDict


class LikeRequestDTO(BaseModel):
    """Body of a like request."""

    model_config = ConfigDict(strict=True)

    strategy: str
    token: str


class LikeOutcome(str, Enum):
    """Non-exceptional results of a like attempt."""

    SUCCESS = "success"
    CAPTCHA_FAILED = "captcha_failed"
    STRATEGY_NOT_FOUND = "strategy_not_found"
    ALREADY_LIKED = "already_liked"
