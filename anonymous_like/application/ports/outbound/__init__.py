from .captcha_verifier import CaptchaVerifier
from .like_repository import LikeRepository, LikeStore

__all__ = ["CaptchaVerifier", "LikeRepository", "LikeStore"]
