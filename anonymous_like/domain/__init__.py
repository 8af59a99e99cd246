from .like import LIKE_WINDOW, AnonymousLike, client_ip

__all__ = ["LIKE_WINDOW", "AnonymousLike", "client_ip"]
