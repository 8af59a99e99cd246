import re
from dataclasses import dataclass
from datetime import datetime, timedelta

# One like per (strategy, ip) inside this trailing window
LIKE_WINDOW = timedelta(days=1)

_FORWARDED_SEPARATOR = re.compile(r"\s*,\s*")


@dataclass(frozen=True)
class AnonymousLike:
    """A single IP address liking a single strategy."""

    strategy_id: str
    ip_addr: str
    created_at: datetime | None = None  # assigned by the datastore on insert

    def blocks(self, at: datetime) -> bool:
        """Whether this like prevents another one from the same IP at `at`."""
        if self.created_at is None:
            return False
        return self.created_at > at - LIKE_WINDOW


def client_ip(forwarded_for: str | None) -> str:
    """First address of an X-Forwarded-For chain, or "" when there is none."""
    if forwarded_for is None:
        return ""
    return _FORWARDED_SEPARATOR.split(forwarded_for)[0]
