"""Wire encoding of like outcomes.

Two encodings exist for the same outcomes. The machine style always answers
200 and carries an outcome code in the body; the human style carries a
readable message and a matching HTTP status. CORS headers go on every
response in both styles.
"""

from fastapi import status
from fastapi.responses import PlainTextResponse

from ..application.dtos import LikeOutcome
from ..config import ResponseStyle

CORS_ALLOW_HEADERS = "authorization, x-client-info, apikey, content-type"

_MACHINE: dict[LikeOutcome, tuple[int, str]] = {
    LikeOutcome.SUCCESS: (status.HTTP_200_OK, "SUCCESS"),
    LikeOutcome.CAPTCHA_FAILED: (status.HTTP_200_OK, "ERROR_CAPTCHA_FAILED"),
    LikeOutcome.STRATEGY_NOT_FOUND: (status.HTTP_200_OK, "ERROR_STRATEGY_NOT_FOUND"),
    LikeOutcome.ALREADY_LIKED: (status.HTTP_200_OK, "ERROR_ALREADY_LIKED"),
}

_HUMAN: dict[LikeOutcome, tuple[int, str]] = {
    LikeOutcome.SUCCESS: (status.HTTP_200_OK, "Liked!"),
    LikeOutcome.CAPTCHA_FAILED: (status.HTTP_403_FORBIDDEN, "Failed to verify captcha"),
    LikeOutcome.STRATEGY_NOT_FOUND: (status.HTTP_404_NOT_FOUND, "Strategy not found"),
    LikeOutcome.ALREADY_LIKED: (
        status.HTTP_403_FORBIDDEN,
        "You have already liked this strategy in the last 24 hours",
    ),
}


def cors_headers(allow_origin: str = "*") -> dict[str, str]:
    return {
        "Access-Control-Allow-Origin": allow_origin,
        "Access-Control-Allow-Headers": CORS_ALLOW_HEADERS,
    }


class LikeResponseFormatter:
    """Turns like outcomes and failures into plain-text responses."""

    def __init__(self, style: ResponseStyle, allow_origin: str = "*") -> None:
        self._table = _HUMAN if style is ResponseStyle.HUMAN else _MACHINE
        self._headers = cors_headers(allow_origin)

    def preflight(self) -> PlainTextResponse:
        return PlainTextResponse("ok", headers=self._headers)

    def outcome(self, outcome: LikeOutcome) -> PlainTextResponse:
        status_code, body = self._table[outcome]
        return PlainTextResponse(body, status_code=status_code, headers=self._headers)

    def error(self, exc: BaseException) -> PlainTextResponse:
        return PlainTextResponse(
            str(exc),
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            headers=self._headers,
        )
