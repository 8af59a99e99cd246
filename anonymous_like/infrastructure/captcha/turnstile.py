import httpx
import structlog

from ...application.ports.outbound import CaptchaVerifier

logger = structlog.get_logger()


class TurnstileVerifier(CaptchaVerifier):
    """Cloudflare Turnstile siteverify client.

    Transport failures and unreadable replies are not retried; they propagate
    to the caller like any other downstream error.
    """

    VERIFY_URL = "https://challenges.cloudflare.com/turnstile/v0/siteverify"

    def __init__(self, secret: str, verify_url: str = VERIFY_URL) -> None:
        self._secret = secret
        self._verify_url = verify_url

    async def verify(self, token: str, remote_ip: str) -> bool:
        form = {
            "secret": self._secret,
            "response": token,
            "remoteip": remote_ip,
        }

        async with httpx.AsyncClient() as client:
            response = await client.post(self._verify_url, data=form)
            outcome = response.json()

        if outcome.get("success"):
            return True

        logger.warning(
            "Captcha verification failed",
            status_code=response.status_code,
            error_codes=outcome.get("error-codes", []),
            remote_ip=remote_ip,
        )
        return False
