from abc import ABC, abstractmethod


class CaptchaVerifier(ABC):
    """Outbound port for remote captcha attestation."""

    @abstractmethod
    async def verify(self, token: str, remote_ip: str) -> bool:
        """
        Check a client-supplied captcha token.

        Args:
            token: Response token produced by the captcha widget
            remote_ip: Address of the client that solved the challenge

        Returns:
            True when the remote service accepted the token
        """
        ...
