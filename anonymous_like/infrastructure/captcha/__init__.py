from .turnstile import TurnstileVerifier

__all__ = ["TurnstileVerifier"]
