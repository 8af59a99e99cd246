"""Anonymous, captcha-gated likes for strategies."""

__version__ = "0.1.0"
