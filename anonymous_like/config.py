from enum import Enum

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import make_url


class ResponseStyle(str, Enum):
    """How like outcomes are encoded on the wire."""

    MACHINE = "machine"  # outcome code in a 200 body
    HUMAN = "human"  # readable message with a matching HTTP status


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        populate_by_name=True,
        extra="ignore",
    )

    # Service
    service_name: str = "anonymous-like"
    debug: bool = False

    # Database (required, the service refuses to start without it)
    database_url: str = Field(validation_alias="SUPABASE_DB_URL")
    db_pool_size: int = 3
    db_pool_timeout: float | None = None  # wait for a free connection indefinitely

    # Captcha
    captcha_secret: str = Field(default="", validation_alias="CLOUDFLARE_SECRET_KEY")
    captcha_verify_url: str = "https://challenges.cloudflare.com/turnstile/v0/siteverify"

    # HTTP
    response_style: ResponseStyle = Field(
        default=ResponseStyle.MACHINE, validation_alias="LIKE_RESPONSE_STYLE"
    )
    cors_allow_origin: str = "*"

    @property
    def async_database_url(self) -> str:
        return to_async_url(self.database_url)


def to_async_url(url: str) -> str:
    """Point a libpq style connection string at the asyncpg driver."""
    if url.startswith("postgres://"):
        url = "postgresql://" + url[len("postgres://"):]
    parsed = make_url(url)
    if parsed.drivername in ("postgresql", "postgresql+psycopg2", "postgresql+psycopg"):
        parsed = parsed.set(drivername="postgresql+asyncpg")
    return parsed.render_as_string(hide_password=False)


settings = Settings()
