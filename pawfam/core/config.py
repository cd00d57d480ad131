# pawfam/core/config.py
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Centralized application settings loaded from environment.

    Required env vars (.env):
      - JWT_SECRET (signing key for session tokens)

    Optional:
      - DATABASE_URL (defaults to a local SQLite file)
      - SMTP_* (mail relay used for password recovery emails)
      - VENDOR_LISTINGS_URL (remote vendor adoption feed)
    """

    PROJECT_NAME: str = "PawFam API"
    API_PREFIX: str = "/api"
    LOG_LEVEL: str = "INFO"

    DATABASE_URL: str = "sqlite:///./pawfam.db"

    # Session tokens
    JWT_SECRET: str
    JWT_ALG: str = "HS256"
    ACCESS_TOKEN_EXPIRE_DAYS: int = 7

    # Password recovery
    OTP_EXPIRE_MINUTES: int = 10

    # Mail relay
    SMTP_HOST: str | None = None
    SMTP_PORT: int = 587
    SMTP_USERNAME: str | None = None
    SMTP_PASSWORD: str | None = None
    SMTP_FROM_EMAIL: str | None = None
    SMTP_FROM_NAME: str = "PawFam"
    SMTP_USE_TLS: bool = True
    SMTP_USE_SSL: bool = False
    SMTP_TIMEOUT: float = 30.0

    # Remote vendor adoption feed
    VENDOR_LISTINGS_URL: str | None = None
    VENDOR_LISTINGS_TIMEOUT: float = 5.0

    CORS_ORIGINS: list[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
        "http://localhost:5173",
    ]

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


@lru_cache
def get_settings() -> Settings:
    """
    Cached settings loader.
    Ensures we don't re-parse .env on every import / request.
    """
    return Settings()
