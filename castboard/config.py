"""Castboard — Configuration via pydantic-settings."""

from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    # Database
    DATABASE_URL: str = "sqlite:///./castboard.db"

    # Security
    SECRET_KEY: str = "change-me"
    JWT_ALGORITHM: str = "HS256"
    JWT_EXPIRATION_MINUTES: int = 60

    # Bootstrap admin (created on startup if missing)
    ADMIN_NAME: str = "Admin"
    ADMIN_EMAIL: str = "admin@castboard.local"
    ADMIN_PASSWORD: str = "admin123"

    # Media limits, enforced by the request schemas
    MAX_PHOTOS: int = 5
    MAX_VIDEOS: int = 3
    MAX_TICKET_IMAGES: int = 5
    MAX_MEDIA_REF_LENGTH: int = 20_000_000

    # HTTP
    CORS_ORIGINS: list[str] = ["http://localhost:3000"]

    # Environment
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


@lru_cache
def get_settings() -> Settings:
    return Settings()
