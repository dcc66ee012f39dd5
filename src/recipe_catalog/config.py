"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    recipes_path: str = "recipes.json"
    youtube_api_key: str | None = None
    youtube_search_url: str = "https://www.googleapis.com/youtube/v3"
    placeholder_image_url: str = "https://via.placeholder.com/150"
    placeholder_seed: int | None = None
    search_history_limit: int = 5
    match_result_limit: int = 5
    cors_allowed_origins: str = "*"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def parse_allowed_origins(raw: str | None) -> list[str]:
    """Parse allowed CORS origins from env."""
    if raw is None:
        return []
    cleaned = raw.strip()
    if cleaned == "*":
        return ["*"]
    origins: list[str] = []
    for chunk in cleaned.split(","):
        value = chunk.strip()
        if not value:
            continue
        origins.append(value)
    return origins
