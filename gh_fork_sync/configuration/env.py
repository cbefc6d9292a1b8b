"""Pydantic Settings model for application configuration."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Environment variable settings for the application."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Generic application-wide settings
    DEBUG: bool = False

    # GitHub settings
    GH_HOST: str = "github.com"
    GITHUB_API_URL: str = "https://api.github.com"


settings = Settings()
