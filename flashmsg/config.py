"""Application settings using Pydantic."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings."""

    app_name: str = Field(default="Flash Messages")
    env: str = Field(default="dev")
    debug: bool = Field(default=True)
    log_level: str = Field(default="INFO")
    secret_key: str = Field(default="change-me")
    session_cookie: str = Field(default="session")
    session_max_age: int = Field(default=24 * 60 * 60)
    https_only: bool = Field(default=False)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="FLASH_",
        extra="ignore",
        case_sensitive=False,
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
