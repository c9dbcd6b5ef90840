"""Application settings using Pydantic Settings."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from modsource import __version__


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="MODSOURCE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Logging
    log_level: str = "INFO"
    json_logs: bool = False

    # Discovery
    discovery_timeout: float = Field(default=60.0, gt=0)  # seconds, whole lookup
    http_timeout: float = Field(default=30.0, gt=0)  # seconds, single request
    follow_redirects: bool = True
    user_agent: str = f"modsource/{__version__}"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
