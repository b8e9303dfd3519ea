"""Configuration management for tagsearch."""

from pathlib import Path
from typing import Literal, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

from .errors import ConfigurationError

DEFAULT_SEARCH_URL = "https://api.twitter.com/2/tweets/search/all"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    # Search API
    bearer_token: Optional[str] = None
    search_url: str = DEFAULT_SEARCH_URL
    max_results: int = 100
    request_timeout: float = 30.0

    # Rate limits (300 requests per 15 minute window)
    rate_limit_capacity: int = 300
    rate_limit_refill: int = 300
    rate_limit_interval_seconds: float = 15 * 60

    # Pause between pages of the same window, on top of rate limiting
    page_delay_seconds: float = 1.0

    # Output
    output_dir: Path = Path(".")

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    def validate_api_keys(self) -> None:
        """Validate that the bearer token is present and usable as a header."""
        if not self.bearer_token:
            raise ConfigurationError("BEARER_TOKEN required")
        if not self.bearer_token.isascii() or not self.bearer_token.isprintable():
            raise ConfigurationError("BEARER_TOKEN must be printable ASCII")


# Global settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get or create global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reload_settings() -> Settings:
    """Reload settings from environment (useful for testing)."""
    global _settings
    _settings = Settings()
    return _settings
