"""Configuration management using Pydantic Settings."""

from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class ConfigurationError(RuntimeError):
    """Raised when a required setting is missing at startup."""

    def __init__(self, missing: list[str]):
        self.missing = missing
        super().__init__(
            f"Missing required environment variables: {', '.join(missing)}. "
            "Find your API key at https://intervals.icu/settings; the athlete ID "
            "is part of your Intervals.icu profile URL."
        )


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Intervals.icu
    intervals_api_key: str = ""
    intervals_athlete_id: str = ""
    intervals_base_url: str = "https://intervals.icu"
    intervals_timeout: float = 30.0

    # Inter-service auth for the module HTTP endpoints
    service_auth_token: str = ""

    # Logging
    log_level: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    def missing_intervals_credentials(self) -> list[str]:
        """Return the names of required Intervals.icu variables that are unset."""
        missing = []
        if not self.intervals_api_key.strip():
            missing.append("INTERVALS_API_KEY")
        if not self.intervals_athlete_id.strip():
            missing.append("INTERVALS_ATHLETE_ID")
        return missing

    def require_intervals_credentials(self) -> None:
        """Raise ``ConfigurationError`` unless both credentials are set."""
        missing = self.missing_intervals_credentials()
        if missing:
            raise ConfigurationError(missing)


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance."""
    return Settings()
