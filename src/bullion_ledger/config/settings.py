"""Application settings and configuration."""

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="BULLION_",
    )

    app_name: str = "Bullion Ledger"
    app_version: str = "0.1.0"
    log_level: str = "INFO"
    log_cache_activity: bool = False

    # Ledger store (REST collaborator)
    api_base_url: str = "http://localhost:8080"
    request_timeout_seconds: float = 10.0
    use_stub_store: bool = False

    # Ledger read cache; 0 re-fetches on every read
    ledger_cache_ttl_seconds: float = 0

    def get_api_base_url(self) -> str:
        """Get the store base URL without a trailing slash."""
        return self.api_base_url.rstrip("/")


# Global settings instance (can be replaced at runtime)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Return the current settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def set_settings(settings: Settings) -> None:
    """Set the global settings instance."""
    global _settings
    _settings = settings


def reset_settings() -> None:
    """Reset settings to force reload."""
    global _settings
    _settings = None
