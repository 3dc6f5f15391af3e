"""Configuration module for medication request processing."""

from typing import Optional

from .settings import Settings

_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the shared settings instance, creating it on first use."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


__all__ = ["get_settings", "Settings"]
