"""Configuration loading for docaudit.

Configuration is read from TOML files with environment variable overrides.

Usage:
    from docaudit.config import get_settings

    settings = get_settings()
    suffix = settings.audit.log_collection_suffix
"""

from functools import lru_cache

from docaudit.config.loader import load_config
from docaudit.config.settings import Settings, set_toml_config


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get the process-wide settings instance.

    Call `get_settings.cache_clear()` (or `reload_settings()`) to pick up
    changed files or environment variables.
    """
    set_toml_config(load_config())
    return Settings()


def reload_settings() -> Settings:
    """Clear the settings cache and reload configuration."""
    get_settings.cache_clear()
    return get_settings()


__all__ = ["get_settings", "reload_settings", "Settings"]
