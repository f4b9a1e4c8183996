"""Application settings loaded from environment, .env and config.toml."""

from affiliateos.settings.settings import Settings, get_settings, reload_settings

__all__ = [
    "Settings",
    "get_settings",
    "reload_settings",
]
