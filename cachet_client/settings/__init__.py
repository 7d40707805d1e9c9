"""Client settings loading."""

from .app import CachetSettings, get_settings


__all__ = ["CachetSettings", "get_settings"]
