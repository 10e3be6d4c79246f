"""
Configuration package.

Exports the singleton settings instance for easy importing.

Usage:
    from udc.config import settings

    print(settings.user_source)
"""

from udc.config.settings import Settings, settings, get_settings

__all__ = [
    "Settings",
    "settings",
    "get_settings",
]
