"""
Configuration package.

Usage:
    from custdb.config import get_settings

    settings = get_settings()
    print(settings.database_url)
"""

from custdb.config.settings import Settings, get_settings

__all__ = [
    "Settings",
    "get_settings",
]
