"""
==============================================================================
Configuration Package
==============================================================================

Centralized configuration management using Pydantic Settings.

Usage:
------
    from pricecheck.config import get_settings, Settings

    settings = get_settings()
    print(settings.google_sheets_tab_name)
    print(settings.sheets_cache_seconds)

==============================================================================
"""

from .settings import Settings, get_settings

__all__ = [
    "Settings",
    "get_settings",
]
