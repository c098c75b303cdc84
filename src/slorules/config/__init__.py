"""
slorules configuration.

Pydantic-based settings loaded from SLORULES_ environment variables
and .env files.
"""

from slorules.config.settings import DEFAULT_CONFIG_FILE, Settings, get_settings

__all__ = [
    "DEFAULT_CONFIG_FILE",
    "Settings",
    "get_settings",
]
