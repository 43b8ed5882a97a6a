"""Configuration package."""

from easymatch.config.settings import (
    LogProfile,
    MatchSettings,
    get_settings,
    load_settings,
)

__all__ = [
    "LogProfile",
    "MatchSettings",
    "get_settings",
    "load_settings",
]
