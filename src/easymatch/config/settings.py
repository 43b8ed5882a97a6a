"""Library settings."""

from __future__ import annotations

from functools import lru_cache
from typing import Any, Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

LogProfile = Literal["default", "console"]


class MatchSettings(BaseSettings):
    """Settings for logging and handler shape detection."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="EASYMATCH_",
        case_sensitive=False,
        extra="ignore",
    )

    log_filter: str = Field(default="info")
    log_profile: LogProfile = Field(default="default")
    strict_handlers: bool = Field(default=False)

    def parse_log_filter(self) -> tuple[str, dict[str | None, str | int | bool]]:
        """Split `log_filter` into a global level and per-module levels.

        Format: "level" or "level,module1=level,module2=false"
        Examples:
            - "info" - global INFO level
            - "info,easymatch.dispatch=trace" - dispatch traced, everything else INFO
            - "debug,easymatch.arm=false" - global DEBUG, easymatch.arm disabled

        Returns:
            (global_level, module_filter_dict)
        """
        parts = [p.strip() for p in self.log_filter.lower().split(",") if p.strip()]

        filter_dict: dict[str | None, str | int | bool] = {}
        global_level = "info"

        for part in parts:
            if "=" in part:
                module, level = part.split("=", 1)
                module = module.strip()
                level = level.strip()
                if level == "false":
                    filter_dict[module] = False
                else:
                    filter_dict[module] = level.upper()
            else:
                global_level = part

        return global_level, filter_dict


def load_settings(**overrides: Any) -> MatchSettings:
    """Load settings from the environment with optional field overrides."""
    return MatchSettings(**overrides)


@lru_cache(maxsize=1)
def get_settings() -> MatchSettings:
    """Process-wide settings, read once."""
    return MatchSettings()
