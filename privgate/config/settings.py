"""
Global settings from environment variables.
"""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from privgate.version import __version__

DEFAULT_DATA_DIR = (
    "/storage/emulated/0/Android/data/jp.co.airfront.android.a2chMate/files/2chMate/DAT"
)


class PrivgateSettings(BaseSettings):
    """
    Global configuration loaded from environment variables.

    Environment variables should be prefixed with PRIVGATE_
    Example: PRIVGATE_DEBUG=true, PRIVGATE_SETTINGS_PATH=~/.privgate/settings.json
    """

    model_config = SettingsConfigDict(
        env_prefix="PRIVGATE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Core settings
    debug: bool = False
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    log_format: Literal["console", "json"] = "console"
    log_file: str | None = None

    # Storage settings
    settings_path: str | None = None  # None = in-memory repository

    # Fixed data directory entry
    data_dir_key: str = "android_data_dir"
    data_dir_value: str = DEFAULT_DATA_DIR

    # Declarative entries (YAML), None = built-in list
    entries_file: str | None = None

    # Gate
    max_pending_requests: int = Field(default=64, ge=1)

    # Scripts
    scripts_dir: str = "scripts"
    script_timeout_seconds: float = Field(default=60.0, gt=0)

    # About
    app_name: str = "privgate"
    app_version: str = __version__

    @property
    def effective_log_level(self) -> str:
        return "DEBUG" if self.debug else self.log_level


# Global settings instance (singleton)
settings = PrivgateSettings()


__all__ = ["PrivgateSettings", "settings", "DEFAULT_DATA_DIR"]
