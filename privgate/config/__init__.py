"""
Configuration for privgate.

Settings come from environment variables (PRIVGATE_*) or an optional .env file.
"""

from privgate.config.exceptions import ConfigError, EntryDefinitionError
from privgate.config.settings import DEFAULT_DATA_DIR, PrivgateSettings, settings

__all__ = [
    "ConfigError",
    "EntryDefinitionError",
    "PrivgateSettings",
    "settings",
    "DEFAULT_DATA_DIR",
]
