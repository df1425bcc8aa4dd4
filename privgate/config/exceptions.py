"""Configuration system exceptions."""


class ConfigError(Exception):
    """Base exception for configuration errors."""

    pass


class EntryDefinitionError(ConfigError):
    """Entry definition file is missing or malformed."""

    pass
