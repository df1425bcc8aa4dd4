from privgate.providers.storage.base import SettingsRepository
from privgate.providers.storage.json_file import JsonFileSettingsRepository
from privgate.providers.storage.memory import InMemorySettingsRepository

__all__ = [
    "SettingsRepository",
    "InMemorySettingsRepository",
    "JsonFileSettingsRepository",
]
