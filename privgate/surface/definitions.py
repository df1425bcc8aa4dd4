"""
Declarative entry definitions.

The entry list is supplied from outside: either the built-in default or a
YAML file shaped like

    entries:
      - key: prepare
        display_label: Prepare DAT directory
      - key: android_data_dir
        display_label: DAT directory
"""

from pathlib import Path

import yaml
from pydantic import ValidationError

from privgate.config import EntryDefinitionError, PrivgateSettings
from privgate.domain import EntryDefinition

PREPARE_KEY = "prepare"
SHOW_LOG_KEY = "show_log"
VERSION_KEY = "version"


def default_entry_definitions(settings: PrivgateSettings) -> list[EntryDefinition]:
    return [
        EntryDefinition(key=PREPARE_KEY, display_label="Prepare DAT directory"),
        EntryDefinition(key=settings.data_dir_key, display_label="DAT directory"),
        EntryDefinition(key=SHOW_LOG_KEY, display_label="Show log"),
        EntryDefinition(key=VERSION_KEY, display_label="Version"),
    ]


def load_entry_definitions(path: str | Path) -> list[EntryDefinition]:
    """
    Load entry definitions from a YAML file, keeping file order.

    Raises:
        EntryDefinitionError: File missing, not YAML, or wrong shape
    """
    path = Path(path)
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise EntryDefinitionError(f"Cannot read entry file {path}: {e}") from e
    except yaml.YAMLError as e:
        raise EntryDefinitionError(f"Invalid YAML in {path}: {e}") from e

    if isinstance(data, dict):
        data = data.get("entries")
    if not isinstance(data, list):
        raise EntryDefinitionError(f"{path} must contain a list of entries")

    try:
        return [EntryDefinition.model_validate(item) for item in data]
    except ValidationError as e:
        raise EntryDefinitionError(f"Invalid entry in {path}: {e}") from e


def resolve_entry_definitions(settings: PrivgateSettings) -> list[EntryDefinition]:
    if settings.entries_file:
        return load_entry_definitions(settings.entries_file)
    return default_entry_definitions(settings)


__all__ = [
    "default_entry_definitions",
    "load_entry_definitions",
    "resolve_entry_definitions",
    "PREPARE_KEY",
    "SHOW_LOG_KEY",
    "VERSION_KEY",
]
