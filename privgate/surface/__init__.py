"""
Hosting surface for permission-gated configuration entries.
"""

from privgate.surface.definitions import (
    default_entry_definitions,
    load_entry_definitions,
    resolve_entry_definitions,
)
from privgate.surface.factory import build_surface, create_repository
from privgate.surface.settings_surface import SettingsSurface

__all__ = [
    "SettingsSurface",
    "build_surface",
    "create_repository",
    "default_entry_definitions",
    "load_entry_definitions",
    "resolve_entry_definitions",
]
