"""
privgate - permission-gated configuration actions

Top-level exports for easy access to core functionality.
"""

from privgate.actions import ConfigurationAction, FixedValueAction, ScriptAction
from privgate.config import PrivgateSettings, settings
from privgate.domain import (
    ActionResult,
    AuthorizationState,
    ConfigurationEntry,
    GateErrorKind,
    GateState,
    ResolutionOutcome,
)
from privgate.providers.broker import AuthorizationBroker, InMemoryBroker
from privgate.providers.notify import (
    DisplayNotificationSink,
    InMemoryNotificationSink,
    NotificationSink,
)
from privgate.providers.storage import (
    InMemorySettingsRepository,
    JsonFileSettingsRepository,
    SettingsRepository,
)
from privgate.runtime.permission import (
    AuthorizationClient,
    GateRun,
    PendingRequestRegistry,
    PermissionGate,
)
from privgate.surface import SettingsSurface, build_surface

from privgate.version import __version__

__all__ = [
    # Gate
    "AuthorizationClient",
    "PendingRequestRegistry",
    "PermissionGate",
    "GateRun",
    # Actions
    "ConfigurationAction",
    "FixedValueAction",
    "ScriptAction",
    # Domain
    "ActionResult",
    "AuthorizationState",
    "ConfigurationEntry",
    "GateErrorKind",
    "GateState",
    "ResolutionOutcome",
    # Providers
    "AuthorizationBroker",
    "InMemoryBroker",
    "NotificationSink",
    "DisplayNotificationSink",
    "InMemoryNotificationSink",
    "SettingsRepository",
    "InMemorySettingsRepository",
    "JsonFileSettingsRepository",
    # Surface
    "SettingsSurface",
    "build_surface",
    # Config
    "PrivgateSettings",
    "settings",
]
