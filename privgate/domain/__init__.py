"""
Domain module - Pure domain models with no runtime dependencies.
"""

from .exceptions import (
    InvalidTransitionError,
    PrivgateError,
    RegistryClosedError,
    RegistryFullError,
    ScriptExecutionError,
    SubscriptionError,
    UnknownEntryError,
)
from .models import (
    NOT_SET_SUMMARY,
    ActionError,
    ActionResult,
    AuthorizationState,
    ConfigurationEntry,
    EffectSummary,
    EntryDefinition,
    GateErrorKind,
    GateState,
    PendingRequest,
    ResolutionOutcome,
)

__all__ = [
    # Models
    "AuthorizationState",
    "GateState",
    "GateErrorKind",
    "ResolutionOutcome",
    "EffectSummary",
    "ActionError",
    "ActionResult",
    "EntryDefinition",
    "ConfigurationEntry",
    "PendingRequest",
    "NOT_SET_SUMMARY",
    # Exceptions
    "PrivgateError",
    "RegistryClosedError",
    "RegistryFullError",
    "SubscriptionError",
    "InvalidTransitionError",
    "ScriptExecutionError",
    "UnknownEntryError",
]
