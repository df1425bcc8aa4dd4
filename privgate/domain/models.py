"""
Core domain models for privgate.

This module contains the data model shared by the gate and its collaborators:
- Enums: authorization state, gate state, error kinds, resolution outcome
- Results: ActionResult and its summary/error parts
- Entries: declarative entry definitions and bound configuration entries
- PendingRequest: an in-flight authorization request
"""

import time
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Callable

from pydantic import BaseModel, ConfigDict

if TYPE_CHECKING:
    from privgate.actions.base import ConfigurationAction


# ============================================================================
# Enums
# ============================================================================


class AuthorizationState(str, Enum):
    """Authorization state as read from the broker at gate entry"""

    UNKNOWN = "unknown"
    UNAVAILABLE = "unavailable"
    DENIED = "denied"
    GRANTED = "granted"


class GateState(str, Enum):
    """States of a single gated invocation"""

    IDLE = "idle"
    CHECKING_AUTHORIZATION = "checking_authorization"
    AWAITING_DECISION = "awaiting_decision"
    EXECUTING = "executing"
    COMPLETED = "completed"
    FAILED = "failed"
    ABANDONED = "abandoned"

    @property
    def is_terminal(self) -> bool:
        return self in (GateState.COMPLETED, GateState.FAILED, GateState.ABANDONED)


class GateErrorKind(str, Enum):
    """Failure classification for a gated invocation"""

    BROKER_UNAVAILABLE = "broker_unavailable"
    AUTHORIZATION_DENIED = "authorization_denied"
    ACTION_EXECUTION_FAILED = "action_execution_failed"
    REQUEST_LIMIT_EXCEEDED = "request_limit_exceeded"


class ResolutionOutcome(str, Enum):
    """Result of delivering a decision to the registry"""

    RESUMED = "resumed"
    UNKNOWN_TOKEN = "unknown_token"


# ============================================================================
# Results
# ============================================================================


class EffectSummary(BaseModel):
    """What a successful action did, phrased for the user"""

    model_config = ConfigDict(frozen=True)

    message: str
    value: str | None = None


class ActionError(BaseModel):
    """Classified failure of a gated invocation"""

    model_config = ConfigDict(frozen=True)

    kind: GateErrorKind
    message: str


class ActionResult(BaseModel):
    """
    Explicit success/failure value returned by ConfigurationAction.execute().

    Exactly one of summary/error is set.
    """

    model_config = ConfigDict(frozen=True)

    ok: bool
    summary: EffectSummary | None = None
    error: ActionError | None = None

    @classmethod
    def success(cls, message: str, value: str | None = None) -> "ActionResult":
        return cls(ok=True, summary=EffectSummary(message=message, value=value))

    @classmethod
    def failure(
        cls,
        message: str,
        kind: GateErrorKind = GateErrorKind.ACTION_EXECUTION_FAILED,
    ) -> "ActionResult":
        return cls(ok=False, error=ActionError(kind=kind, message=message))

    @property
    def message(self) -> str:
        if self.summary is not None:
            return self.summary.message
        if self.error is not None:
            return self.error.message
        return ""


# ============================================================================
# Entries
# ============================================================================


class EntryDefinition(BaseModel):
    """One item of the externally supplied, ordered entry list"""

    key: str
    display_label: str


NOT_SET_SUMMARY = "Not set"


@dataclass
class ConfigurationEntry:
    """
    A configuration entry bound to the hosting surface.

    The displayed summary is always derived from current_value unless the
    entry is informational and carries a fixed summary.
    """

    key: str
    display_label: str
    current_value: str | None = None
    action: "ConfigurationAction | None" = None
    enabled: bool = True
    fixed_summary: str | None = None

    @property
    def summary(self) -> str:
        if self.fixed_summary is not None:
            return self.fixed_summary
        return self.current_value if self.current_value is not None else NOT_SET_SUMMARY

    @property
    def is_actionable(self) -> bool:
        return self.action is not None and self.enabled


# ============================================================================
# Pending requests
# ============================================================================


@dataclass
class PendingRequest:
    """
    An authorization request waiting for its decision.

    Owned by PendingRequestRegistry; removed the moment a decision for its
    token is consumed or the surface is torn down.
    """

    token: int
    on_granted: Callable[[], None]
    on_denied: Callable[[], None]
    on_abandoned: Callable[[], None] = lambda: None
    created_at: float = field(default_factory=time.time)


__all__ = [
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
]
