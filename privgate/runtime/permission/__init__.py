"""
Permission gating for privileged configuration actions.

This module provides the broker adapter, the pending-request registry that
correlates asynchronous decisions, and the gate state machine.
"""

from privgate.runtime.permission.client import AuthorizationClient, GateSubscription
from privgate.runtime.permission.dispatch import (
    Dispatcher,
    ImmediateDispatcher,
    LoopDispatcher,
)
from privgate.runtime.permission.gate import GateRun, PermissionGate
from privgate.runtime.permission.registry import PendingRequestRegistry

__all__ = [
    "AuthorizationClient",
    "GateSubscription",
    "PendingRequestRegistry",
    "PermissionGate",
    "GateRun",
    "Dispatcher",
    "ImmediateDispatcher",
    "LoopDispatcher",
]
