"""
PermissionGate - runs configuration actions only after the broker allows it.

Each trigger creates a fresh GateRun:

    IDLE -> CHECKING_AUTHORIZATION -> EXECUTING -> COMPLETED | FAILED
                                   -> AWAITING_DECISION -> EXECUTING | FAILED | ABANDONED
                                   -> FAILED (broker unavailable, inbox full)

A run waiting for a decision holds no thread; it lives as a registry entry
until the decision or the surface teardown reaches it.
"""

import threading
import time
from uuid import uuid4

from privgate.actions import ConfigurationAction
from privgate.domain import (
    ActionResult,
    AuthorizationState,
    GateErrorKind,
    GateState,
    InvalidTransitionError,
    RegistryClosedError,
    RegistryFullError,
)
from privgate.providers.notify import NotificationSink
from privgate.runtime.permission.client import AuthorizationClient
from privgate.runtime.permission.dispatch import Dispatcher, ImmediateDispatcher
from privgate.runtime.permission.registry import PendingRequestRegistry
from privgate.utils.logging import get_logger

logger = get_logger(__name__)

BROKER_UNAVAILABLE_MESSAGE = "Authorization broker is not running"
AUTHORIZATION_DENIED_MESSAGE = "Elevated access was not granted"
REQUEST_LIMIT_MESSAGE = "Too many authorization requests are pending"

_TRANSITIONS: dict[GateState, frozenset[GateState]] = {
    GateState.IDLE: frozenset({GateState.CHECKING_AUTHORIZATION}),
    GateState.CHECKING_AUTHORIZATION: frozenset(
        {
            GateState.EXECUTING,
            GateState.AWAITING_DECISION,
            GateState.FAILED,
            GateState.ABANDONED,
        }
    ),
    GateState.AWAITING_DECISION: frozenset(
        {GateState.EXECUTING, GateState.FAILED, GateState.ABANDONED}
    ),
    GateState.EXECUTING: frozenset({GateState.COMPLETED, GateState.FAILED}),
}


class GateRun:
    """
    One gated invocation of an action.

    Transitions are serialized by a per-run lock. `history` records every
    state the run went through; `done` is set on reaching a terminal state.
    """

    def __init__(
        self,
        action: ConfigurationAction,
        client: AuthorizationClient,
        registry: PendingRequestRegistry,
        notifier: NotificationSink,
        dispatcher: Dispatcher,
    ):
        self.id = str(uuid4())
        self.action = action
        self.client = client
        self.registry = registry
        self.notifier = notifier
        self.dispatcher = dispatcher

        self.state = GateState.IDLE
        self.history: list[GateState] = [GateState.IDLE]
        self.token: int | None = None
        self.result: ActionResult | None = None
        self.started_at: float | None = None
        self.finished_at: float | None = None

        self._lock = threading.RLock()
        self._done = threading.Event()

    # --- Transitions ---

    def _transition(self, target: GateState) -> None:
        allowed = _TRANSITIONS.get(self.state, frozenset())
        if target not in allowed:
            raise InvalidTransitionError(self.state, target)
        logger.debug(
            "gate_transition",
            run_id=self.id,
            action=self.action.name,
            token=self.token,
            from_state=self.state.value,
            to_state=target.value,
        )
        self.state = target
        self.history.append(target)
        if target.is_terminal:
            self.finished_at = time.time()
            self._done.set()

    def start(self) -> "GateRun":
        """
        Enter the gate. Returns once the run is terminal or awaiting a decision.
        """
        with self._lock:
            self.started_at = time.time()
            self._transition(GateState.CHECKING_AUTHORIZATION)

            state = self.client.authorization_state()
            if state == AuthorizationState.UNAVAILABLE:
                logger.warning("broker_unavailable", action=self.action.name)
                self._fail(GateErrorKind.BROKER_UNAVAILABLE, BROKER_UNAVAILABLE_MESSAGE)
                return self

            if state == AuthorizationState.GRANTED:
                self._execute()
                return self

            self._await_decision()
            return self

    def _await_decision(self) -> None:
        token = self.client.next_request_token()
        try:
            self.registry.register(
                token,
                on_granted=lambda: self._dispatch_decision(True),
                on_denied=lambda: self._dispatch_decision(False),
                on_abandoned=self._abandon,
            )
        except RegistryClosedError:
            logger.info("gate_trigger_after_teardown", action=self.action.name)
            self._transition(GateState.ABANDONED)
            return
        except RegistryFullError as e:
            logger.warning("gate_request_limit_exceeded", action=self.action.name, error=str(e))
            self._fail(GateErrorKind.REQUEST_LIMIT_EXCEEDED, REQUEST_LIMIT_MESSAGE)
            return

        self.token = token
        self._transition(GateState.AWAITING_DECISION)

        try:
            self.client.request_authorization(token)
        except Exception as e:
            logger.warning(
                "authorization_request_failed",
                action=self.action.name,
                token=token,
                error=str(e),
            )
            if self.registry.discard(token):
                self._fail(GateErrorKind.BROKER_UNAVAILABLE, BROKER_UNAVAILABLE_MESSAGE)

    def _dispatch_decision(self, granted: bool) -> None:
        if not self.dispatcher.post(lambda: self._resume(granted)):
            # The decision was consumed but can never run here
            self._abandon()

    def _resume(self, granted: bool) -> None:
        with self._lock:
            if self.state != GateState.AWAITING_DECISION:
                logger.debug(
                    "gate_resume_ignored",
                    run_id=self.id,
                    token=self.token,
                    state=self.state.value,
                )
                return
            if self.registry.closed:
                # Decision was consumed, but the surface went away before it ran
                self._transition(GateState.ABANDONED)
                return
            if granted:
                logger.info("authorization_granted", action=self.action.name, token=self.token)
                self._execute()
            else:
                logger.warning("authorization_denied", action=self.action.name, token=self.token)
                self._fail(GateErrorKind.AUTHORIZATION_DENIED, AUTHORIZATION_DENIED_MESSAGE)

    def _abandon(self) -> None:
        with self._lock:
            if self.state == GateState.AWAITING_DECISION:
                logger.info("gate_abandoned", action=self.action.name, token=self.token)
                self._transition(GateState.ABANDONED)

    def _execute(self) -> None:
        self._transition(GateState.EXECUTING)
        result = self.action.execute()
        self.result = result
        if result.ok:
            self._transition(GateState.COMPLETED)
        else:
            self._transition(GateState.FAILED)
        self.notifier.notify(result.message)

    def _fail(self, kind: GateErrorKind, message: str) -> None:
        self.result = ActionResult.failure(message, kind=kind)
        self._transition(GateState.FAILED)
        self.notifier.notify(message)

    # --- Inspection ---

    @property
    def done(self) -> bool:
        return self._done.is_set()

    @property
    def error_kind(self) -> GateErrorKind | None:
        if self.result is None or self.result.error is None:
            return None
        return self.result.error.kind

    def wait(self, timeout: float | None = None) -> bool:
        """Block until terminal. Meant for tests and scripts, not UI threads."""
        return self._done.wait(timeout)

    def __repr__(self) -> str:
        return (
            f"GateRun(action={self.action.name!r}, state={self.state.value}, "
            f"token={self.token})"
        )


class PermissionGate:
    """
    Entry point for triggering actions.

    Holds no per-invocation state: every trigger builds its own GateRun, so
    several runs may await decisions at once under distinct tokens.
    """

    def __init__(
        self,
        client: AuthorizationClient,
        registry: PendingRequestRegistry,
        notifier: NotificationSink,
        dispatcher: Dispatcher | None = None,
    ):
        self.client = client
        self.registry = registry
        self.notifier = notifier
        self.dispatcher = dispatcher or ImmediateDispatcher()

    def trigger(self, action: ConfigurationAction) -> GateRun:
        run = GateRun(
            action=action,
            client=self.client,
            registry=self.registry,
            notifier=self.notifier,
            dispatcher=self.dispatcher,
        )
        return run.start()


__all__ = [
    "PermissionGate",
    "GateRun",
    "BROKER_UNAVAILABLE_MESSAGE",
    "AUTHORIZATION_DENIED_MESSAGE",
    "REQUEST_LIMIT_MESSAGE",
]
