"""
AuthorizationClient - thin adapter over the authorization broker.

Probing never raises: an unreachable or misbehaving broker reads as
"unreachable" / "unknown". Issuing a request does raise, so the gate can
fail the invocation.
"""

import itertools
import threading
from typing import Callable

from privgate.domain import AuthorizationState, SubscriptionError
from privgate.providers.broker import AuthorizationBroker
from privgate.utils.logging import get_logger

logger = get_logger(__name__)

DecisionCallback = Callable[[int, bool], None]

FIRST_REQUEST_TOKEN = 100


class GateSubscription:
    """
    Handle for one live listener on broker decisions.

    Returned by AuthorizationClient.subscribe() and consumed by close().
    After close() the wrapped callback receives nothing, even from a broker
    that is still iterating over an old listener snapshot.
    """

    def __init__(self, broker: AuthorizationBroker, callback: DecisionCallback, owner: str):
        self.owner = owner
        self._broker = broker
        self._callback = callback
        self._active = True
        self._lock = threading.Lock()
        broker.add_decision_listener(self._on_decision)

    def _on_decision(self, request_token: int, granted: bool) -> None:
        with self._lock:
            active = self._active
        if not active:
            logger.debug(
                "decision_after_unsubscribe",
                owner=self.owner,
                token=request_token,
            )
            return
        self._callback(request_token, granted)

    @property
    def active(self) -> bool:
        return self._active

    def close(self) -> None:
        """Detach from the broker. Closing twice raises SubscriptionError."""
        with self._lock:
            if not self._active:
                raise SubscriptionError(f"Subscription for {self.owner} is already closed")
            self._active = False
        self._broker.remove_decision_listener(self._on_decision)
        logger.debug("subscription_closed", owner=self.owner)

    def __repr__(self) -> str:
        return f"GateSubscription(owner={self.owner!r}, active={self._active})"


class AuthorizationClient:
    """
    Adapter exposing the broker calls the gate needs.

    One client is shared by every surface talking to the same broker, so
    request tokens it hands out are unique across surfaces.
    """

    def __init__(self, broker: AuthorizationBroker, first_token: int = FIRST_REQUEST_TOKEN):
        self.broker = broker
        self._tokens = itertools.count(first_token)
        self._token_lock = threading.Lock()

    def is_broker_reachable(self) -> bool:
        try:
            return bool(self.broker.ping())
        except Exception as e:
            logger.warning("broker_ping_failed", error=str(e))
            return False

    def current_authorization_state(self) -> AuthorizationState:
        """
        Read the grant state from the broker. Never cached.

        Returns GRANTED or DENIED, or UNKNOWN if the broker could not answer.
        """
        try:
            granted = self.broker.check_self_permission()
        except Exception as e:
            logger.warning("broker_permission_check_failed", error=str(e))
            return AuthorizationState.UNKNOWN
        return AuthorizationState.GRANTED if granted else AuthorizationState.DENIED

    def authorization_state(self) -> AuthorizationState:
        """
        Ping the broker, then read the grant state.

        An unreachable broker is UNAVAILABLE and is never asked for permission.
        """
        if not self.is_broker_reachable():
            return AuthorizationState.UNAVAILABLE
        return self.current_authorization_state()

    def next_request_token(self) -> int:
        with self._token_lock:
            return next(self._tokens)

    def request_authorization(self, request_token: int) -> None:
        """Fire-and-forget; the decision arrives through a subscription."""
        logger.info("authorization_requested", token=request_token)
        self.broker.request_permission(request_token)

    def subscribe(self, callback: DecisionCallback, owner: str = "surface") -> GateSubscription:
        subscription = GateSubscription(self.broker, callback, owner)
        logger.debug("subscription_opened", owner=owner)
        return subscription


__all__ = ["AuthorizationClient", "GateSubscription", "DecisionCallback"]
