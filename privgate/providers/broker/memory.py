"""
In-memory authorization broker.

Used for local development and tests: reachability and grant state are plain
attributes, and decisions are pushed explicitly with deliver().
"""

import threading

from privgate.providers.broker.base import AuthorizationBroker, DecisionListener
from privgate.utils.logging import get_logger

logger = get_logger(__name__)


class InMemoryBroker(AuthorizationBroker):
    """
    Scriptable broker.

    Examples:
        >>> broker = InMemoryBroker(reachable=True, granted=False)
        >>> broker.request_permission(1)
        >>> broker.deliver(1, granted=True)
    """

    def __init__(self, reachable: bool = True, granted: bool = False):
        self.reachable = reachable
        self.granted = granted
        self.requested_tokens: list[int] = []
        self._listeners: list[DecisionListener] = []
        self._lock = threading.Lock()

    def ping(self) -> bool:
        return self.reachable

    def check_self_permission(self) -> bool:
        return self.granted

    def request_permission(self, request_token: int) -> None:
        if not self.reachable:
            raise ConnectionError("authorization broker is not running")
        with self._lock:
            self.requested_tokens.append(request_token)

    def add_decision_listener(self, listener: DecisionListener) -> None:
        with self._lock:
            self._listeners.append(listener)

    def remove_decision_listener(self, listener: DecisionListener) -> None:
        with self._lock:
            if listener in self._listeners:
                self._listeners.remove(listener)

    @property
    def listener_count(self) -> int:
        with self._lock:
            return len(self._listeners)

    def deliver(self, request_token: int, granted: bool) -> None:
        """Deliver a decision to every listener, like the real broker does."""
        if granted:
            self.granted = True
        with self._lock:
            listeners = list(self._listeners)
        logger.debug(
            "broker_delivering_decision",
            token=request_token,
            granted=granted,
            listeners=len(listeners),
        )
        for listener in listeners:
            listener(request_token, granted)

    def deliver_in_thread(self, request_token: int, granted: bool) -> threading.Thread:
        """Deliver from a background thread and return the started thread."""
        thread = threading.Thread(
            target=self.deliver,
            args=(request_token, granted),
            name=f"broker-decision-{request_token}",
            daemon=True,
        )
        thread.start()
        return thread


__all__ = ["InMemoryBroker"]
