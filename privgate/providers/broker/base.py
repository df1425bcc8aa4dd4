"""
Authorization broker interface.

The broker is the out-of-process authority that grants or denies elevated
access. It is trusted as a black box; this interface only mirrors the calls
the gate needs.
"""

from abc import ABC, abstractmethod
from typing import Callable

DecisionListener = Callable[[int, bool], None]


class AuthorizationBroker(ABC):
    """
    Broker boundary.

    Decisions are delivered to listeners as (request_token, granted) on a
    thread chosen by the broker. Delivery may be duplicated.
    """

    @abstractmethod
    def ping(self) -> bool:
        """Return True when the broker process is reachable."""
        pass

    @abstractmethod
    def check_self_permission(self) -> bool:
        """Return True when elevated access is already granted."""
        pass

    @abstractmethod
    def request_permission(self, request_token: int) -> None:
        """Ask for elevated access; the decision arrives later via listeners."""
        pass

    @abstractmethod
    def add_decision_listener(self, listener: DecisionListener) -> None:
        pass

    @abstractmethod
    def remove_decision_listener(self, listener: DecisionListener) -> None:
        pass


__all__ = ["AuthorizationBroker", "DecisionListener"]
