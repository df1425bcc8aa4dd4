"""
PendingRequestRegistry - correlates broker decisions to waiting invocations.

The registry is the per-surface inbox for decisions: it is bounded, every
mutation happens under one lock, and close() shuts it atomically on
teardown. A decision is consumed by removing its entry before the
resumption runs, so each token resumes at most once.
"""

import threading
from typing import Callable

from privgate.domain import (
    PendingRequest,
    RegistryClosedError,
    RegistryFullError,
    ResolutionOutcome,
)
from privgate.utils.logging import get_logger

logger = get_logger(__name__)


class PendingRequestRegistry:
    def __init__(self, max_pending: int = 64, owner: str = "surface"):
        self.max_pending = max_pending
        self.owner = owner
        self._pending: dict[int, PendingRequest] = {}
        self._closed = False
        self._lock = threading.Lock()

    def register(
        self,
        token: int,
        on_granted: Callable[[], None],
        on_denied: Callable[[], None],
        on_abandoned: Callable[[], None] | None = None,
    ) -> PendingRequest:
        """
        Register a pending request under token.

        Raises:
            RegistryClosedError: The owning surface was torn down
            RegistryFullError: max_pending requests are already waiting
            ValueError: token is already pending
        """
        request = PendingRequest(
            token=token,
            on_granted=on_granted,
            on_denied=on_denied,
            on_abandoned=on_abandoned or (lambda: None),
        )
        with self._lock:
            if self._closed:
                raise RegistryClosedError(f"Registry for {self.owner} is closed")
            if token in self._pending:
                raise ValueError(f"Token {token} is already pending")
            if len(self._pending) >= self.max_pending:
                raise RegistryFullError(
                    f"{self.owner} already has {self.max_pending} pending requests"
                )
            self._pending[token] = request
        logger.debug("pending_request_registered", owner=self.owner, token=token)
        return request

    def resolve(self, token: int, granted: bool) -> ResolutionOutcome:
        """
        Consume the decision for token.

        Unknown, duplicate and post-teardown tokens are ignored and reported
        as UNKNOWN_TOKEN.
        """
        with self._lock:
            request = self._pending.pop(token, None)

        if request is None:
            logger.warning(
                "decision_for_unknown_token",
                owner=self.owner,
                token=token,
                granted=granted,
                closed=self._closed,
            )
            return ResolutionOutcome.UNKNOWN_TOKEN

        logger.debug(
            "pending_request_resolved", owner=self.owner, token=token, granted=granted
        )
        if granted:
            request.on_granted()
        else:
            request.on_denied()
        return ResolutionOutcome.RESUMED

    def discard(self, token: int) -> bool:
        """Drop a pending request without resuming it. Returns True if it was pending."""
        with self._lock:
            request = self._pending.pop(token, None)
        if request is not None:
            logger.debug("pending_request_discarded", owner=self.owner, token=token)
        return request is not None

    def close(self) -> list[PendingRequest]:
        """
        Close the registry and drop every pending request.

        Each dropped request is told it was abandoned; none is resumed.
        Later registrations raise RegistryClosedError and later decisions
        resolve to UNKNOWN_TOKEN.
        """
        with self._lock:
            self._closed = True
            dropped = list(self._pending.values())
            self._pending.clear()

        for request in dropped:
            request.on_abandoned()

        logger.debug("registry_closed", owner=self.owner, dropped=len(dropped))
        return dropped

    @property
    def closed(self) -> bool:
        return self._closed

    def pending_tokens(self) -> list[int]:
        with self._lock:
            return list(self._pending)

    def __len__(self) -> int:
        with self._lock:
            return len(self._pending)

    def __contains__(self, token: int) -> bool:
        with self._lock:
            return token in self._pending


__all__ = ["PendingRequestRegistry"]
