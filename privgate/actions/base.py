"""
ConfigurationAction - a named unit of privileged work.

execute() is the error boundary: whatever the body raises comes back as a
failed ActionResult, so the gate always reaches a terminal state.
"""

import threading
from abc import ABC, abstractmethod

from privgate.domain import ActionResult
from privgate.utils.logging import get_logger

logger = get_logger(__name__)


class ConfigurationAction(ABC):
    """
    Base class for gated actions.

    Subclasses implement perform(). An invocation that overlaps a running
    one is refused instead of applying the effect twice.
    """

    def __init__(self, name: str):
        self.name = name
        self._running = False
        self._lock = threading.Lock()

    def execute(self) -> ActionResult:
        with self._lock:
            if self._running:
                logger.warning("action_already_running", action=self.name)
                return ActionResult.failure(f"{self.name} is already running")
            self._running = True

        try:
            result = self.perform()
        except Exception as e:
            logger.error(
                "action_execution_failed",
                action=self.name,
                error=str(e),
                error_type=type(e).__name__,
                exc_info=True,
            )
            return ActionResult.failure(self.failure_message(e))
        finally:
            with self._lock:
                self._running = False

        logger.info("action_executed", action=self.name, ok=result.ok)
        return result

    @abstractmethod
    def perform(self) -> ActionResult:
        """Run the privileged body. May raise."""
        pass

    def failure_message(self, error: Exception) -> str:
        return f"{self.name} failed: {error}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"


__all__ = ["ConfigurationAction"]
