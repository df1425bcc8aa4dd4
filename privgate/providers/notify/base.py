"""
Notification sink interface.

Transient, fire-and-forget user messages (the toast/snackbar of a host UI).
"""

from abc import ABC, abstractmethod

from privgate.utils.logging import get_logger

logger = get_logger(__name__)


class NotificationSink(ABC):
    """
    Best-effort message surface.

    notify() never raises: messages are dropped when no display is attached
    and display failures are logged.
    """

    def notify(self, message: str) -> None:
        try:
            shown = self._show(message)
        except Exception as e:
            logger.warning("notification_display_failed", error=str(e), exc_info=True)
            return
        if not shown:
            logger.warning("notification_dropped", reason="no_display_attached")

    @abstractmethod
    def _show(self, message: str) -> bool:
        """Display the message; return False if nothing could display it."""
        pass


__all__ = ["NotificationSink"]
