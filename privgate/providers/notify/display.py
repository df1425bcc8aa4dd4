"""Notification sink forwarding to a display callback owned by the host UI."""

import threading
from typing import Any, Callable

from privgate.providers.notify.base import NotificationSink

Display = Callable[[str], None]


class DisplayNotificationSink(NotificationSink):
    """
    Forwards messages to the most recently attached display.

    Surfaces attach a display under their own owner key when they become
    active and detach only that key on teardown, so one sink can be shared
    by several surfaces. Messages sent while nothing is attached are dropped.
    The display given to the constructor is attached anonymously and is the
    default re-attached by a surface that brings none of its own; an owned
    attachment replaces the anonymous one.
    """

    def __init__(self, display: Display | None = None):
        self.default_display = display
        self._displays: list[tuple[Any, Display]] = []
        self._lock = threading.Lock()
        if display is not None:
            self._displays.append((None, display))

    def attach_display(self, display: Display, owner: Any = None) -> None:
        """
        Attach a display.

        Without an owner the display replaces every attachment.
        """
        with self._lock:
            if owner is None:
                self._displays = []
            else:
                self._displays = [
                    (o, d) for o, d in self._displays if o is not None and o is not owner
                ]
            self._displays.append((owner, display))

    def detach_display(self, owner: Any = None) -> None:
        """Detach owner's display, or every display when owner is None."""
        with self._lock:
            if owner is None:
                self._displays = []
            else:
                self._displays = [(o, d) for o, d in self._displays if o is not owner]

    @property
    def attached(self) -> bool:
        with self._lock:
            return bool(self._displays)

    def _show(self, message: str) -> bool:
        with self._lock:
            display = self._displays[-1][1] if self._displays else None
        if display is None:
            return False
        display(message)
        return True


__all__ = ["DisplayNotificationSink", "Display"]
