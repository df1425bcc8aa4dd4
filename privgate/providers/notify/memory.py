"""In-memory notification sink."""

import threading

from privgate.providers.notify.display import DisplayNotificationSink


class InMemoryNotificationSink(DisplayNotificationSink):
    """Records every displayed message; starts attached."""

    def __init__(self):
        self.messages: list[str] = []
        self._messages_lock = threading.Lock()
        super().__init__(display=self._record)

    def _record(self, message: str) -> None:
        with self._messages_lock:
            self.messages.append(message)

    def clear(self) -> None:
        with self._messages_lock:
            self.messages.clear()


__all__ = ["InMemoryNotificationSink"]
