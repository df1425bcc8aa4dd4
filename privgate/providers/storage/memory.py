"""In-memory settings repository."""

import threading
from typing import Optional

from privgate.providers.storage.base import SettingsRepository


class InMemorySettingsRepository(SettingsRepository):
    """Dict-backed repository, durable for the lifetime of the process."""

    def __init__(self, initial: dict[str, str] | None = None):
        self._values: dict[str, str] = dict(initial or {})
        self._lock = threading.Lock()

    def get(self, key: str) -> Optional[str]:
        with self._lock:
            return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        with self._lock:
            self._values[key] = value

    def snapshot(self) -> dict[str, str]:
        with self._lock:
            return dict(self._values)


__all__ = ["InMemorySettingsRepository"]
