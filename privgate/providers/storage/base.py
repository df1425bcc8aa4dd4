"""
Settings repository interface.
"""

from abc import ABC, abstractmethod
from typing import Optional


class SettingsRepository(ABC):
    """
    Key/value settings store.
    Both operations are synchronous and locally durable; there is no
    multi-key transaction.
    """

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """Get value for key, None if unset"""
        pass

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Persist value for key"""
        pass


__all__ = ["SettingsRepository"]
