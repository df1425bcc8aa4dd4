"""
Dispatchers move a resumption onto the hosting surface's execution context.

Broker decisions arrive on a thread the broker picks. A surface running an
asyncio loop uses LoopDispatcher so every gate transition happens on the loop.
"""

import asyncio
from abc import ABC, abstractmethod
from typing import Callable

from privgate.utils.logging import get_logger

logger = get_logger(__name__)


class Dispatcher(ABC):
    @abstractmethod
    def post(self, fn: Callable[[], None]) -> bool:
        """Schedule fn. Returns False if it was dropped and will never run."""
        pass


class ImmediateDispatcher(Dispatcher):
    """Run inline on the delivering thread."""

    def post(self, fn: Callable[[], None]) -> bool:
        fn()
        return True


class LoopDispatcher(Dispatcher):
    """Schedule onto an asyncio event loop; safe to call from any thread."""

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None):
        self.loop = loop or asyncio.get_running_loop()

    def post(self, fn: Callable[[], None]) -> bool:
        try:
            self.loop.call_soon_threadsafe(fn)
        except RuntimeError as e:
            # Loop already closed: the surface is gone
            logger.warning("dispatch_dropped", reason=str(e))
            return False
        return True


__all__ = ["Dispatcher", "ImmediateDispatcher", "LoopDispatcher"]
