from privgate.providers.notify.base import NotificationSink
from privgate.providers.notify.display import Display, DisplayNotificationSink
from privgate.providers.notify.memory import InMemoryNotificationSink

__all__ = [
    "NotificationSink",
    "Display",
    "DisplayNotificationSink",
    "InMemoryNotificationSink",
]
