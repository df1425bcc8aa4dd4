"""
Surface factory.

Builds a SettingsSurface with its collaborators chosen from settings.
"""

from privgate.config import PrivgateSettings
from privgate.config import settings as global_settings
from privgate.providers.broker import AuthorizationBroker
from privgate.providers.notify import Display, DisplayNotificationSink
from privgate.providers.scripts import SubprocessScriptRunner
from privgate.providers.storage import (
    InMemorySettingsRepository,
    JsonFileSettingsRepository,
    SettingsRepository,
)
from privgate.runtime.permission import AuthorizationClient, Dispatcher
from privgate.surface.settings_surface import SettingsSurface
from privgate.utils.logging import get_logger

logger = get_logger(__name__)


def create_repository(settings: PrivgateSettings) -> SettingsRepository:
    if settings.settings_path:
        return JsonFileSettingsRepository(settings.settings_path)
    return InMemorySettingsRepository()


def build_surface(
    broker: AuthorizationBroker,
    display: Display | None = None,
    settings: PrivgateSettings | None = None,
    dispatcher: Dispatcher | None = None,
    client: AuthorizationClient | None = None,
) -> SettingsSurface:
    """
    Build an unattached surface.

    Pass `client` to share token allocation between several surfaces on the
    same broker.
    """
    settings = settings or global_settings
    repository = create_repository(settings)
    logger.debug(
        "building_surface",
        repository=type(repository).__name__,
        scripts_dir=settings.scripts_dir,
    )
    return SettingsSurface(
        client=client or AuthorizationClient(broker),
        repository=repository,
        notifier=DisplayNotificationSink(display),
        script_runner=SubprocessScriptRunner(
            settings.scripts_dir, timeout=settings.script_timeout_seconds
        ),
        settings=settings,
        dispatcher=dispatcher,
    )


__all__ = ["build_surface", "create_repository"]
