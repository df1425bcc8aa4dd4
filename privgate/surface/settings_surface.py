"""
SettingsSurface - the hosting surface for configuration entries.

The surface owns the broker subscription and the pending-request registry
for as long as it is attached. Detaching abandons whatever is still waiting
for a decision; nothing reaches the surface afterwards.
"""

from privgate.actions import FixedValueAction, ScriptAction
from privgate.config import PrivgateSettings
from privgate.config import settings as global_settings
from privgate.domain import (
    ConfigurationEntry,
    EntryDefinition,
    SubscriptionError,
    UnknownEntryError,
)
from privgate.providers.notify import Display, DisplayNotificationSink, NotificationSink
from privgate.providers.scripts import ScriptRunner
from privgate.providers.storage import SettingsRepository
from privgate.runtime.permission import (
    AuthorizationClient,
    Dispatcher,
    GateRun,
    GateSubscription,
    PendingRequestRegistry,
    PermissionGate,
)
from privgate.surface.definitions import (
    PREPARE_KEY,
    SHOW_LOG_KEY,
    VERSION_KEY,
    resolve_entry_definitions,
)
from privgate.utils.logging import get_logger

logger = get_logger(__name__)

PREPARE_CREATE_FAILED_MESSAGE = "Could not set up the prepare script"
PREPARE_SUCCESS_MESSAGE = "DAT directory prepared"
PREPARE_FAILED_MESSAGE = "Failed to prepare the DAT directory"
CONSOLE_LOG_SUMMARY = "Logging to console"


class SettingsSurface:
    """
    Configuration screen bound to a broker, a settings repository and a
    notification sink.

    Examples:
        >>> surface = SettingsSurface(client, repository, notifier)
        >>> with surface:
        ...     run = surface.click("android_data_dir")
    """

    def __init__(
        self,
        client: AuthorizationClient,
        repository: SettingsRepository,
        notifier: NotificationSink,
        script_runner: ScriptRunner | None = None,
        definitions: list[EntryDefinition] | None = None,
        settings: PrivgateSettings | None = None,
        display: Display | None = None,
        dispatcher: Dispatcher | None = None,
        name: str = "settings",
    ):
        self.client = client
        self.repository = repository
        self.notifier = notifier
        self.script_runner = script_runner
        self.settings = settings or global_settings
        self.definitions = (
            definitions if definitions is not None else resolve_entry_definitions(self.settings)
        )
        self.display = display
        self.dispatcher = dispatcher
        self.name = name

        self.registry: PendingRequestRegistry | None = None
        self.gate: PermissionGate | None = None
        self._subscription: GateSubscription | None = None
        self._entries: dict[str, ConfigurationEntry] = {}

    # --- Lifecycle ---

    @property
    def attached(self) -> bool:
        return self._subscription is not None

    def attach(self) -> "SettingsSurface":
        """
        Activate the surface.

        The broker subscription is opened last; if anything before it fails,
        the surface is left detached and attach() can be retried.
        """
        if self._subscription is not None:
            raise SubscriptionError(f"{self.name} already has a live subscription")

        registry = PendingRequestRegistry(
            max_pending=self.settings.max_pending_requests,
            owner=self.name,
        )
        self.registry = registry
        self.gate = PermissionGate(
            client=self.client,
            registry=registry,
            notifier=self.notifier,
            dispatcher=self.dispatcher,
        )
        try:
            self._attach_display()
            self._bind_entries()
            self._subscription = self.client.subscribe(
                lambda token, granted: registry.resolve(token, granted),
                owner=self.name,
            )
        except Exception as e:
            logger.error(
                "surface_attach_failed",
                surface=self.name,
                error=str(e),
                exc_info=True,
            )
            registry.close()
            self._detach_display()
            self.registry = None
            self.gate = None
            self._entries = {}
            raise
        logger.info("surface_attached", surface=self.name, entries=len(self._entries))
        return self

    def detach(self) -> None:
        if self._subscription is None:
            return
        dropped = self.registry.close() if self.registry is not None else []
        self._subscription.close()
        self._subscription = None
        self._detach_display()
        logger.info("surface_detached", surface=self.name, abandoned=len(dropped))

    def __enter__(self) -> "SettingsSurface":
        return self.attach()

    def __exit__(self, exc_type, exc, tb) -> None:
        self.detach()

    def _attach_display(self) -> None:
        if not isinstance(self.notifier, DisplayNotificationSink):
            return
        display = self.display or self.notifier.default_display
        if display is not None:
            self.notifier.attach_display(display, owner=self)

    def _detach_display(self) -> None:
        if isinstance(self.notifier, DisplayNotificationSink):
            self.notifier.detach_display(owner=self)

    # --- Entries ---

    @property
    def entries(self) -> list[ConfigurationEntry]:
        return list(self._entries.values())

    def entry(self, key: str) -> ConfigurationEntry:
        try:
            return self._entries[key]
        except KeyError:
            raise UnknownEntryError(f"No entry with key {key!r}") from None

    def _bind_entries(self) -> None:
        self._entries = {}
        for definition in self.definitions:
            entry = ConfigurationEntry(
                key=definition.key,
                display_label=definition.display_label,
                current_value=self.repository.get(definition.key),
            )
            if definition.key == self.settings.data_dir_key:
                entry.action = FixedValueAction(
                    key=definition.key,
                    value=self.settings.data_dir_value,
                    repository=self.repository,
                    entry=entry,
                )
            elif definition.key == PREPARE_KEY:
                self._bind_prepare(entry)
            elif definition.key == VERSION_KEY:
                entry.fixed_summary = f"{self.settings.app_name} {self.settings.app_version}"
            elif definition.key == SHOW_LOG_KEY:
                entry.fixed_summary = self.settings.log_file or CONSOLE_LOG_SUMMARY
            self._entries[entry.key] = entry

    def _bind_prepare(self, entry: ConfigurationEntry) -> None:
        if self.script_runner is None:
            entry.enabled = False
            return
        action = ScriptAction(
            PREPARE_KEY,
            self.script_runner,
            success_message=PREPARE_SUCCESS_MESSAGE,
            error_message=PREPARE_FAILED_MESSAGE,
        )
        entry.action = action
        try:
            handle = action.prepare()
        except Exception as e:
            logger.error(
                "prepare_entry_setup_failed",
                surface=self.name,
                error=str(e),
                exc_info=True,
            )
            entry.enabled = False
            self.notifier.notify(PREPARE_CREATE_FAILED_MESSAGE)
            return
        if handle.description:
            entry.fixed_summary = handle.description

    # --- Triggers ---

    def click(self, key: str) -> GateRun | None:
        """
        Trigger the entry's action through the gate.

        Returns the GateRun, or None for informational or disabled entries.
        """
        if self.gate is None or self._subscription is None:
            raise SubscriptionError(f"{self.name} is not attached")
        entry = self.entry(key)
        if not entry.is_actionable:
            logger.debug("entry_not_actionable", surface=self.name, key=key)
            return None
        logger.debug("entry_clicked", surface=self.name, key=key)
        return self.gate.trigger(entry.action)

    def __repr__(self) -> str:
        return f"SettingsSurface(name={self.name!r}, attached={self.attached})"


__all__ = [
    "SettingsSurface",
    "PREPARE_CREATE_FAILED_MESSAGE",
    "PREPARE_SUCCESS_MESSAGE",
    "PREPARE_FAILED_MESSAGE",
    "CONSOLE_LOG_SUMMARY",
]
