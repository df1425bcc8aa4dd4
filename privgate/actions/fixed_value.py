"""
FixedValueAction - writes a predetermined value once authorized.

The value is written unconditionally; no existence check is made on the
path it names.
"""

from privgate.actions.base import ConfigurationAction
from privgate.domain import ActionResult, ConfigurationEntry
from privgate.providers.storage import SettingsRepository

DEFAULT_MESSAGE = "Data directory set:\n{value}"


class FixedValueAction(ConfigurationAction):
    def __init__(
        self,
        key: str,
        value: str,
        repository: SettingsRepository,
        entry: ConfigurationEntry | None = None,
        message: str = DEFAULT_MESSAGE,
        name: str | None = None,
    ):
        super().__init__(name or f"set_{key}")
        self.key = key
        self.value = value
        self.repository = repository
        self.entry = entry
        self.message = message

    def perform(self) -> ActionResult:
        self.repository.set(self.key, self.value)
        if self.entry is not None:
            # Summary follows what was persisted, not what was intended
            self.entry.current_value = self.repository.get(self.key)
        return ActionResult.success(self.message.format(value=self.value), value=self.value)


__all__ = ["FixedValueAction"]
