"""
ScriptAction - runs a privileged script through the script subsystem.
"""

from privgate.actions.base import ConfigurationAction
from privgate.domain import ActionResult
from privgate.providers.scripts import ScriptHandle, ScriptRunner


class ScriptAction(ConfigurationAction):
    """
    Run a named script.

    prepare() resolves the script up front (when its entry is created);
    perform() resolves lazily if that did not happen.
    """

    def __init__(
        self,
        script_name: str,
        runner: ScriptRunner,
        success_message: str = "Finished {script}",
        error_message: str = "Failed to run {script}",
    ):
        super().__init__(f"run_{script_name}")
        self.script_name = script_name
        self.runner = runner
        self.success_message = success_message
        self.error_message = error_message
        self.handle: ScriptHandle | None = None

    def prepare(self) -> ScriptHandle:
        self.handle = self.runner.resolve(self.script_name)
        return self.handle

    def perform(self) -> ActionResult:
        handle = self.handle or self.prepare()
        output = self.runner.run(handle)
        return ActionResult.success(
            self.success_message.format(script=self.script_name),
            value=output or None,
        )

    def failure_message(self, error: Exception) -> str:
        return f"{self.error_message.format(script=self.script_name)}: {error}"


__all__ = ["ScriptAction"]
