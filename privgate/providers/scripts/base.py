"""
Script runner interface.

The script subsystem performs the actual privileged filesystem/process work.
Scripts are resolved once when an entry is created and run on every
authorized click.
"""

from abc import ABC, abstractmethod

from pydantic import BaseModel


class ScriptHandle(BaseModel):
    """A resolved script, ready to run"""

    name: str
    location: str
    description: str | None = None


class ScriptRunner(ABC):
    @abstractmethod
    def resolve(self, name: str) -> ScriptHandle:
        """
        Resolve a script by name.

        Raises:
            ScriptExecutionError: If the script does not exist or cannot run
        """
        pass

    @abstractmethod
    def run(self, handle: ScriptHandle) -> str:
        """
        Run a resolved script and return its output.

        Raises:
            ScriptExecutionError: If the script fails
        """
        pass


__all__ = ["ScriptRunner", "ScriptHandle"]
