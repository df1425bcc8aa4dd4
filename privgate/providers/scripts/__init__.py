from privgate.providers.scripts.base import ScriptHandle, ScriptRunner
from privgate.providers.scripts.subprocess_runner import SubprocessScriptRunner

__all__ = ["ScriptRunner", "ScriptHandle", "SubprocessScriptRunner"]
