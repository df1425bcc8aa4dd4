"""
Subprocess script runner.

Runs executable scripts from a directory. A script named "prepare" is found
as <scripts_dir>/prepare or <scripts_dir>/prepare.sh.
"""

import os
import subprocess
from pathlib import Path

from privgate.domain import ScriptExecutionError
from privgate.providers.scripts.base import ScriptHandle, ScriptRunner
from privgate.utils.logging import get_logger

logger = get_logger(__name__)

SCRIPT_SUFFIXES = ("", ".sh")


class SubprocessScriptRunner(ScriptRunner):
    def __init__(self, scripts_dir: str | Path, timeout: float = 60.0):
        self.scripts_dir = Path(scripts_dir).expanduser()
        self.timeout = timeout

    def resolve(self, name: str) -> ScriptHandle:
        for suffix in SCRIPT_SUFFIXES:
            path = self.scripts_dir / f"{name}{suffix}"
            if path.is_file():
                if not os.access(path, os.X_OK):
                    raise ScriptExecutionError(f"Script {path} is not executable")
                return ScriptHandle(name=name, location=str(path))
        raise ScriptExecutionError(f"Script {name} not found in {self.scripts_dir}")

    def run(self, handle: ScriptHandle) -> str:
        logger.debug("running_script", script=handle.name, location=handle.location)
        try:
            completed = subprocess.run(
                [handle.location],
                capture_output=True,
                text=True,
                timeout=self.timeout,
                cwd=str(self.scripts_dir),
            )
        except subprocess.TimeoutExpired as e:
            raise ScriptExecutionError(
                f"Script {handle.name} timed out after {self.timeout}s"
            ) from e
        except OSError as e:
            raise ScriptExecutionError(f"Script {handle.name} could not start: {e}") from e

        if completed.returncode != 0:
            stderr = completed.stderr.strip()
            raise ScriptExecutionError(
                f"Script {handle.name} exited with {completed.returncode}"
                + (f": {stderr}" if stderr else "")
            )
        return completed.stdout.strip()


__all__ = ["SubprocessScriptRunner"]
