"""
Tests for the subprocess script runner.
"""

import os

import pytest

from privgate.domain import ScriptExecutionError
from privgate.providers.scripts import SubprocessScriptRunner


def _write_script(directory, name: str, body: str, executable: bool = True):
    path = directory / name
    path.write_text("#!/bin/sh\n" + body + "\n", encoding="utf-8")
    if executable:
        os.chmod(path, 0o755)
    return path


def test_resolves_sh_suffix_and_runs(tmp_path):
    _write_script(tmp_path, "prepare.sh", "echo prepared")
    runner = SubprocessScriptRunner(tmp_path)

    handle = runner.resolve("prepare")

    assert handle.location.endswith("prepare.sh")
    assert runner.run(handle) == "prepared"


def test_missing_script_raises(tmp_path):
    with pytest.raises(ScriptExecutionError, match="not found"):
        SubprocessScriptRunner(tmp_path).resolve("prepare")


def test_non_executable_script_raises(tmp_path):
    _write_script(tmp_path, "prepare", "echo hi", executable=False)

    with pytest.raises(ScriptExecutionError, match="not executable"):
        SubprocessScriptRunner(tmp_path).resolve("prepare")


def test_non_zero_exit_raises_with_stderr(tmp_path):
    _write_script(tmp_path, "prepare", "echo 'no space' >&2\nexit 3")
    runner = SubprocessScriptRunner(tmp_path)

    with pytest.raises(ScriptExecutionError) as exc_info:
        runner.run(runner.resolve("prepare"))

    assert "exited with 3" in str(exc_info.value)
    assert "no space" in str(exc_info.value)


def test_timeout_raises(tmp_path):
    _write_script(tmp_path, "prepare", "exec sleep 5")
    runner = SubprocessScriptRunner(tmp_path, timeout=0.2)

    with pytest.raises(ScriptExecutionError, match="timed out"):
        runner.run(runner.resolve("prepare"))
