"""
Tests for configuration actions.
"""

from unittest.mock import patch

import pytest

from privgate.actions import ConfigurationAction, FixedValueAction, ScriptAction
from privgate.domain import (
    ActionResult,
    ConfigurationEntry,
    GateErrorKind,
    NOT_SET_SUMMARY,
    ScriptExecutionError,
)
from privgate.providers.scripts import ScriptHandle, ScriptRunner
from privgate.providers.storage import InMemorySettingsRepository


class FakeRunner(ScriptRunner):
    def __init__(self, output: str = "ok", fail_resolve: bool = False, fail_run: bool = False):
        self.output = output
        self.fail_resolve = fail_resolve
        self.fail_run = fail_run
        self.resolved: list[str] = []
        self.runs: list[str] = []

    def resolve(self, name: str) -> ScriptHandle:
        if self.fail_resolve:
            raise ScriptExecutionError(f"Script {name} not found")
        self.resolved.append(name)
        return ScriptHandle(name=name, location=f"/scripts/{name}.sh")

    def run(self, handle: ScriptHandle) -> str:
        if self.fail_run:
            raise ScriptExecutionError("boom")
        self.runs.append(handle.name)
        return self.output


class ExplodingAction(ConfigurationAction):
    def perform(self) -> ActionResult:
        raise PermissionError("read-only filesystem")


class ReentrantAction(ConfigurationAction):
    def __init__(self):
        super().__init__("reentrant")
        self.inner: ActionResult | None = None

    def perform(self) -> ActionResult:
        self.inner = self.execute()
        return ActionResult.success("outer")


@pytest.fixture
def repository():
    return InMemorySettingsRepository()


def test_fixed_value_writes_and_updates_entry(repository):
    entry = ConfigurationEntry(key="android_data_dir", display_label="DAT directory")
    assert entry.summary == NOT_SET_SUMMARY

    action = FixedValueAction("android_data_dir", "/data/dat", repository, entry=entry)
    result = action.execute()

    assert result.ok
    assert result.summary.value == "/data/dat"
    assert "/data/dat" in result.message
    assert repository.get("android_data_dir") == "/data/dat"
    assert entry.current_value == "/data/dat"
    assert entry.summary == "/data/dat"


def test_fixed_value_overwrites_existing_value():
    repository = InMemorySettingsRepository({"android_data_dir": "/old"})
    action = FixedValueAction("android_data_dir", "/new", repository)

    action.execute()

    assert repository.get("android_data_dir") == "/new"


def test_body_exception_becomes_failed_result():
    action = ExplodingAction("explode")

    with patch("privgate.actions.base.logger") as mock_logger:
        result = action.execute()

    assert not result.ok
    assert result.error.kind == GateErrorKind.ACTION_EXECUTION_FAILED
    assert "read-only filesystem" in result.message

    call_args = mock_logger.error.call_args
    assert call_args[0][0] == "action_execution_failed"
    assert call_args[1]["error_type"] == "PermissionError"
    assert call_args[1]["exc_info"] is True


def test_overlapping_execution_is_refused():
    action = ReentrantAction()

    result = action.execute()

    assert result.ok
    assert action.inner is not None
    assert not action.inner.ok
    assert "already running" in action.inner.message


def test_action_can_run_again_after_failure():
    action = ExplodingAction("explode")
    action.execute()
    second = action.execute()
    assert "already running" not in second.message


def test_script_action_runs_prepared_script():
    runner = FakeRunner(output="created 3 dirs")
    action = ScriptAction("prepare", runner, success_message="Prepared")

    action.prepare()
    result = action.execute()

    assert result.ok
    assert result.message == "Prepared"
    assert result.summary.value == "created 3 dirs"
    assert runner.resolved == ["prepare"]
    assert runner.runs == ["prepare"]


def test_script_action_resolves_lazily():
    runner = FakeRunner()
    action = ScriptAction("prepare", runner)

    result = action.execute()

    assert result.ok
    assert result.message == "Finished prepare"
    assert runner.resolved == ["prepare"]


def test_script_action_failure_message():
    action = ScriptAction("prepare", FakeRunner(fail_run=True))

    result = action.execute()

    assert not result.ok
    assert result.message == "Failed to run prepare: boom"


def test_action_result_helpers():
    ok = ActionResult.success("done", value="v")
    failed = ActionResult.failure("nope", kind=GateErrorKind.AUTHORIZATION_DENIED)

    assert ok.ok and ok.error is None and ok.message == "done"
    assert not failed.ok and failed.summary is None
    assert failed.error.kind == GateErrorKind.AUTHORIZATION_DENIED
