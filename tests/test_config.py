"""
Tests for environment-driven settings.
"""

import pytest
from pydantic import ValidationError

import privgate
from privgate.config import DEFAULT_DATA_DIR, PrivgateSettings


def test_defaults(monkeypatch):
    monkeypatch.delenv("PRIVGATE_DATA_DIR_VALUE", raising=False)
    settings = PrivgateSettings(_env_file=None)

    assert settings.data_dir_key == "android_data_dir"
    assert settings.data_dir_value == DEFAULT_DATA_DIR
    assert settings.settings_path is None
    assert settings.max_pending_requests == 64


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("PRIVGATE_MAX_PENDING_REQUESTS", "5")
    monkeypatch.setenv("PRIVGATE_DATA_DIR_VALUE", "/sdcard/dat")
    monkeypatch.setenv("PRIVGATE_LOG_FORMAT", "json")

    settings = PrivgateSettings(_env_file=None)

    assert settings.max_pending_requests == 5
    assert settings.data_dir_value == "/sdcard/dat"
    assert settings.log_format == "json"


def test_debug_forces_debug_level():
    settings = PrivgateSettings(_env_file=None, debug=True, log_level="WARNING")
    assert settings.effective_log_level == "DEBUG"


def test_invalid_capacity_rejected():
    with pytest.raises(ValidationError):
        PrivgateSettings(_env_file=None, max_pending_requests=0)


def test_app_version_defaults_to_package_version():
    assert PrivgateSettings(_env_file=None).app_version == privgate.__version__
