"""
Tests for declarative entry definitions.
"""

import pytest

from privgate.config import EntryDefinitionError, PrivgateSettings
from privgate.surface import (
    default_entry_definitions,
    load_entry_definitions,
    resolve_entry_definitions,
)


def test_default_definitions_use_configured_key():
    settings = PrivgateSettings(data_dir_key="custom_dir")

    keys = [d.key for d in default_entry_definitions(settings)]

    assert keys == ["prepare", "custom_dir", "show_log", "version"]


def test_load_mapping_form_keeps_order(tmp_path):
    path = tmp_path / "entries.yaml"
    path.write_text(
        "entries:\n"
        "  - key: version\n"
        "    display_label: Version\n"
        "  - key: android_data_dir\n"
        "    display_label: DAT directory\n",
        encoding="utf-8",
    )

    definitions = load_entry_definitions(path)

    assert [d.key for d in definitions] == ["version", "android_data_dir"]
    assert definitions[1].display_label == "DAT directory"


def test_load_list_form(tmp_path):
    path = tmp_path / "entries.yaml"
    path.write_text("- key: version\n  display_label: Version\n", encoding="utf-8")

    assert [d.key for d in load_entry_definitions(path)] == ["version"]


@pytest.mark.parametrize(
    "content",
    [
        "entries: {}\n",
        "- key: version\n",
        "key: [unclosed\n",
    ],
)
def test_malformed_files_raise(tmp_path, content):
    path = tmp_path / "entries.yaml"
    path.write_text(content, encoding="utf-8")

    with pytest.raises(EntryDefinitionError):
        load_entry_definitions(path)


def test_missing_file_raises(tmp_path):
    with pytest.raises(EntryDefinitionError):
        load_entry_definitions(tmp_path / "absent.yaml")


def test_resolve_prefers_entries_file(tmp_path):
    path = tmp_path / "entries.yaml"
    path.write_text("- key: version\n  display_label: Version\n", encoding="utf-8")

    settings = PrivgateSettings(entries_file=str(path))

    assert [d.key for d in resolve_entry_definitions(settings)] == ["version"]
