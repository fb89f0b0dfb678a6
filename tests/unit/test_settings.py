"""Unit tests for marshalling settings."""

from pathlib import Path

import pytest

from vcardio.contexts.marshalling.exceptions import InvalidSettingsError
from vcardio.contexts.marshalling.settings import (
    DEFAULT_CONFIG_PATH,
    MarshallingSettings,
    load_marshalling_settings,
)
from vcardio.contexts.types.versions import CompatibilityMode, VCardVersion


def _write_config(tmp_path: Path, content: str) -> Path:
    path = tmp_path / "marshalling.yaml"
    path.write_text(content)
    return path


@pytest.mark.unit
def test_packaged_defaults():
    settings = load_marshalling_settings(DEFAULT_CONFIG_PATH)

    assert settings.target_version is VCardVersion.V4_0
    assert settings.compatibility_mode is CompatibilityMode.RFC
    assert settings.add_generator is True
    assert settings.json_indent is None


@pytest.mark.unit
def test_file_values(tmp_path):
    path = _write_config(
        tmp_path,
        'target_version: "3.0"\ncompatibility_mode: OUTLOOK\njson_indent: 2\nlog_dir: logs\n',
    )

    settings = load_marshalling_settings(path)

    assert settings.target_version is VCardVersion.V3_0
    assert settings.compatibility_mode is CompatibilityMode.OUTLOOK
    assert settings.json_indent == 2
    assert settings.log_dir == Path("logs")


@pytest.mark.unit
def test_missing_values_use_defaults(tmp_path):
    path = _write_config(tmp_path, "add_generator: false\n")

    settings = load_marshalling_settings(path)

    assert settings == MarshallingSettings(add_generator=False)


@pytest.mark.unit
def test_overrides_applied_last(tmp_path):
    path = _write_config(tmp_path, 'target_version: "4.0"\n')

    settings = load_marshalling_settings(
        path, overrides=["target_version='2.1'", "add_generator=false"]
    )

    assert settings.target_version is VCardVersion.V2_1
    assert settings.add_generator is False


@pytest.mark.unit
def test_unknown_version(tmp_path):
    path = _write_config(tmp_path, 'target_version: "5.0"\n')

    with pytest.raises(InvalidSettingsError) as exc_info:
        load_marshalling_settings(path)

    assert exc_info.value.key == "target_version"


@pytest.mark.unit
def test_unknown_mode(tmp_path):
    path = _write_config(tmp_path, "compatibility_mode: lotus\n")

    with pytest.raises(InvalidSettingsError, match="Unknown compatibility mode"):
        load_marshalling_settings(path)


@pytest.mark.unit
def test_unknown_key(tmp_path):
    path = _write_config(tmp_path, "line_folding: true\n")

    with pytest.raises(InvalidSettingsError, match="Unknown settings"):
        load_marshalling_settings(path)


@pytest.mark.unit
def test_bad_json_indent(tmp_path):
    path = _write_config(tmp_path, "json_indent: wide\n")

    with pytest.raises(InvalidSettingsError) as exc_info:
        load_marshalling_settings(path)

    assert exc_info.value.key == "json_indent"


@pytest.mark.unit
def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_marshalling_settings(tmp_path / "absent.yaml")


@pytest.mark.unit
@pytest.mark.parametrize("key", ["add_generator", "xml_indent"])
def test_flags_must_be_booleans(tmp_path, key):
    """A quoted "false" is a string, not a boolean."""
    path = _write_config(tmp_path, f'{key}: "false"\n')

    with pytest.raises(InvalidSettingsError) as exc_info:
        load_marshalling_settings(path)

    assert exc_info.value.key == key


@pytest.mark.unit
def test_boolean_json_indent_rejected(tmp_path):
    path = _write_config(tmp_path, "json_indent: true\n")

    with pytest.raises(InvalidSettingsError):
        load_marshalling_settings(path)
