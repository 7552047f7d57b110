from __future__ import annotations

from pathlib import Path

import pytest

from fmtgate.core.config import (
    DEFAULT_CONFIG,
    FormatterConfig,
    config_from_mapping,
    load_config,
)
from fmtgate.core.exceptions import ConfigurationError


def test_default_config_targets_cargo_fmt() -> None:
    assert DEFAULT_CONFIG.version_command() == ["cargo", "fmt", "--version"]
    assert DEFAULT_CONFIG.check_command() == ["cargo", "fmt", "--", "--check"]
    assert DEFAULT_CONFIG.required_version == "1.4.38"
    assert DEFAULT_CONFIG.match == "substring"


def test_string_arguments_are_shell_split() -> None:
    config = FormatterConfig(command="black -q", check_args="--check --diff .")

    assert config.command == ("black", "-q")
    assert config.check_args == ("--check", "--diff", ".")


def test_config_is_frozen() -> None:
    with pytest.raises(ValueError):
        DEFAULT_CONFIG.required_version = "2.0.0"  # type: ignore[misc]


@pytest.mark.parametrize(
    "payload",
    [
        {"command": []},
        {"command": ""},
        {"required_version": "   "},
        {"match": "fuzzy"},
        {"unknown": True},
    ],
)
def test_invalid_mappings_raise_configuration_error(payload: dict[str, object]) -> None:
    with pytest.raises(ConfigurationError, match="Invalid formatter configuration"):
        config_from_mapping(payload)


def test_required_version_is_trimmed() -> None:
    assert config_from_mapping({"required_version": " 0.6.9 "}).required_version == "0.6.9"


def test_load_config_reads_yaml(tmp_path: Path) -> None:
    path = tmp_path / "fmtgate.yml"
    path.write_text(
        "command: ruff format\n"
        "check_args: [--check, src]\n"
        "required_version: 0.6.9\n"
        "match: exact\n",
        encoding="utf-8",
    )

    config = load_config(path)

    assert config.check_command() == ["ruff", "format", "--check", "src"]
    assert config.version_args == ("--version",)
    assert config.match == "exact"


def test_load_config_empty_file_uses_defaults(tmp_path: Path) -> None:
    path = tmp_path / "fmtgate.yml"
    path.write_text("", encoding="utf-8")

    assert load_config(path) == DEFAULT_CONFIG


def test_load_config_missing_file(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError, match="Unable to read"):
        load_config(tmp_path / "absent.yml")


def test_load_config_rejects_non_mapping(tmp_path: Path) -> None:
    path = tmp_path / "fmtgate.yml"
    path.write_text("- cargo\n- fmt\n", encoding="utf-8")

    with pytest.raises(ConfigurationError, match="must contain a mapping"):
        load_config(path)


def test_load_config_rejects_invalid_yaml(tmp_path: Path) -> None:
    path = tmp_path / "fmtgate.yml"
    path.write_text("command: [cargo\n", encoding="utf-8")

    with pytest.raises(ConfigurationError, match="not valid YAML"):
        load_config(path)


def test_unquoted_yaml_version_is_rejected(tmp_path: Path) -> None:
    path = tmp_path / "fmtgate.yml"
    path.write_text("required_version: 1.10\n", encoding="utf-8")

    with pytest.raises(ConfigurationError, match="quote it"):
        load_config(path)


def test_quoted_yaml_version_keeps_trailing_zero(tmp_path: Path) -> None:
    path = tmp_path / "fmtgate.yml"
    path.write_text("required_version: '1.10'\n", encoding="utf-8")

    assert load_config(path).required_version == "1.10"


def test_integer_version_is_rejected() -> None:
    with pytest.raises(ConfigurationError, match="must be a string"):
        config_from_mapping({"required_version": 2})
