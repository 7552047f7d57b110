"""Configuration model describing the formatter to gate.

FormatterConfig

`command` (`tuple[str, ...]`)
: Executable and leading arguments used to reach the formatter. A plain
  string is split with shell rules, so ``"cargo fmt"`` is accepted.

`version_args` (`tuple[str, ...]`)
: Arguments appended to `command` to print the formatter version.

`check_args` (`tuple[str, ...]`)
: Arguments appended to `command` to run the read-only check mode.

`required_version` (`str`)
: Literal version identifier the version output must report.

`match` (`"substring" | "exact"`)
: How `required_version` is compared against the version output. `substring`
  accepts the literal anywhere in the output; `exact` compares it against the
  first dotted version token found in the output.
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
import shlex
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
import yaml

from fmtgate.core.exceptions import ConfigurationError


DEFAULT_COMMAND: tuple[str, ...] = ("cargo", "fmt")
DEFAULT_VERSION_ARGS: tuple[str, ...] = ("--version",)
DEFAULT_CHECK_ARGS: tuple[str, ...] = ("--", "--check")
DEFAULT_REQUIRED_VERSION = "1.4.38"

MatchMode = Literal["substring", "exact"]


def _split_arguments(value: Any) -> Any:
    if isinstance(value, str):
        return tuple(shlex.split(value))
    return value


class FormatterConfig(BaseModel):
    """Constants describing how to query and invoke the formatter."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    command: tuple[str, ...] = Field(default=DEFAULT_COMMAND, min_length=1)
    version_args: tuple[str, ...] = DEFAULT_VERSION_ARGS
    check_args: tuple[str, ...] = DEFAULT_CHECK_ARGS
    required_version: str = DEFAULT_REQUIRED_VERSION
    match: MatchMode = "substring"

    @field_validator("command", "version_args", "check_args", mode="before")
    @classmethod
    def _normalise_arguments(cls, value: Any) -> Any:
        return _split_arguments(value)

    @field_validator("command")
    @classmethod
    def _require_executable(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        if not value[0].strip():
            raise ValueError("command must start with an executable name")
        return value

    @field_validator("required_version", mode="before")
    @classmethod
    def _reject_numeric_version(cls, value: Any) -> Any:
        # YAML reads 1.10 as the float 1.1, so numbers cannot be trusted as literals.
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            raise ValueError(
                f"required_version must be a string, got the number {value!r}; "
                "quote it in the configuration file (for example '1.10')"
            )
        return value

    @field_validator("required_version")
    @classmethod
    def _require_version_literal(cls, value: str) -> str:
        trimmed = value.strip()
        if not trimmed:
            raise ValueError("required_version must not be blank")
        return trimmed

    def version_command(self) -> list[str]:
        """Return the full argument vector of the version query."""
        return [*self.command, *self.version_args]

    def check_command(self) -> list[str]:
        """Return the full argument vector of the check-mode invocation."""
        return [*self.command, *self.check_args]


DEFAULT_CONFIG = FormatterConfig()


def config_from_mapping(payload: Mapping[str, Any] | None) -> FormatterConfig:
    """Validate a raw mapping into a :class:`FormatterConfig`."""
    try:
        return FormatterConfig.model_validate(dict(payload or {}))
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid formatter configuration: {exc}") from exc


def load_config(path: Path | str) -> FormatterConfig:
    """Load a YAML configuration file, falling back to defaults for omitted keys."""
    config_path = Path(path)
    try:
        raw = config_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigurationError(f"Unable to read configuration file '{config_path}': {exc}") from exc

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Configuration file '{config_path}' is not valid YAML.") from exc

    if data is None:
        return DEFAULT_CONFIG
    if not isinstance(data, Mapping):
        raise ConfigurationError(
            f"Configuration file '{config_path}' must contain a mapping, "
            f"got {type(data).__name__}."
        )
    return config_from_mapping(data)


__all__ = [
    "DEFAULT_CHECK_ARGS",
    "DEFAULT_COMMAND",
    "DEFAULT_CONFIG",
    "DEFAULT_REQUIRED_VERSION",
    "DEFAULT_VERSION_ARGS",
    "FormatterConfig",
    "MatchMode",
    "config_from_mapping",
    "load_config",
]
