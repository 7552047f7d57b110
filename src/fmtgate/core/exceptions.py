"""Exception hierarchy for the formatter gate."""

from __future__ import annotations

from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from fmtgate.core.gate import VersionProbe


class FmtGateError(RuntimeError):
    """Base exception for gate failures."""


class FormatterVersionError(FmtGateError):
    """Raised when the formatter does not report the required version."""

    def __init__(self, message: str, *, probe: VersionProbe | None = None) -> None:
        super().__init__(message)
        self.probe = probe


class FormatterInvocationError(FmtGateError):
    """Raised when the formatter executable cannot be located or started."""


class ConfigurationError(FmtGateError):
    """Raised when a configuration file is missing or invalid."""


__all__ = [
    "ConfigurationError",
    "FmtGateError",
    "FormatterInvocationError",
    "FormatterVersionError",
]
