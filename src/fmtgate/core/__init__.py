"""Core gate logic independent of any front-end."""

from __future__ import annotations

from .config import DEFAULT_CONFIG, FormatterConfig, load_config
from .exceptions import (
    ConfigurationError,
    FmtGateError,
    FormatterInvocationError,
    FormatterVersionError,
)


__all__ = [
    "DEFAULT_CONFIG",
    "ConfigurationError",
    "FmtGateError",
    "FormatterConfig",
    "FormatterInvocationError",
    "FormatterVersionError",
    "load_config",
]
