"""Formatter version gate and check-mode runner."""

from __future__ import annotations

from fmtgate.adapters.runner import ToolRunner
from fmtgate.core.config import DEFAULT_CONFIG, FormatterConfig, load_config
from fmtgate.core.diagnostics import DiagnosticEmitter, LoggingEmitter, NullEmitter
from fmtgate.core.exceptions import (
    ConfigurationError,
    FmtGateError,
    FormatterInvocationError,
    FormatterVersionError,
)
from fmtgate.core.gate import (
    GateResult,
    VersionProbe,
    check_formatting,
    probe_version,
    require_version,
    run_check,
    run_gate,
)
from fmtgate.version import get_version


__version__ = get_version()

__all__ = [
    "DEFAULT_CONFIG",
    "ConfigurationError",
    "DiagnosticEmitter",
    "FmtGateError",
    "FormatterConfig",
    "FormatterInvocationError",
    "FormatterVersionError",
    "GateResult",
    "LoggingEmitter",
    "NullEmitter",
    "ToolRunner",
    "VersionProbe",
    "__version__",
    "check_formatting",
    "load_config",
    "probe_version",
    "require_version",
    "run_check",
    "run_gate",
]
