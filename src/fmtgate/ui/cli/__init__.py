"""Public CLI exports for fmtgate."""

from __future__ import annotations

from .app import app, main
from .commands import check
from .state import emit_diagnostic, emit_error, get_cli_state


__all__ = [
    "app",
    "check",
    "emit_diagnostic",
    "emit_error",
    "get_cli_state",
    "main",
]
