"""Diagnostic emitter bridging the gate with CLI rendering utilities."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from fmtgate.core.diagnostics import DiagnosticEmitter, format_event_message

from .state import CLIState, emit_error, emit_info, get_cli_state


class CliEmitter(DiagnosticEmitter):
    """Emit diagnostics using the rich-enabled CLI helpers."""

    def __init__(self, state: CLIState | None = None) -> None:
        self._state = state or get_cli_state()

    def error(self, message: str, exc: BaseException | None = None) -> None:
        emit_error(message, exception=exc)

    def event(self, name: str, payload: Mapping[str, Any]) -> None:
        if self._state.verbosity < 1:
            return
        message = format_event_message(name, payload)
        if message:
            emit_info(message)


__all__ = ["CliEmitter"]
