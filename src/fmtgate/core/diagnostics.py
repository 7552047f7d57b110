"""Diagnostic abstractions shared by the gate and its front-ends."""

from __future__ import annotations

from collections.abc import Mapping
import logging
import shlex
from typing import Any, Protocol, runtime_checkable


logger = logging.getLogger(__name__)


@runtime_checkable
class DiagnosticEmitter(Protocol):
    """Interface used to surface errors and structured events."""

    def error(self, message: str, exc: BaseException | None = None) -> None: ...

    def event(self, name: str, payload: Mapping[str, Any]) -> None: ...


class NullEmitter:
    """Emitter that ignores every diagnostic."""

    def error(self, message: str, exc: BaseException | None = None) -> None:
        return

    def event(self, name: str, payload: Mapping[str, Any]) -> None:
        return


class LoggingEmitter:
    """Emitter that forwards diagnostics to the standard logging module."""

    def __init__(self, *, logger_obj: logging.Logger | None = None) -> None:
        self._logger = logger_obj or logger

    def error(self, message: str, exc: BaseException | None = None) -> None:
        if exc is not None:
            self._logger.error(message, exc_info=exc)
        else:
            self._logger.error(message)

    def event(self, name: str, payload: Mapping[str, Any]) -> None:
        message = format_event_message(name, payload)
        if message:
            self._logger.info(message)
            return
        self._logger.debug("diagnostic event %s: %s", name, dict(payload))


def _format_command(value: Any) -> str:
    if isinstance(value, (list, tuple)):
        return shlex.join(str(part) for part in value)
    return str(value) if value else "<unknown>"


def format_event_message(name: str, payload: Mapping[str, Any]) -> str | None:
    """Return a human-friendly summary for selected diagnostic events."""
    data = dict(payload)

    if name == "version_probe":
        command = _format_command(data.get("command"))
        returncode = data.get("returncode")
        status = "not started" if returncode is None else f"exit {returncode}"
        return f"Queried formatter version: {command} ({status})"

    if name == "version_mismatch":
        required = data.get("required") or "<unknown>"
        output = (data.get("output") or "").strip()
        first_line = output.splitlines()[0] if output else "<no output>"
        return f"Formatter reported '{first_line}', expected '{required}'"

    if name == "check_start":
        return f"Running formatter check: {_format_command(data.get('command'))}"

    if name == "check_complete":
        return f"Formatter check finished with exit code {data.get('returncode')}"

    return None


__all__ = [
    "DiagnosticEmitter",
    "LoggingEmitter",
    "NullEmitter",
    "format_event_message",
]
