"""Abstractions for invoking the external formatter."""

from __future__ import annotations

from collections.abc import Sequence
import logging
import os
from pathlib import Path
import shutil
import subprocess

from fmtgate.core.exceptions import FormatterInvocationError


logger = logging.getLogger(__name__)


class ToolRunner:
    """Utility class encapsulating formatter invocations."""

    def __init__(self) -> None:
        self._cache: dict[str, str] = {}

    def is_available(self, command: Sequence[str]) -> bool:
        """Return True when the command's executable can be located."""
        try:
            return self._resolve_executable(command[0], optional=True) is not None
        except FormatterInvocationError:
            return False

    def resolve(self, command: Sequence[str]) -> list[str]:
        """Return ``command`` with its executable resolved against PATH."""
        if not command:
            raise FormatterInvocationError("No formatter command configured.")
        executable = self._resolve_executable(command[0], optional=False)
        assert executable is not None
        return [executable, *command[1:]]

    def reset(self) -> None:
        """Clear cached executable lookup results."""
        self._cache.clear()

    def run(
        self,
        command: Sequence[str],
        *,
        capture_output: bool = True,
        cwd: Path | str | None = None,
    ) -> subprocess.CompletedProcess[str]:
        """Execute ``command`` and return the completed process without checking it."""
        resolved = self.resolve(command)
        logger.debug("running %s", resolved)
        try:
            return subprocess.run(
                resolved,
                check=False,
                capture_output=capture_output,
                text=True,
                cwd=os.fspath(cwd) if cwd is not None else None,
            )
        except FileNotFoundError as exc:
            self._cache.pop(command[0], None)
            raise FormatterInvocationError(
                f"Formatter executable '{command[0]}' could not be located."
            ) from exc
        except OSError as exc:
            raise FormatterInvocationError(f"Failed to invoke '{command[0]}': {exc}") from exc

    def _resolve_executable(self, name: str, *, optional: bool) -> str | None:
        cached = self._cache.get(name)
        if cached:
            return cached

        try:
            executable = shutil.which(name)
        except (AssertionError, OSError, ValueError):
            executable = None

        if executable:
            self._cache[name] = executable
            return executable

        if optional:
            return None

        raise FormatterInvocationError(f"Formatter executable '{name}' was not found on PATH.")


_default_runner = ToolRunner()


def default_runner() -> ToolRunner:
    """Return the runner shared by the module-level helpers."""
    return _default_runner


def is_tool_available(command: Sequence[str]) -> bool:
    """Check if the executable of ``command`` can be located."""
    return _default_runner.is_available(command)


__all__ = [
    "ToolRunner",
    "default_runner",
    "is_tool_available",
]
