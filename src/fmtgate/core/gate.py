"""Version gate and delegated formatter check."""

from __future__ import annotations

from dataclasses import dataclass
import logging
from pathlib import Path
import re
import shlex

from fmtgate.adapters.runner import ToolRunner, default_runner
from fmtgate.core.config import DEFAULT_CONFIG, FormatterConfig, MatchMode
from fmtgate.core.diagnostics import DiagnosticEmitter, NullEmitter
from fmtgate.core.exceptions import FormatterInvocationError, FormatterVersionError


logger = logging.getLogger(__name__)

VERSION_MISMATCH_EXIT_CODE = 1
INTERRUPTED_EXIT_CODE = 130

_VERSION_TOKEN = re.compile(r"(?P<core>\d+(?:\.\d+)+)(?P<suffix>[-+][0-9A-Za-z.+-]*)?")


@dataclass(slots=True, frozen=True)
class VersionProbe:
    """Outcome of the formatter version query."""

    command: tuple[str, ...]
    returncode: int | None
    output: str
    matched: bool


@dataclass(slots=True, frozen=True)
class GateResult:
    """Outcome of a complete gate run."""

    probe: VersionProbe
    returncode: int

    @property
    def passed(self) -> bool:
        return self.returncode == 0

    @property
    def exit_code(self) -> int:
        return exit_status(self.returncode)


def exit_status(returncode: int) -> int:
    """Map a child return code to a process exit status.

    Non-negative codes are kept verbatim. A negative code means the child was
    killed by that signal and becomes ``128 + signal``, as shells report it.
    """
    if returncode < 0:
        return 128 - returncode
    return returncode


def version_matches(output: str, required: str, *, mode: MatchMode = "substring") -> bool:
    """Return whether ``output`` reports the ``required`` version."""
    if mode == "substring":
        return required in output

    match = _VERSION_TOKEN.search(output)
    if match is None:
        return False
    return required in {match.group(0), match.group("core")}


def version_diagnostic(config: FormatterConfig) -> str:
    """Return the one-line message printed when the version gate fails."""
    command = shlex.join(config.version_command())
    return (
        f"Required formatter version not found: '{command}' "
        f"must report '{config.required_version}'."
    )


def probe_version(
    config: FormatterConfig = DEFAULT_CONFIG,
    runner: ToolRunner | None = None,
    *,
    emitter: DiagnosticEmitter | None = None,
) -> VersionProbe:
    """Query the formatter version and compare it with the configured literal."""
    runner = runner or default_runner()
    emitter = emitter or NullEmitter()
    command = tuple(config.version_command())

    try:
        result = runner.run(command, capture_output=True)
    except FormatterInvocationError as exc:
        logger.debug("version query failed: %s", exc)
        returncode: int | None = None
        output = ""
    else:
        returncode = result.returncode
        output = (result.stdout or "") + (result.stderr or "")

    matched = returncode == 0 and version_matches(
        output, config.required_version, mode=config.match
    )
    emitter.event("version_probe", {"command": command, "returncode": returncode})
    if not matched:
        emitter.event(
            "version_mismatch",
            {"required": config.required_version, "output": output},
        )
    return VersionProbe(command=command, returncode=returncode, output=output, matched=matched)


def require_version(
    config: FormatterConfig = DEFAULT_CONFIG,
    runner: ToolRunner | None = None,
    *,
    emitter: DiagnosticEmitter | None = None,
) -> VersionProbe:
    """Return the version probe, raising when the required version is absent."""
    probe = probe_version(config, runner, emitter=emitter)
    if not probe.matched:
        raise FormatterVersionError(version_diagnostic(config), probe=probe)
    return probe


def run_check(
    config: FormatterConfig = DEFAULT_CONFIG,
    runner: ToolRunner | None = None,
    *,
    cwd: Path | str | None = None,
    emitter: DiagnosticEmitter | None = None,
) -> int:
    """Run the formatter in check mode and return its exit code unchanged."""
    runner = runner or default_runner()
    emitter = emitter or NullEmitter()
    command = tuple(config.check_command())

    emitter.event("check_start", {"command": command})
    result = runner.run(command, capture_output=False, cwd=cwd)
    emitter.event("check_complete", {"returncode": result.returncode})
    return result.returncode


def run_gate(
    config: FormatterConfig | None = None,
    *,
    runner: ToolRunner | None = None,
    cwd: Path | str | None = None,
    emitter: DiagnosticEmitter | None = None,
) -> GateResult:
    """Run the version gate followed by the delegated check."""
    config = config or DEFAULT_CONFIG
    probe = require_version(config, runner, emitter=emitter)
    returncode = run_check(config, runner, cwd=cwd, emitter=emitter)
    return GateResult(probe=probe, returncode=returncode)


def check_formatting(
    config: FormatterConfig | None = None,
    *,
    cwd: Path | str | None = None,
    emitter: DiagnosticEmitter | None = None,
) -> int:
    """Return the exit code of a full gate run, reporting mismatches to ``emitter``."""
    emitter = emitter or NullEmitter()
    try:
        result = run_gate(config, cwd=cwd, emitter=emitter)
    except FormatterVersionError as exc:
        emitter.error(str(exc))
        return VERSION_MISMATCH_EXIT_CODE
    return result.exit_code


__all__ = [
    "INTERRUPTED_EXIT_CODE",
    "VERSION_MISMATCH_EXIT_CODE",
    "GateResult",
    "VersionProbe",
    "check_formatting",
    "exit_status",
    "probe_version",
    "require_version",
    "run_check",
    "run_gate",
    "version_diagnostic",
    "version_matches",
]
