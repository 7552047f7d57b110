from __future__ import annotations

import logging

import pytest

from fmtgate.core.diagnostics import (
    DiagnosticEmitter,
    LoggingEmitter,
    NullEmitter,
    format_event_message,
)
from fmtgate.core.exceptions import FormatterInvocationError
from fmtgate.ui.cli import state as cli_state
from fmtgate.ui.cli.diagnostics import CliEmitter
from fmtgate.ui.cli.state import CLIState


def test_emitters_satisfy_protocol() -> None:
    assert isinstance(NullEmitter(), DiagnosticEmitter)
    assert isinstance(LoggingEmitter(), DiagnosticEmitter)
    assert isinstance(CliEmitter(CLIState()), DiagnosticEmitter)


@pytest.mark.parametrize(
    ("name", "payload", "expected"),
    [
        (
            "version_probe",
            {"command": ("cargo", "fmt", "--version"), "returncode": 0},
            "Queried formatter version: cargo fmt --version (exit 0)",
        ),
        (
            "version_probe",
            {"command": ("cargo", "fmt", "--version"), "returncode": None},
            "Queried formatter version: cargo fmt --version (not started)",
        ),
        (
            "version_mismatch",
            {"required": "1.4.38", "output": "rustfmt 1.5.1-stable\nextra\n"},
            "Formatter reported 'rustfmt 1.5.1-stable', expected '1.4.38'",
        ),
        (
            "version_mismatch",
            {"required": "1.4.38", "output": ""},
            "Formatter reported '<no output>', expected '1.4.38'",
        ),
        (
            "check_start",
            {"command": ("cargo", "fmt", "--", "--check")},
            "Running formatter check: cargo fmt -- --check",
        ),
        ("check_complete", {"returncode": 1}, "Formatter check finished with exit code 1"),
        ("unknown", {}, None),
    ],
)
def test_format_event_message(name: str, payload: dict[str, object], expected: str | None) -> None:
    assert format_event_message(name, payload) == expected


def test_logging_emitter_forwards_events(caplog: pytest.LogCaptureFixture) -> None:
    emitter = LoggingEmitter(logger_obj=logging.getLogger("fmtgate.test"))

    with caplog.at_level(logging.DEBUG, logger="fmtgate.test"):
        emitter.event("check_complete", {"returncode": 0})
        emitter.event("custom", {"value": 1})
        emitter.error("boom")

    messages = [record.getMessage() for record in caplog.records]
    assert messages == [
        "Formatter check finished with exit code 0",
        "diagnostic event custom: {'value': 1}",
        "boom",
    ]


def test_cli_emitter_is_silent_by_default(monkeypatch: pytest.MonkeyPatch) -> None:
    rendered: list[str] = []

    monkeypatch.setattr("fmtgate.ui.cli.diagnostics.emit_info", rendered.append)
    state = CLIState()
    emitter = CliEmitter(state)

    emitter.event("check_complete", {"returncode": 0})
    assert rendered == []

    state.verbosity = 1
    emitter.event("check_complete", {"returncode": 2})
    emitter.event("unknown", {})
    assert rendered == ["Formatter check finished with exit code 2"]


def test_emit_error_adds_exception_details(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    state = CLIState(verbosity=2)
    monkeypatch.setattr(cli_state, "get_cli_state", lambda *args, **kwargs: state)

    try:
        try:
            raise FileNotFoundError("cargo")
        except FileNotFoundError as exc:
            raise FormatterInvocationError("cannot start formatter") from exc
    except FormatterInvocationError as error:
        cli_state.emit_error("gate failed", exception=error)

    err = capsys.readouterr().err
    assert "error: gate failed" in err
    assert "type: FormatterInvocationError" in err
    assert "FileNotFoundError: cargo" in err

