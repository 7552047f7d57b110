"""Implementation of the formatter gate command."""

from __future__ import annotations

from typing import Annotated

import click
import typer

from fmtgate.core.config import DEFAULT_CONFIG, load_config
from fmtgate.core.exceptions import (
    ConfigurationError,
    FormatterInvocationError,
    FormatterVersionError,
)
from fmtgate.core.gate import INTERRUPTED_EXIT_CODE, VERSION_MISMATCH_EXIT_CODE, run_gate
from fmtgate.version import get_version

from .._options import DIAGNOSTICS_PANEL, ConfigOption, DebugOption, VerboseOption
from ..diagnostics import CliEmitter
from ..state import emit_diagnostic, emit_error, set_cli_state


def _print_version(value: bool) -> None:
    if value:
        typer.echo(f"fmtgate {get_version()}")
        raise typer.Exit()


def check(
    config: ConfigOption = None,
    verbose: VerboseOption = 0,
    debug: DebugOption = False,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            callback=_print_version,
            is_eager=True,
            help="Print the fmtgate version and exit.",
            rich_help_panel=DIAGNOSTICS_PANEL,
        ),
    ] = False,
) -> None:
    """Verify the formatter version, then run it in check mode over the workspace."""

    ctx = click.get_current_context(silent=True)
    typer_ctx = ctx if isinstance(ctx, typer.Context) else None
    state = set_cli_state(ctx=typer_ctx, verbosity=verbose, debug=debug)

    try:
        formatter_config = load_config(config) if config is not None else DEFAULT_CONFIG
    except ConfigurationError as exc:
        emit_error(str(exc), exception=exc)
        raise typer.Exit(code=1) from exc

    emitter = CliEmitter(state=state)
    try:
        result = run_gate(formatter_config, emitter=emitter)
    except FormatterVersionError as exc:
        emit_diagnostic(str(exc))
        raise typer.Exit(code=VERSION_MISMATCH_EXIT_CODE) from exc
    except FormatterInvocationError as exc:
        emit_error(str(exc), exception=exc)
        raise typer.Exit(code=1) from exc
    except KeyboardInterrupt as exc:
        if state.show_tracebacks:
            raise
        emit_error("Operation cancelled by user.", exception=exc)
        raise typer.Exit(code=INTERRUPTED_EXIT_CODE) from exc

    raise typer.Exit(code=result.exit_code)


__all__ = ["check"]
