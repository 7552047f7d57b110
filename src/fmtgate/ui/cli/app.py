"""Typer application wiring for the fmtgate CLI."""

from __future__ import annotations

import typer

from fmtgate.ui.cli.commands.check import check

from .state import emit_error, get_cli_state


app = typer.Typer(
    help="Check that sources are formatted with the required formatter version.",
    context_settings={"help_option_names": ["--help"]},
)


app.command()(check)


def main() -> None:
    """Entry point compatible with console scripts."""
    try:
        app()
    except typer.Exit:
        raise
    except SystemExit:
        raise
    except Exception as exc:  # pragma: no cover - last-resort reporting
        state = get_cli_state()
        if state.show_tracebacks:
            from rich.traceback import Traceback

            tb = Traceback.from_exception(
                type(exc),
                exc,
                exc.__traceback__,
                show_locals=state.verbosity >= 2,
            )
            state.err_console.print(tb)
        else:
            emit_error(str(exc), exception=exc)
        raise typer.Exit(code=1) from exc


__all__ = ["app", "main"]
