"""CLI command implementations exposed via `fmtgate.ui.cli`."""

from __future__ import annotations

from .check import check


__all__ = ["check"]
