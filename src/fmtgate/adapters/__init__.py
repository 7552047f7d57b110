"""Adapters bridging the gate with external processes."""

from __future__ import annotations

from .runner import ToolRunner, default_runner, is_tool_available


__all__ = ["ToolRunner", "default_runner", "is_tool_available"]
