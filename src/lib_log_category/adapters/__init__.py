"""Adapters implementing the sink and formatter ports."""

from __future__ import annotations

from .console import RichConsoleSink
from .formatting import format_message
from .memory import MemorySink

__all__ = ["MemorySink", "RichConsoleSink", "format_message"]
