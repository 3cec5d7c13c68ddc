"""Callable contracts the logger core depends on."""

from __future__ import annotations

from .sink import DefaultFormatterPort, FormatterPort, SinkPort

__all__ = ["DefaultFormatterPort", "FormatterPort", "SinkPort"]
