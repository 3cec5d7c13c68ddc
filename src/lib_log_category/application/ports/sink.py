"""Ports describing the pluggable sink and formatter slots.

Purpose
-------
Define the narrow callable contracts a logger depends on, so adapters (Rich
console, in-memory capture, host-provided functions) plug in without the core
knowing their implementation.

Contents
--------
* :class:`SinkPort` – receives a formatted line plus optional call site.
* :class:`FormatterPort` – per-logger formatter slot.
* :class:`DefaultFormatterPort` – process-wide formatter that also receives
  the logger category.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from lib_log_category.domain.call_site import CallSite
from lib_log_category.domain.severity import Severity


@runtime_checkable
class SinkPort(Protocol):
    """Write or display an already formatted log line."""

    def __call__(self, message: str, call_site: CallSite | None = None) -> None:
        """Deliver ``message``; the return value is ignored."""


@runtime_checkable
class FormatterPort(Protocol):
    """Turn a severity and message into the line handed to the sink."""

    def __call__(self, severity: Severity, message: str, call_site: CallSite | None = None) -> str:
        """Return the formatted line."""


@runtime_checkable
class DefaultFormatterPort(Protocol):
    """Process-wide formatter used by loggers without their own formatter."""

    def __call__(
        self,
        category: str | None,
        severity: Severity,
        message: str,
        call_site: CallSite | None = None,
    ) -> str:
        """Return the formatted line for ``category``."""


__all__ = ["DefaultFormatterPort", "FormatterPort", "SinkPort"]
