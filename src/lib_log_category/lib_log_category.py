"""Module-level logging shortcuts bound to the default logger.

Purpose
-------
Let scripts log without constructing a :class:`Logger`:
``lib_log_category.warn("disk almost full")`` routes through the default
logger, honouring the global ``log`` and ``throw`` configuration keys.

Contents
--------
* :func:`log` – unconditional log (severity ``NONE``).
* :func:`error`, :func:`warn`, :func:`info`, :func:`verbose` – conditional
  log-or-throw through the matching level handle.
* :func:`summary_info` – metadata banner used by the CLI.
"""

from __future__ import annotations

from lib_log_category.domain.call_site import CallSite
from lib_log_category.runtime import default_logger


def log(message: str, call_site: CallSite | None = None) -> None:
    default_logger().log(message, call_site)


def error(message: str, call_site: CallSite | None = None) -> None:
    """Log ``message`` at ``ERROR``; the default logger throws on this level."""

    default_logger().error(message, call_site)


def warn(message: str, call_site: CallSite | None = None) -> None:
    default_logger().warn(message, call_site)


def info(message: str, call_site: CallSite | None = None) -> None:
    default_logger().info(message, call_site)


def verbose(message: str, call_site: CallSite | None = None) -> None:
    default_logger().verbose(message, call_site)


def summary_info() -> str:
    """Return the metadata banner as one string ending with a newline."""

    from . import __init__conf__

    lines: list[str] = []
    __init__conf__.print_info(writer=lines.append)
    return "".join(lines)


__all__ = ["error", "info", "log", "summary_info", "verbose", "warn"]
