"""Lazily created default logger with process lifetime."""

from __future__ import annotations

from threading import RLock
from typing import TYPE_CHECKING

from lib_log_category.domain.severity import Severity

if TYPE_CHECKING:  # pragma: no cover - typing only
    from lib_log_category.logger import Logger

_DEFAULT_LOCK = RLock()
_DEFAULT: "Logger | None" = None


def default_logger() -> "Logger":
    """Return the category-less logger, creating it on first use.

    It logs every severity and throws on ``ERROR`` unless the ``log`` and
    ``throw`` configuration keys say otherwise.
    """

    global _DEFAULT
    with _DEFAULT_LOCK:
        if _DEFAULT is None:
            from lib_log_category.logger import Logger

            _DEFAULT = Logger(None, Severity.VERBOSE, Severity.ERROR)
        return _DEFAULT


def has_default_logger() -> bool:
    with _DEFAULT_LOCK:
        return _DEFAULT is not None


def reset_default_logger() -> None:
    """Destroy the default logger; the next access builds a fresh one."""

    global _DEFAULT
    with _DEFAULT_LOCK:
        if _DEFAULT is not None:
            _DEFAULT.destroy()
        _DEFAULT = None


__all__ = ["default_logger", "has_default_logger", "reset_default_logger"]
