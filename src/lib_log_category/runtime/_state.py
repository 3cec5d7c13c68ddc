"""Process-wide slots: configuration, default sink, default formatter.

Initialisation order
--------------------
The configuration mapping must be in place before the first logger is built.
:func:`current_config` loads it from the environment on first access when
:func:`set_config` was never called. Once read it is frozen for the process,
so replacing it later raises :class:`RuntimeError` until
:func:`reset_state` is called (tests do this between cases).
"""

from __future__ import annotations

import logging
from threading import RLock
from types import MappingProxyType
from typing import Mapping

from lib_log_category.adapters.console.rich_console import RichConsoleSink
from lib_log_category.adapters.formatting import format_message
from lib_log_category.application.ports.sink import DefaultFormatterPort, SinkPort
from lib_log_category.config import load_config

logger = logging.getLogger(__name__)

_STATE_LOCK = RLock()
_CONFIG: Mapping[str, str] | None = None
_CONFIG_READ = False
_SINK: SinkPort | None = None
_FORMATTER: DefaultFormatterPort = format_message


def set_config(config: Mapping[str, str]) -> None:
    """Install ``config`` as the process-wide mapping.

    Raises
    ------
    RuntimeError
        When the current mapping was already consumed by a logger.
    """

    global _CONFIG, _CONFIG_READ
    with _STATE_LOCK:
        if _CONFIG_READ:
            raise RuntimeError("configuration is already in use; set_config() must run before the first Logger is created")
        _CONFIG = MappingProxyType(dict(config))


def current_config() -> Mapping[str, str]:
    """Return the active mapping, loading it from the environment if unset."""

    global _CONFIG, _CONFIG_READ
    with _STATE_LOCK:
        if _CONFIG is None:
            _CONFIG = load_config()
            logger.debug("configuration loaded from environment: %s", dict(_CONFIG))
        _CONFIG_READ = True
        return _CONFIG


def set_default_sink(sink: SinkPort) -> None:
    global _SINK
    with _STATE_LOCK:
        _SINK = sink


def current_default_sink() -> SinkPort:
    """Return the process sink, creating the Rich console sink on first use."""

    global _SINK
    with _STATE_LOCK:
        if _SINK is None:
            _SINK = RichConsoleSink()
        return _SINK


def reset_default_sink() -> None:
    global _SINK
    with _STATE_LOCK:
        _SINK = None


def set_default_formatter(formatter: DefaultFormatterPort) -> None:
    global _FORMATTER
    with _STATE_LOCK:
        _FORMATTER = formatter


def current_default_formatter() -> DefaultFormatterPort:
    with _STATE_LOCK:
        return _FORMATTER


def reset_default_formatter() -> None:
    global _FORMATTER
    with _STATE_LOCK:
        _FORMATTER = format_message


def reset_state() -> None:
    """Forget the configuration, sink and formatter."""

    global _CONFIG, _CONFIG_READ
    with _STATE_LOCK:
        _CONFIG = None
        _CONFIG_READ = False
    reset_default_sink()
    reset_default_formatter()


__all__ = [
    "current_config",
    "current_default_formatter",
    "current_default_sink",
    "reset_default_formatter",
    "reset_default_sink",
    "reset_state",
    "set_config",
    "set_default_formatter",
    "set_default_sink",
]
