"""Process-wide runtime slots of the category logger.

Purpose
-------
Hold the state every logger shares: the configuration mapping, the default
sink, the default formatter and the default logger. Each slot is reached
through an explicit accessor so tests can substitute or reset it.

Contents
--------
* ``set_config`` / ``current_config`` – configuration mapping.
* ``set_default_sink`` / ``current_default_sink`` / ``reset_default_sink``.
* ``set_default_formatter`` / ``current_default_formatter`` /
  ``reset_default_formatter``.
* ``default_logger`` / ``reset_default_logger``.
* ``reset_runtime`` – return every slot to its pristine state.

System Role
-----------
Outer shell of the package. Hosts call :func:`set_config` during start-up,
before the first :class:`~lib_log_category.logger.Logger` exists; the
mapping is then frozen for the rest of the process.
"""

from __future__ import annotations

from ._default import default_logger, has_default_logger, reset_default_logger
from ._state import (
    current_config,
    current_default_formatter,
    current_default_sink,
    reset_default_formatter,
    reset_default_sink,
    reset_state,
    set_config,
    set_default_formatter,
    set_default_sink,
)


def reset_runtime() -> None:
    """Destroy the default logger and forget config, sink and formatter."""

    reset_default_logger()
    reset_state()


__all__ = [
    "current_config",
    "current_default_formatter",
    "current_default_sink",
    "default_logger",
    "has_default_logger",
    "reset_default_formatter",
    "reset_default_logger",
    "reset_default_sink",
    "reset_runtime",
    "set_config",
    "set_default_formatter",
    "set_default_sink",
]
