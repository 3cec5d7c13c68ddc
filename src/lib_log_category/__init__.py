"""Public package surface of the categorized logging facade.

``Logger`` and its per-severity handles are the main entry points; the
runtime accessors configure process-wide defaults, and the module-level
shortcuts (``log``, ``error``, ``warn``, ``info``, ``verbose``) forward to
the default logger.
"""

from __future__ import annotations

from .adapters import MemorySink, RichConsoleSink, format_message
from .application.use_cases import FlagKind, feature_id, resolve_levels
from .domain import (
    CallSite,
    InvalidSeverity,
    LevelSet,
    LoggerDestroyedError,
    Severity,
    ThrowThresholdError,
)
from .lib_log_category import error, info, log, summary_info, verbose, warn
from .logger import Logger, LoggerLevel
from .runtime import (
    current_config,
    current_default_formatter,
    current_default_sink,
    default_logger,
    reset_default_formatter,
    reset_default_logger,
    reset_default_sink,
    reset_runtime,
    set_config,
    set_default_formatter,
    set_default_sink,
)

__all__ = [
    "CallSite",
    "FlagKind",
    "InvalidSeverity",
    "LevelSet",
    "Logger",
    "LoggerDestroyedError",
    "LoggerLevel",
    "MemorySink",
    "RichConsoleSink",
    "Severity",
    "ThrowThresholdError",
    "current_config",
    "current_default_formatter",
    "current_default_sink",
    "default_logger",
    "error",
    "feature_id",
    "format_message",
    "info",
    "log",
    "reset_default_formatter",
    "reset_default_logger",
    "reset_default_sink",
    "reset_runtime",
    "resolve_levels",
    "set_config",
    "set_default_formatter",
    "set_default_sink",
    "summary_info",
    "verbose",
    "warn",
]
