"""Domain value objects used by the category logger."""

from __future__ import annotations

from .call_site import CallSite
from .errors import InvalidSeverity, LoggerDestroyedError, ThrowThresholdError
from .level_set import LevelSet
from .severity import LOGGABLE_SEVERITIES, Severity

__all__ = [
    "CallSite",
    "InvalidSeverity",
    "LOGGABLE_SEVERITIES",
    "LevelSet",
    "LoggerDestroyedError",
    "Severity",
    "ThrowThresholdError",
]
