"""Error taxonomy shared by every layer of the category logger.

Purpose
-------
Give callers precise exception types for the three failure modes of the
facade: malformed severity tokens, the intentional "log becomes an error"
path, and use of a logger after it was destroyed.

Contents
--------
* :class:`InvalidSeverity` – raised while parsing severities or level sets.
* :class:`ThrowThresholdError` – raised when a severity is configured to throw.
* :class:`LoggerDestroyedError` – raised on use-after-destroy.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover - typing only
    from .call_site import CallSite
    from .severity import Severity


class InvalidSeverity(ValueError):
    """Token that matches none of the severity names or numeric codes."""

    def __init__(self, token: str) -> None:
        super().__init__(f"Unknown severity: {token!r}")
        self.token = token


class ThrowThresholdError(RuntimeError):
    """Log call promoted to an error because its severity is in the throw set.

    The exception message is the fully formatted log line, so catching code
    sees exactly what would have reached the sink.
    """

    def __init__(
        self,
        message: str,
        *,
        severity: "Severity | None" = None,
        call_site: "CallSite | None" = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.severity = severity
        self.call_site = call_site


class LoggerDestroyedError(ReferenceError):
    """Operation attempted on a destroyed logger or one of its level handles."""


__all__ = ["InvalidSeverity", "LoggerDestroyedError", "ThrowThresholdError"]
