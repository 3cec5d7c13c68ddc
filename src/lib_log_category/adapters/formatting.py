"""Default formatter turning category, severity and message into one line.

Why
---
Loggers, the default logger and the CLI all render messages with the same
prefix rules, so the rules live in one function that also serves as the
initial process-wide formatter.

Contents
--------
* :func:`format_message` – ``"{category}[{SEVERITY}]: {message}"`` family.
"""

from __future__ import annotations

from lib_log_category.domain.call_site import CallSite
from lib_log_category.domain.severity import Severity


def format_message(
    category: str | None,
    severity: Severity,
    message: str,
    call_site: CallSite | None = None,
) -> str:
    """Render ``message`` with the category and severity prefix.

    The call site is accepted for signature compatibility and left to the
    sink.

    Examples
    --------
    >>> format_message("Special", Severity.WARN, "x")
    'Special[WARN]: x'
    >>> format_message(None, Severity.INFO, "x")
    'INFO: x'
    >>> format_message("Special", Severity.NONE, "x")
    'Special: x'
    >>> format_message(None, Severity.NONE, "x")
    'x'
    """

    has_severity = severity is not Severity.NONE
    if category is not None and has_severity:
        return f"{category}[{severity.name}]: {message}"
    if category is None and has_severity:
        return f"{severity.name}: {message}"
    if category is not None:
        return f"{category}: {message}"
    return message


__all__ = ["format_message"]
