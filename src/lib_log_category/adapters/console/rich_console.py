"""Rich-powered console sink used as the initial process-wide sink.

Purpose
-------
Print formatted log lines the way a trace facility would: optionally
prefixed with ``file:line`` taken from the call site.

Contents
--------
* :data:`_STYLE_MAP` - default severity-to-style mapping.
* :class:`RichConsoleSink` - callable sink satisfying :class:`SinkPort`.

System Role
-----------
Installed by :mod:`lib_log_category.runtime` until the host swaps in its own
sink. Markup and highlighting are disabled so messages print verbatim.
"""

from __future__ import annotations

from typing import Mapping

from rich.console import Console

from lib_log_category.application.ports.sink import SinkPort
from lib_log_category.domain.call_site import CallSite
from lib_log_category.domain.severity import Severity


#: Default Rich styles keyed by the severity tag found in a formatted line.
_STYLE_MAP: Mapping[Severity, str] = {
    Severity.ERROR: "red",
    Severity.WARN: "yellow",
    Severity.INFO: "cyan",
    Severity.VERBOSE: "dim",
}


class RichConsoleSink(SinkPort):
    """Write formatted lines to a Rich console."""

    def __init__(
        self,
        *,
        console: Console | None = None,
        stderr: bool = False,
        no_color: bool = False,
        styles: Mapping[Severity | str, str] | None = None,
    ) -> None:
        if console is not None:
            self._console = console
        else:
            self._console = Console(stderr=stderr, no_color=no_color)
        self._no_color = no_color
        self._style_map = dict(_STYLE_MAP)
        if styles:
            for key, value in styles.items():
                self._style_map[Severity.coerce(key)] = value

    @property
    def console(self) -> Console:
        return self._console

    def __call__(self, message: str, call_site: CallSite | None = None) -> None:
        """Print ``message``.

        Examples
        --------
        >>> from io import StringIO
        >>> console = Console(file=StringIO(), record=True, width=120)
        >>> sink = RichConsoleSink(console=console)
        >>> sink("Special[WARN]: x", CallSite(file="/src/game.py", line=7))
        >>> console.export_text().strip()
        'game.py:7: Special[WARN]: x'
        """

        prefix = call_site.short() if call_site is not None else ""
        line = f"{prefix}: {message}" if prefix else message
        style = "" if self._no_color else self._style_for(message)
        self._console.print(line, style=style, markup=False, highlight=False, soft_wrap=True)

    def _style_for(self, message: str) -> str:
        """Pick a style from the severity tag of a default-formatted line.

        Best effort: the sink only sees text, so a category named like a
        severity and logged without one (``"ERROR: x"``) is styled as that
        severity.
        """

        head = message.split(": ", 1)[0]
        for severity, style in self._style_map.items():
            if head == severity.name or head.endswith(f"[{severity.name}]"):
                return style
        return ""


__all__ = ["RichConsoleSink"]
