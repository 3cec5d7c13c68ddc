"""Category logger with independent log and throw level sets.

Purpose
-------
Provide the object host code logs through. A :class:`Logger` carries an
optional category name, the set of severities that log, the set of
severities that throw, and swappable formatter and sink slots. Each logger
exposes one :class:`LoggerLevel` handle per loggable severity
(``logger.error``, ``logger.warn``, ``logger.info``, ``logger.verbose``).

Dispatch
--------
``LoggerLevel`` calls go through :meth:`Logger.log_if`:

1. severity in the throw set -> raise :class:`ThrowThresholdError` carrying
   the formatted line; nothing is logged.
2. severity in the log set -> format and hand the line to the sink.
3. otherwise -> no-op.

Direct calls (``logger("msg")`` / :meth:`Logger.log`) log with severity
``NONE`` whenever the log set is non-empty and never throw.

Thread safety
-------------
Not thread-safe. Loggers shared between threads need external
synchronisation around level changes.
"""

from __future__ import annotations

from typing import Mapping, NoReturn

from lib_log_category.application.ports.sink import FormatterPort, SinkPort
from lib_log_category.application.use_cases.resolve_levels import FlagKind, resolve_levels
from lib_log_category.domain.call_site import CallSite
from lib_log_category.domain.errors import LoggerDestroyedError, ThrowThresholdError
from lib_log_category.domain.level_set import LevelSet
from lib_log_category.domain.severity import LOGGABLE_SEVERITIES, Severity
from lib_log_category.runtime._state import current_config, current_default_formatter, current_default_sink

SeverityLike = Severity | int | str


class LoggerLevel:
    """Handle bound to one ``(Logger, Severity)`` pair.

    ``enabled`` and ``throws`` are views onto the owner's level sets; the
    handle stores nothing else. After :meth:`destroy` every operation raises
    :class:`LoggerDestroyedError`.
    """

    __slots__ = ("_owner", "_severity")

    def __init__(self, owner: "Logger", severity: Severity) -> None:
        self._owner: Logger | None = owner
        self._severity = severity

    @property
    def severity(self) -> Severity:
        return self._severity

    @property
    def owner(self) -> "Logger":
        if self._owner is None:
            raise LoggerDestroyedError(f"{self._severity.name} level handle used after its logger was destroyed")
        return self._owner

    def log(self, message: str, call_site: CallSite | None = None) -> None:
        """Log or throw ``message`` according to the owner's level sets."""

        self.owner.log_if(self._severity, message, call_site)

    def __call__(self, message: str, call_site: CallSite | None = None) -> None:
        self.log(message, call_site)

    @property
    def enabled(self) -> bool:
        return self.owner._live_log_levels().contains(self._severity)

    @enabled.setter
    def enabled(self, value: bool) -> None:
        self.owner._live_log_levels().set_enabled(self._severity, value)

    @property
    def throws(self) -> bool:
        return self.owner._live_throw_levels().contains(self._severity)

    @throws.setter
    def throws(self, value: bool) -> None:
        self.owner._live_throw_levels().set_enabled(self._severity, value)

    def destroy(self) -> None:
        self._owner = None

    def __repr__(self) -> str:
        if self._owner is None:
            return f"<LoggerLevel {self._severity.name} (destroyed)>"
        return f"<LoggerLevel {self._severity.name} of {self._owner.category!r}>"


class Logger:
    """Named logger with independent log and throw thresholds.

    Parameters
    ----------
    category:
        Optional name used as message prefix and for per-category
        configuration lookup (``"Combat[2]"`` reads ``combat.log``).
    priority:
        Least important severity that logs unless configuration overrides it.
    throw_priority:
        Least important severity that throws unless configuration overrides
        it.
    config:
        Configuration mapping; defaults to the process-wide mapping.
    formatter, sink:
        Initial slot values. ``None`` delegates to the process-wide default
        formatter and sink at call time.

    Raises
    ------
    InvalidSeverity
        When a priority argument or a configuration value cannot be parsed.

    Examples
    --------
    >>> from lib_log_category.adapters.memory import MemorySink
    >>> sink = MemorySink()
    >>> log = Logger("Special", config={}, sink=sink)
    >>> log.warn("x")
    >>> log.info("x")
    >>> sink.messages
    ['Special[WARN]: x']
    """

    def __init__(
        self,
        category: str | None = None,
        priority: SeverityLike = Severity.WARN,
        throw_priority: SeverityLike = Severity.ERROR,
        *,
        config: Mapping[str, str] | None = None,
        formatter: FormatterPort | None = None,
        sink: SinkPort | None = None,
    ) -> None:
        settings = current_config() if config is None else config
        self._category = category
        self._log_levels: LevelSet | None = resolve_levels(
            settings,
            FlagKind.LOG,
            category,
            LevelSet.from_threshold(Severity.coerce(priority)),
        )
        self._throw_levels: LevelSet | None = resolve_levels(
            settings,
            FlagKind.THROW,
            category,
            LevelSet.from_threshold(Severity.coerce(throw_priority)),
        )
        self._formatter = formatter
        self._sink = sink
        self._levels: dict[Severity, LoggerLevel] = {severity: LoggerLevel(self, severity) for severity in LOGGABLE_SEVERITIES}
        self._destroyed = False

    @property
    def category(self) -> str | None:
        return self._category

    @property
    def destroyed(self) -> bool:
        return self._destroyed

    @property
    def log_levels(self) -> LevelSet:
        """Return a snapshot of the severities that log."""

        return self._live_log_levels().copy()

    @property
    def throw_levels(self) -> LevelSet:
        """Return a snapshot of the severities that throw."""

        return self._live_throw_levels().copy()

    @property
    def error(self) -> LoggerLevel:
        return self.level(Severity.ERROR)

    @property
    def warn(self) -> LoggerLevel:
        return self.level(Severity.WARN)

    @property
    def info(self) -> LoggerLevel:
        return self.level(Severity.INFO)

    @property
    def verbose(self) -> LoggerLevel:
        return self.level(Severity.VERBOSE)

    @property
    def levels(self) -> tuple[LoggerLevel, ...]:
        self._require_live()
        return tuple(self._levels[severity] for severity in LOGGABLE_SEVERITIES)

    def level(self, severity: SeverityLike) -> LoggerLevel:
        """Return the handle for ``severity``; ``NONE`` has no handle."""

        self._require_live()
        resolved = Severity.coerce(severity)
        try:
            return self._levels[resolved]
        except KeyError:
            raise ValueError("Severity.NONE has no level handle; call the logger directly") from None

    @property
    def formatter(self) -> FormatterPort:
        self._require_live()
        return self._formatter if self._formatter is not None else self._format_with_default

    @formatter.setter
    def formatter(self, formatter: FormatterPort | None) -> None:
        self._require_live()
        self._formatter = formatter

    @property
    def sink(self) -> SinkPort:
        self._require_live()
        return self._sink if self._sink is not None else self._send_to_default

    @sink.setter
    def sink(self, sink: SinkPort | None) -> None:
        self._require_live()
        self._sink = sink

    def log(self, message: str, call_site: CallSite | None = None) -> None:
        """Log ``message`` without a severity when anything is enabled."""

        if self._live_log_levels().is_empty():
            return
        self.sink(self.format(Severity.NONE, message, call_site), call_site)

    def __call__(self, message: str, call_site: CallSite | None = None) -> None:
        self.log(message, call_site)

    def log_if(self, level: SeverityLike, message: str, call_site: CallSite | None = None) -> None:
        """Throw, log or drop ``message`` depending on ``level``."""

        severity = Severity.coerce(level)
        if self._live_throw_levels().contains(severity):
            self.fail(severity, message, call_site)
        if self._live_log_levels().contains(severity):
            self.sink(self.format(severity, message, call_site), call_site)

    def fail(self, level: SeverityLike, message: str, call_site: CallSite | None = None) -> NoReturn:
        """Raise :class:`ThrowThresholdError` with the formatted ``message``."""

        severity = Severity.coerce(level)
        raise ThrowThresholdError(self.format(severity, message, call_site), severity=severity, call_site=call_site)

    def format(self, severity: Severity, message: str, call_site: CallSite | None = None) -> str:
        return self.formatter(severity, message, call_site)

    def set_priority(self, level: SeverityLike) -> None:
        """Log every severity at least as important as ``level``."""

        self._live_log_levels().set_threshold(Severity.coerce(level))

    def set_throw_priority(self, level: SeverityLike) -> None:
        """Throw on every severity at least as important as ``level``."""

        self._live_throw_levels().set_threshold(Severity.coerce(level))

    def destroy(self) -> None:
        """Invalidate the level handles and release the level sets."""

        if self._destroyed:
            return
        for handle in self._levels.values():
            handle.destroy()
        self._levels = {}
        self._log_levels = None
        self._throw_levels = None
        self._formatter = None
        self._sink = None
        self._destroyed = True

    def _format_with_default(self, severity: Severity, message: str, call_site: CallSite | None = None) -> str:
        return current_default_formatter()(self._category, severity, message, call_site)

    def _send_to_default(self, message: str, call_site: CallSite | None = None) -> None:
        current_default_sink()(message, call_site)

    def _require_live(self) -> None:
        if self._destroyed:
            raise LoggerDestroyedError(f"logger {self._category!r} used after destroy()")

    def _live_log_levels(self) -> LevelSet:
        levels = self._log_levels
        if levels is None:
            raise LoggerDestroyedError(f"logger {self._category!r} used after destroy()")
        return levels

    def _live_throw_levels(self) -> LevelSet:
        levels = self._throw_levels
        if levels is None:
            raise LoggerDestroyedError(f"logger {self._category!r} used after destroy()")
        return levels

    def __repr__(self) -> str:
        if self._destroyed:
            return f"Logger({self._category!r}, destroyed)"
        return f"Logger({self._category!r}, log={self._log_levels}, throw={self._throw_levels})"


__all__ = ["Logger", "LoggerLevel"]
