"""Severity enumeration driving every filtering decision.

Purpose
-------
Provide the totally ordered importance scale used by level sets and loggers.
``ERROR`` is the most important loggable level; ``VERBOSE`` the least.
``NONE`` is a sentinel meaning "no severity", used for unconditional logging.

Contents
--------
* :class:`Severity` enum with parsing and coercion helpers.

System Role
-----------
Leaf of the domain layer. :class:`~lib_log_category.domain.level_set.LevelSet`
expands thresholds by comparing :attr:`Severity.rank` values.
"""

from __future__ import annotations

from enum import Enum
from functools import total_ordering

from .errors import InvalidSeverity


_NUMERIC_CODES = frozenset({"0", "1", "2", "3", "4"})


@total_ordering
class Severity(Enum):
    """Importance levels ordered ``NONE < ERROR < WARN < INFO < VERBOSE``."""

    NONE = 0
    ERROR = 1
    WARN = 2
    INFO = 3
    VERBOSE = 4

    @property
    def rank(self) -> int:
        """Return the ordinal used for threshold comparisons."""

        return self.value

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Severity):
            return NotImplemented
        return self.value < other.value

    def __str__(self) -> str:
        return self.name

    @classmethod
    def parse(cls, text: str) -> "Severity":
        """Parse a case-insensitive name or a numeric code ``"0"``..``"4"``.

        Examples
        --------
        >>> Severity.parse("warn") is Severity.WARN
        True
        >>> Severity.parse("3") is Severity.INFO
        True
        """

        token = text.strip()
        if token in _NUMERIC_CODES:
            return cls(int(token))
        try:
            return cls[token.upper()]
        except KeyError as exc:
            raise InvalidSeverity(text) from exc

    @classmethod
    def coerce(cls, value: "Severity | int | str") -> "Severity":
        """Normalise a severity, rank or textual name into :class:`Severity`."""

        if isinstance(value, Severity):
            return value
        if isinstance(value, bool):
            raise InvalidSeverity(str(value))
        if isinstance(value, int):
            try:
                return cls(value)
            except ValueError as exc:
                raise InvalidSeverity(str(value)) from exc
        return cls.parse(value)


LOGGABLE_SEVERITIES: tuple[Severity, ...] = (
    Severity.ERROR,
    Severity.WARN,
    Severity.INFO,
    Severity.VERBOSE,
)
"""Severities that may appear in a level set, most important first."""


__all__ = ["LOGGABLE_SEVERITIES", "Severity"]
