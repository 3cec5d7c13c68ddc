"""Mutable set of enabled severities owned by a single logger.

Purpose
-------
Track which severities are active for one purpose (logging or throwing).
Supports explicit membership edits, threshold assignment and parsing of the
textual form used in configuration values.

Contents
--------
* :class:`LevelSet` – order-insensitive collection of loggable severities.

System Role
-----------
Each :class:`~lib_log_category.logger.Logger` owns two instances: one for the
levels that log and one for the levels that throw. Instances are never shared
between loggers.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Set

from .severity import LOGGABLE_SEVERITIES, Severity


class LevelSet:
    """Set of severities drawn from ``ERROR``, ``WARN``, ``INFO`` and ``VERBOSE``.

    ``NONE`` is never a member: adding it is a no-op.

    Examples
    --------
    >>> levels = LevelSet.from_threshold(Severity.WARN)
    >>> str(levels)
    '[ERROR,WARN]'
    >>> Severity.INFO in levels
    False
    """

    __slots__ = ("_members",)

    def __init__(self, levels: Iterable[Severity] = ()) -> None:
        self._members: set[Severity] = set()
        for level in levels:
            self.add(level)

    @classmethod
    def of(cls, *levels: Severity) -> "LevelSet":
        """Return a set containing exactly ``levels``."""

        return cls(levels)

    @classmethod
    def from_threshold(cls, level: Severity) -> "LevelSet":
        """Return every severity at least as important as ``level``."""

        result = cls()
        result.set_threshold(level)
        return result

    @classmethod
    def parse(cls, text: str) -> "LevelSet":
        """Parse a configuration value into a level set.

        ``"NONE"`` yields the empty set. A bracketed or comma separated list
        yields exactly the listed severities. Any other value is parsed as a
        single severity and expanded as a threshold.

        Examples
        --------
        >>> str(LevelSet.parse("WARN"))
        '[ERROR,WARN]'
        >>> str(LevelSet.parse("[info,error]"))
        '[ERROR,INFO]'
        >>> LevelSet.parse("NONE").is_empty()
        True
        """

        raw = text.strip()
        if raw == "NONE":
            return cls()
        if (raw.startswith("[") and raw.endswith("]")) or "," in raw:
            body = raw[1:-1] if raw.startswith("[") and raw.endswith("]") else raw
            result = cls()
            for token in body.split(","):
                if not token.strip():
                    continue
                result.add(Severity.parse(token))
            return result
        return cls.from_threshold(Severity.parse(raw))

    def contains(self, level: Severity) -> bool:
        return level in self._members

    def add(self, level: Severity) -> None:
        if level is Severity.NONE:
            return
        self._members.add(level)

    def remove(self, level: Severity) -> None:
        self._members.discard(level)

    def set_enabled(self, level: Severity, enabled: bool) -> bool:
        """Add or remove ``level`` and return ``enabled`` unchanged."""

        if enabled:
            self.add(level)
        else:
            self.remove(level)
        return enabled

    def set_threshold(self, level: Severity) -> None:
        """Replace the contents with every severity whose rank is ``<= level.rank``."""

        self._members = {candidate for candidate in LOGGABLE_SEVERITIES if candidate.rank <= level.rank}

    def clear(self) -> None:
        self._members.clear()

    def is_empty(self) -> bool:
        return not self._members

    def copy(self) -> "LevelSet":
        return LevelSet(self._members)

    def __contains__(self, level: object) -> bool:
        return level in self._members

    def __iter__(self) -> Iterator[Severity]:
        """Iterate members from most to least important."""
        return iter(sorted(self._members))

    def __len__(self) -> int:
        return len(self._members)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, LevelSet):
            return self._members == other._members
        if isinstance(other, Set):
            return self._members == set(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        if not self._members:
            return "NONE"
        return "[" + ",".join(level.name for level in self) + "]"

    def __repr__(self) -> str:
        return f"LevelSet({', '.join(level.name for level in self)})"


__all__ = ["LevelSet"]
