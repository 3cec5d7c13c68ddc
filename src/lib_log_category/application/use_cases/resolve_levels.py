"""Resolve a logger's starting level set from configuration.

Purpose
-------
Merge constructor defaults, a global override and a per-category override
into the level set a new logger starts with.

Contents
--------
* :class:`FlagKind` – which level set is being resolved.
* :func:`feature_id` – configuration prefix derived from a category.
* :func:`resolve_levels` – the precedence algorithm.

System Role
-----------
Called once per level set when a :class:`~lib_log_category.logger.Logger` is
constructed. Parsing failures surface as
:class:`~lib_log_category.domain.errors.InvalidSeverity` and abort the
construction.

Precedence
----------
1. ``"{feature}.{kind}"`` when the logger has a category.
2. ``"{kind}"`` for every logger.
3. The fallback supplied by the caller, returned as-is.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Mapping

from lib_log_category.domain.level_set import LevelSet

logger = logging.getLogger(__name__)


class FlagKind(str, Enum):
    """Purpose of a level set; the value is the configuration key suffix."""

    LOG = "log"
    THROW = "throw"

    def __str__(self) -> str:
        return self.value


def feature_id(category: str) -> str:
    """Return the lower-cased part of ``category`` before any ``[``.

    Examples
    --------
    >>> feature_id("Combat[player 2]")
    'combat'
    >>> feature_id("Network")
    'network'
    """

    return category.split("[", 1)[0].lower()


def resolve_levels(
    config: Mapping[str, str],
    flag_kind: FlagKind | str,
    category: str | None,
    fallback: LevelSet,
) -> LevelSet:
    """Return the effective level set for ``category`` and ``flag_kind``.

    Parameters
    ----------
    config:
        Flat key/value configuration mapping; never mutated.
    flag_kind:
        :class:`FlagKind` or its string value (``"log"``/``"throw"``).
    category:
        Logger category, ``None`` for the default logger.
    fallback:
        Level set derived from the constructor arguments.

    Examples
    --------
    >>> config = {"log": "ERROR", "combat.log": "VERBOSE"}
    >>> str(resolve_levels(config, "log", "Combat", LevelSet()))
    '[ERROR,WARN,INFO,VERBOSE]'
    >>> str(resolve_levels(config, "log", "Other", LevelSet()))
    '[ERROR]'
    """

    kind = FlagKind(flag_kind)
    if category is not None:
        key = f"{feature_id(category)}.{kind.value}"
        value = config.get(key)
        if value is not None:
            logger.debug("resolved %s levels for %r from %r=%r", kind.value, category, key, value)
            return LevelSet.parse(value)
    value = config.get(kind.value)
    if value is not None:
        logger.debug("resolved %s levels for %r from global %r=%r", kind.value, category, kind.value, value)
        return LevelSet.parse(value)
    return fallback


__all__ = ["FlagKind", "feature_id", "resolve_levels"]
