"""Configuration sources feeding the level resolver.

Purpose
-------
Build the flat, read-only ``key -> value`` mapping that
:func:`~lib_log_category.application.use_cases.resolve_levels.resolve_levels`
consults. Values come from environment variables, optional ``.env`` files and
``key=value`` config files.

Contents
--------
* :func:`load_config` – translate ``LOG_CATEGORY_*`` variables into keys.
* :func:`load_config_file` – read a ``key=value`` file via python-dotenv.
* :func:`merge_configs` – combine sources, later ones winning.
* ``.env`` helpers: :data:`DOTENV_ENV_VAR`, :func:`should_use_dotenv`,
  :func:`enable_dotenv`.

Environment mapping
-------------------
``LOG_CATEGORY_LOG=WARN``            -> ``log = WARN``
``LOG_CATEGORY_THROW=NONE``          -> ``throw = NONE``
``LOG_CATEGORY_COMBAT_LOG=verbose``  -> ``combat.log = verbose``
``LOG_CATEGORY_COMBAT_AI_THROW=[error,warn]`` -> ``combat_ai.throw = [error,warn]``
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from threading import Lock
from types import MappingProxyType
from typing import Mapping

from dotenv import dotenv_values, find_dotenv, load_dotenv

logger = logging.getLogger(__name__)

ENV_PREFIX = "LOG_CATEGORY_"
DOTENV_ENV_VAR = "LOG_CATEGORY_USE_DOTENV"
_FLAG_KINDS = ("log", "throw")
_TRUTHY = {"1", "true", "yes", "on"}

_DOTENV_LOCK = Lock()
_DOTENV_LOADED: Path | None = None
_DOTENV_ATTEMPTED = False


def load_config(environ: Mapping[str, str] | None = None, *, prefix: str = ENV_PREFIX) -> Mapping[str, str]:
    """Return the configuration mapping encoded in environment variables.

    Variables without ``prefix`` or whose last ``_`` segment is not ``LOG`` or
    ``THROW`` are ignored, as is :data:`DOTENV_ENV_VAR`.

    Examples
    --------
    >>> cfg = load_config({"LOG_CATEGORY_LOG": "WARN", "LOG_CATEGORY_COMBAT_LOG": "verbose", "HOME": "/"})
    >>> dict(cfg)
    {'log': 'WARN', 'combat.log': 'verbose'}
    """

    prefix = prefix.upper()
    source = os.environ if environ is None else environ
    result: dict[str, str] = {}
    for name, value in source.items():
        if not name.upper().startswith(prefix) or name.upper() == DOTENV_ENV_VAR:
            continue
        key = _env_name_to_key(name[len(prefix) :])
        if key is None:
            continue
        result[key] = value
    return MappingProxyType(result)


def _env_name_to_key(suffix: str) -> str | None:
    """Translate ``COMBAT_LOG`` into ``combat.log`` and ``LOG`` into ``log``."""

    feature, _, kind = suffix.lower().rpartition("_")
    if kind not in _FLAG_KINDS:
        return None
    return f"{feature}.{kind}" if feature else kind


def load_config_file(path: str | Path) -> Mapping[str, str]:
    """Read a ``key=value`` file such as ``combat.log=verbose``.

    Keys are lower-cased; entries without a value are skipped.
    """

    values = dotenv_values(Path(path))
    result = {key.strip().lower(): value for key, value in values.items() if value is not None}
    logger.debug("loaded %d configuration entries from %s", len(result), path)
    return MappingProxyType(result)


def merge_configs(*mappings: Mapping[str, str] | None) -> Mapping[str, str]:
    """Merge mappings left to right; later values override earlier ones.

    Examples
    --------
    >>> dict(merge_configs({"log": "WARN"}, None, {"log": "INFO", "throw": "NONE"}))
    {'log': 'INFO', 'throw': 'NONE'}
    """

    merged: dict[str, str] = {}
    for mapping in mappings:
        if mapping:
            merged.update(mapping)
    return MappingProxyType(merged)


def should_use_dotenv(*, explicit: bool | None = None, env_value: str | None = None) -> bool:
    """Decide whether ``.env`` loading is requested.

    An explicit CLI choice wins over the :data:`DOTENV_ENV_VAR` toggle.

    Examples
    --------
    >>> should_use_dotenv(explicit=None, env_value="1")
    True
    >>> should_use_dotenv(explicit=False, env_value="1")
    False
    """

    if explicit is not None:
        return explicit
    if env_value is None:
        return False
    return env_value.strip().lower() in _TRUTHY


def enable_dotenv(search_from: str | Path | None = None) -> Path | None:
    """Load the nearest ``.env`` without overriding existing variables.

    The search walks upwards from ``search_from`` (default: the working
    directory). The file is loaded at most once per process; later calls
    return the path found by the first call.
    """

    global _DOTENV_LOADED, _DOTENV_ATTEMPTED
    with _DOTENV_LOCK:
        if _DOTENV_ATTEMPTED:
            return _DOTENV_LOADED
        _DOTENV_ATTEMPTED = True
        if search_from is None:
            found = find_dotenv(usecwd=True)
        else:
            found = _find_upwards(Path(search_from))
        if not found:
            logger.debug("no .env file found")
            return None
        path = Path(found).resolve()
        load_dotenv(path, override=False)
        logger.debug("loaded environment from %s", path)
        _DOTENV_LOADED = path
        return path


def _find_upwards(start: Path) -> str:
    current = start.resolve()
    for candidate in (current, *current.parents):
        env_file = candidate / ".env"
        if env_file.is_file():
            return str(env_file)
    return ""


def _reset_dotenv_state_for_testing() -> None:
    global _DOTENV_LOADED, _DOTENV_ATTEMPTED
    with _DOTENV_LOCK:
        _DOTENV_LOADED = None
        _DOTENV_ATTEMPTED = False


__all__ = [
    "DOTENV_ENV_VAR",
    "ENV_PREFIX",
    "enable_dotenv",
    "load_config",
    "load_config_file",
    "merge_configs",
    "should_use_dotenv",
]
