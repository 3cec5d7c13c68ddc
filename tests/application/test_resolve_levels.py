from __future__ import annotations

import logging

import pytest

from lib_log_category.application.use_cases.resolve_levels import FlagKind, feature_id, resolve_levels
from lib_log_category.domain.errors import InvalidSeverity
from lib_log_category.domain.level_set import LevelSet
from lib_log_category.domain.severity import Severity

ALL_LEVELS = {Severity.ERROR, Severity.WARN, Severity.INFO, Severity.VERBOSE}


@pytest.fixture
def config() -> dict[str, str]:
    return {"log": "ERROR", "combat.log": "VERBOSE"}


def test_category_override_wins_over_global(config: dict[str, str]) -> None:
    assert resolve_levels(config, "log", "Combat", LevelSet()) == ALL_LEVELS


def test_unknown_category_falls_back_to_global(config: dict[str, str]) -> None:
    assert resolve_levels(config, "log", "Other", LevelSet()) == {Severity.ERROR}


def test_default_logger_reads_global_key(config: dict[str, str]) -> None:
    assert resolve_levels(config, FlagKind.LOG, None, LevelSet()) == {Severity.ERROR}


def test_empty_config_returns_fallback_object() -> None:
    fallback = LevelSet.from_threshold(Severity.INFO)
    resolved = resolve_levels({}, "log", "Other", fallback)
    assert resolved is fallback
    assert resolved == {Severity.ERROR, Severity.WARN, Severity.INFO}


def test_category_suffix_in_brackets_is_ignored(config: dict[str, str]) -> None:
    assert resolve_levels(config, "log", "Combat[player 2]", LevelSet()) == ALL_LEVELS


def test_category_override_wins_even_when_it_disables_everything() -> None:
    config = {"log": "VERBOSE", "network.log": "NONE"}
    assert resolve_levels(config, "log", "Network", LevelSet()).is_empty()


def test_flag_kinds_resolve_independently() -> None:
    config = {"combat.log": "INFO", "throw": "NONE", "combat.throw": "[warn]"}
    fallback = LevelSet.from_threshold(Severity.ERROR)
    assert resolve_levels(config, FlagKind.LOG, "combat", fallback) == {Severity.ERROR, Severity.WARN, Severity.INFO}
    assert resolve_levels(config, FlagKind.THROW, "combat", fallback) == {Severity.WARN}
    assert resolve_levels(config, FlagKind.THROW, "other", fallback).is_empty()


def test_config_keys_are_case_sensitive_lowercase() -> None:
    config = {"Combat.log": "VERBOSE"}
    fallback = LevelSet.of(Severity.ERROR)
    assert resolve_levels(config, "log", "Combat", fallback) is fallback


def test_malformed_value_raises_invalid_severity() -> None:
    with pytest.raises(InvalidSeverity) as excinfo:
        resolve_levels({"combat.log": "loud"}, "log", "Combat", LevelSet())
    assert excinfo.value.token == "loud"


def test_unknown_flag_kind_is_rejected() -> None:
    with pytest.raises(ValueError):
        resolve_levels({}, "trace", None, LevelSet())


def test_resolution_is_logged_at_debug(caplog: pytest.LogCaptureFixture, config: dict[str, str]) -> None:
    with caplog.at_level(logging.DEBUG, logger="lib_log_category.application.use_cases.resolve_levels"):
        resolve_levels(config, "log", "Combat", LevelSet())
    assert "combat.log" in caplog.text


@pytest.mark.parametrize(
    "category, expected",
    [
        ("Combat", "combat"),
        ("Combat[2]", "combat"),
        ("UI.Menu[main][x]", "ui.menu"),
        ("[anonymous]", ""),
    ],
)
def test_feature_id(category: str, expected: str) -> None:
    assert feature_id(category) == expected


def test_flag_kind_string_value() -> None:
    assert str(FlagKind.THROW) == "throw"
    assert FlagKind("log") is FlagKind.LOG
