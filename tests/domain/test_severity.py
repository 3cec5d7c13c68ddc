from __future__ import annotations

import pytest

from lib_log_category.domain.errors import InvalidSeverity
from lib_log_category.domain.severity import LOGGABLE_SEVERITIES, Severity


@pytest.mark.parametrize(
    "text, expected",
    [
        ("none", Severity.NONE),
        ("ERROR", Severity.ERROR),
        ("Warn", Severity.WARN),
        ("info", Severity.INFO),
        ("VERBOSE", Severity.VERBOSE),
        (" warn ", Severity.WARN),
    ],
)
def test_parse_accepts_case_insensitive_names(text: str, expected: Severity) -> None:
    assert Severity.parse(text) is expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("0", Severity.NONE),
        ("1", Severity.ERROR),
        ("2", Severity.WARN),
        ("3", Severity.INFO),
        ("4", Severity.VERBOSE),
    ],
)
def test_parse_accepts_numeric_codes(text: str, expected: Severity) -> None:
    assert Severity.parse(text) is expected


@pytest.mark.parametrize("text", ["bogus", "", "5", "-1", "warning", "1.0", "04", "00", "٣", "３"])
def test_parse_rejects_unknown_tokens(text: str) -> None:
    with pytest.raises(InvalidSeverity) as excinfo:
        Severity.parse(text)
    assert excinfo.value.token == text


def test_invalid_severity_is_a_value_error() -> None:
    with pytest.raises(ValueError, match="Unknown severity: 'bogus'"):
        Severity.parse("bogus")


def test_rank_matches_declared_order() -> None:
    assert [severity.rank for severity in Severity] == [0, 1, 2, 3, 4]


def test_ordering_is_total_by_rank() -> None:
    assert Severity.NONE < Severity.ERROR < Severity.WARN < Severity.INFO < Severity.VERBOSE
    assert Severity.VERBOSE >= Severity.INFO
    assert max(Severity) is Severity.VERBOSE
    assert sorted([Severity.INFO, Severity.ERROR, Severity.WARN]) == [Severity.ERROR, Severity.WARN, Severity.INFO]


def test_str_is_canonical_uppercase_name() -> None:
    assert str(Severity.WARN) == "WARN"
    assert f"{Severity.VERBOSE}" == "VERBOSE"


@pytest.mark.parametrize(
    "value, expected",
    [
        (Severity.INFO, Severity.INFO),
        (2, Severity.WARN),
        ("error", Severity.ERROR),
        ("4", Severity.VERBOSE),
    ],
)
def test_coerce_normalises_supported_inputs(value: object, expected: Severity) -> None:
    assert Severity.coerce(value) is expected  # type: ignore[arg-type]


@pytest.mark.parametrize("value", [7, True, "loud"])
def test_coerce_rejects_unsupported_inputs(value: object) -> None:
    with pytest.raises(InvalidSeverity):
        Severity.coerce(value)  # type: ignore[arg-type]


def test_loggable_severities_exclude_none() -> None:
    assert Severity.NONE not in LOGGABLE_SEVERITIES
    assert LOGGABLE_SEVERITIES == (Severity.ERROR, Severity.WARN, Severity.INFO, Severity.VERBOSE)
