"""Tests for the duration string scanner."""

import logging
import sys

import pytest

from timeduration import (
    DurationParseError,
    NumberFormatError,
    Scanner,
    Token,
    UnknownUnitError,
    parse,
)
from timeduration.util import DAY, HOUR, MINUTE, MONTH, UNITS, YEAR


@pytest.mark.parametrize(
    "source, expected",
    [
        ("0", 0),
        ("90", 90 * MINUTE),
        ("2h 30m 15s", 9015),
        ("1d 2h 3m 4s", 93784),
        ("1d2h3m4s", 93784),
        ("1mo 2d", 2592000),
        ("1y", YEAR),
        ("2days, 3hours and 10minutes", 2 * DAY + 3 * HOUR + 10 * MINUTE),
        ("45seconds", 45),
        ("3months", 3 * MONTH),
        ("", 0),
        ("no digits here", 0),
    ],
)
def test_parse_totals(source: str, expected: int) -> None:
    assert parse(source) == expected


def test_bare_number_counts_as_minutes():
    """A quantity without unit letters uses the minute multiplier."""
    assert parse("90") == 5400
    assert parse("2h30") == 2 * HOUR + 30 * MINUTE


def test_same_multiplier_accumulates():
    """Short and long literals for one unit share an accumulator entry."""
    assert Scanner("5m 10m").scan() == {60: 15}
    assert Scanner("5minutes 10m").scan() == {60: 15}
    assert Scanner("1h 5 2h").scan() == {3600: 3, 60: 5}


def test_separators_are_skipped():
    """Punctuation, signs and leading letters only separate tokens."""
    assert parse("abc5m") == 5 * MINUTE
    assert parse("-5m") == 5 * MINUTE
    assert parse("[1h]/(2m)") == HOUR + 2 * MINUTE
    # "1.5h" is a bare 1 followed by 5h
    assert parse("1.5h") == MINUTE + 5 * HOUR


def test_units_must_follow_digits_directly():
    """Whitespace between quantity and unit leaves the quantity bare."""
    assert parse("5 s") == 5 * MINUTE


def test_non_ascii_digits_are_separators():
    assert parse("５m") == 0
    assert parse("5é") == 5 * MINUTE


def test_units_are_case_sensitive():
    assert parse("5H") == 0
    assert parse("5Mo") == 0


def test_unknown_unit_contributes_nothing():
    assert parse("5xyz") == 0
    assert parse("5xyz 3m") == 3 * MINUTE


def test_unknown_unit_is_logged(caplog: pytest.LogCaptureFixture):
    """Permissive mode leaves a debug record for each skipped unit."""
    with caplog.at_level(logging.DEBUG, logger="timeduration.scanner"):
        parse("5xyz 3m")

    assert len(caplog.records) == 1
    assert "'xyz'" in caplog.records[0].getMessage()


def test_strict_mode_rejects_unknown_unit():
    with pytest.raises(UnknownUnitError, match="Unknown duration unit 'xyz'") as info:
        parse("3m 5xyz", mode="strict")

    assert info.value.unit == "xyz"
    assert info.value.position == 3
    assert info.value.source == "3m 5xyz"
    assert isinstance(info.value, DurationParseError)
    assert isinstance(info.value, ValueError)


def test_strict_mode_accepts_known_units_and_bare_numbers():
    assert parse("1d 2h 3m 4s", mode="strict") == 93784
    assert parse("90", mode="strict") == 5400


def test_invalid_mode_raises():
    with pytest.raises(ValueError, match="Invalid parse mode"):
        parse("5m", mode="lenient")  # type: ignore[arg-type]


@pytest.fixture
def int_digit_limit():
    """Pin the int string conversion limit to its smallest allowed value."""
    previous = sys.get_int_max_str_digits()
    sys.set_int_max_str_digits(640)
    yield 640
    sys.set_int_max_str_digits(previous)


@pytest.mark.parametrize("mode", ["permissive", "strict"])
def test_oversized_quantity_fails_whole_parse(mode, int_digit_limit):
    """A digit run beyond the int conversion limit raises in every mode."""
    source = "1h " + "9" * (int_digit_limit + 1) + "s"
    with pytest.raises(NumberFormatError) as info:
        parse(source, mode=mode)

    assert info.value.position == 3
    assert isinstance(info.value.__cause__, ValueError)


def test_large_quantities_do_not_overflow():
    assert parse("99999999999999999999999y") == 99999999999999999999999 * YEAR


def test_tokens_in_source_order():
    tokens = list(Scanner("2h 5xyz 7").tokens())

    assert tokens == [
        Token(quantity=2, unit="h", multiplier=HOUR, position=0),
        Token(quantity=5, unit="xyz", multiplier=None, position=3),
        Token(quantity=7, unit="", multiplier=MINUTE, position=8),
    ]


def test_custom_unit_table():
    units = {**UNITS, "w": 7 * DAY}

    assert Scanner("2w 1d", units).total() == 15 * DAY
    # The default table is untouched
    assert "w" not in UNITS


def test_unit_table_is_read_only():
    with pytest.raises(TypeError):
        UNITS["w"] = 7 * DAY  # type: ignore[index]
