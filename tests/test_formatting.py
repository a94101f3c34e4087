import pytest

from semantic_apps.formatting import format_grouped, increment_label, parse_grouped, separator_pattern


def test_format_groups_from_the_right() -> None:
    assert format_grouped(1234567, " ") == "1 234 567"
    assert format_grouped(1234567, ",") == "1,234,567"
    assert format_grouped(100000, ".") == "100.000"
    assert format_grouped(999, ",") == "999"
    assert format_grouped(0) == "0"


def test_format_with_empty_separator() -> None:
    assert format_grouped(1234567, "") == "1234567"


@pytest.mark.parametrize("separator", [" ", ",", ".", "'", "_", "|", "*", "\u00a0", " - "])
@pytest.mark.parametrize("value", [0, 7, 999, 1000, 1234567, 10**12])
def test_round_trip(value: int, separator: str) -> None:
    assert parse_grouped(format_grouped(value, separator), separator) == value


@pytest.mark.xfail(strict=True, reason="digit separators are not special-cased")
def test_round_trip_with_digit_separator() -> None:
    assert parse_grouped(format_grouped(1000, "0"), "0") == 1000


def test_space_separator_matches_any_whitespace() -> None:
    assert separator_pattern(" ").sub("", "1\u00a0234\t567") == "1234567"


def test_regex_metacharacters_are_matched_literally() -> None:
    assert parse_grouped("1.234.567", ".") == 1234567
    assert parse_grouped("1*234", "*") == 1234


def test_parse_behaves_like_parse_int() -> None:
    assert parse_grouped("  42") == 42
    assert parse_grouped("12abc") == 12
    assert parse_grouped("-5") == -5
    assert parse_grouped("abc") is None
    assert parse_grouped("") is None


def test_increment_from_zero() -> None:
    assert increment_label("0", " ") == "1"


def test_increment_adds_a_group() -> None:
    assert increment_label("999", ",") == "1,000"
    assert increment_label("999 999", " ") == "1 000 000"


def test_increment_corrupted_label_shows_nan() -> None:
    assert increment_label("many", " ") == "NaN"


@pytest.mark.parametrize("text", ["٣", "١٢٣", "１２"])
def test_non_ascii_digits_are_not_numbers(text: str) -> None:
    assert parse_grouped(text) is None
    assert increment_label(text) == "NaN"
