"""Tests for token normalization."""

import pytest

from awlctl.domain.tokens import (
    KeywordToken,
    NullToken,
    NumberToken,
    normalize_token,
    parse_number,
)


class TestNormalizeToken:
    @pytest.mark.parametrize("raw", [None, "null", "", "   "])
    def test_null_forms(self, raw: object) -> None:
        assert normalize_token(raw) == NullToken()

    def test_int(self) -> None:
        assert normalize_token(120) == NumberToken(120.0)

    def test_float(self) -> None:
        assert normalize_token(12.5) == NumberToken(12.5)

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [("120", 120.0), ("-4", -4.0), (" 7 ", 7.0), ("1e3", 1000.0), ("0.5", 0.5)],
    )
    def test_numeric_strings(self, raw: str, expected: float) -> None:
        assert normalize_token(raw) == NumberToken(expected)

    @pytest.mark.parametrize("raw", ["center", "right", "50%", "huge", "NULL", "nan", "inf"])
    def test_everything_else_is_a_keyword(self, raw: str) -> None:
        assert normalize_token(raw) == KeywordToken(raw)

    def test_bool_is_not_a_number(self) -> None:
        assert normalize_token(True) == KeywordToken("True")

    def test_never_raises_on_odd_input(self) -> None:
        assert isinstance(normalize_token(object()), KeywordToken)


class TestParseNumber:
    def test_plain(self) -> None:
        assert parse_number("42") == 42.0

    def test_percentage_is_not_a_number(self) -> None:
        assert parse_number("42%") is None

    def test_rejects_non_finite(self) -> None:
        assert parse_number("nan") is None
        assert parse_number("-inf") is None

    @pytest.mark.parametrize("text", ["1_000", "0x10", "1e400", "12px", "1 000"])
    def test_rejects_non_decimal_literals(self, text: str) -> None:
        assert parse_number(text) is None

    @pytest.mark.parametrize(("text", "expected"), [(".5", 0.5), ("+3", 3.0), ("2.", 2.0)])
    def test_decimal_spellings(self, text: str, expected: float) -> None:
        assert parse_number(text) == expected

    def test_digit_separator_is_a_keyword(self) -> None:
        assert normalize_token("1_000") == KeywordToken("1_000")

    def test_huge_int_becomes_infinite_number(self) -> None:
        assert normalize_token(10**400) == NumberToken(float("inf"))
