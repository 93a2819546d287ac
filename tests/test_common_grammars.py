"""Tests for ready-made grammars and the canonical usage scenarios."""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from parselet.syntax.maybe import ABSENT
from parselet.syntax.parser import (
    Forward,
    any_char,
    char,
    choice,
    digit,
    invoke,
    keyword,
    lexeme,
    literal,
    parenthesized,
    separated_by1,
    signed_integer,
    skip_left,
    skip_whitespace,
    unsigned_integer,
    whitespace,
    word,
)
from tests.strategies import digit_strings

# ============================================================================
# SCENARIOS
# ============================================================================


class TestScenarios:
    """End-to-end usage of the engine on small inputs."""

    def test_unsigned_integer_prefix(self) -> None:
        result = invoke(unsigned_integer(), "666a").unwrap()

        assert result.value == 666
        assert result.cursor.pos == 3

    def test_unsigned_integer_requires_digit_first(self) -> None:
        assert invoke(unsigned_integer(), "a666") is ABSENT

    def test_literal_yes(self) -> None:
        result = invoke(literal(any_char(), "yes", token=True), "yes").unwrap()

        assert result.value is True
        assert result.cursor.pos == 3

    def test_literal_yea_fails(self) -> None:
        assert invoke(literal(any_char(), "yes", token=True), "yea") is ABSENT

    def test_signed_integer(self) -> None:
        result = invoke(signed_integer(), "-666a").unwrap()

        assert result.value == -666
        assert result.cursor.pos == 4

    def test_nested_parentheses(self) -> None:
        expr: Forward[int] = Forward("expr")
        expr.define(choice(parenthesized(expr), signed_integer()))

        result = invoke(expr, "((42))").unwrap()
        assert result.value == 42
        assert result.cursor.is_eof
        assert invoke(expr, "((42)") is ABSENT


# ============================================================================
# DIGITS & INTEGERS
# ============================================================================


class TestDigits:
    """digit(), unsigned_integer() and signed_integer()."""

    @pytest.mark.parametrize(("source", "value"), [("0", 0), ("7", 7), ("9x", 9)])
    def test_digit(self, source: str, value: int) -> None:
        assert invoke(digit(), source).unwrap().value == value

    @pytest.mark.parametrize("source", ["a", "", "²", "٣"])
    def test_digit_rejects_non_ascii_digits(self, source: str) -> None:
        assert invoke(digit(), source) is ABSENT

    def test_leading_zeros(self) -> None:
        assert invoke(unsigned_integer(), "007").unwrap().value == 7

    def test_signed_positive(self) -> None:
        assert invoke(signed_integer(), "12").unwrap().value == 12

    def test_lone_minus_fails(self) -> None:
        assert invoke(signed_integer(), "-x") is ABSENT

    def test_minus_zero(self) -> None:
        assert invoke(signed_integer(), "-0").unwrap().value == 0

    @given(digit_strings)
    def test_unsigned_matches_int(self, digits: str) -> None:
        """PROPERTY: unsigned_integer agrees with int() on ASCII digit strings."""
        result = invoke(unsigned_integer(), digits + "x").unwrap()

        assert result.value == int(digits)
        assert result.cursor.pos == len(digits)

    @given(st.integers(min_value=-(10**12), max_value=10**12))
    def test_signed_matches_str(self, number: int) -> None:
        """PROPERTY: signed_integer inverts str() for ints."""
        assert invoke(signed_integer(), str(number)).unwrap().value == number


# ============================================================================
# WORDS, KEYWORDS, WHITESPACE
# ============================================================================


class TestWordsAndKeywords:
    """word() and keyword()."""

    def test_word(self) -> None:
        result = invoke(word(), "hello world").unwrap()

        assert result.value == "hello"
        assert result.cursor.pos == 5

    def test_word_never_fails(self) -> None:
        assert invoke(word(), "123").unwrap().value == ""

    def test_keyword(self) -> None:
        assert invoke(keyword("let"), "let x").unwrap().value == "let"
        assert invoke(keyword("let"), "lex") is ABSENT
        assert keyword("let").name == "keyword('let')"


class TestWhitespace:
    """ASCII whitespace helpers."""

    def test_whitespace(self) -> None:
        assert invoke(whitespace(), "\tx").unwrap().value == "\t"
        assert invoke(whitespace(), "x") is ABSENT

    def test_non_breaking_space_is_not_whitespace(self) -> None:
        assert invoke(whitespace(), "\u00a0") is ABSENT

    def test_skip_whitespace(self) -> None:
        assert invoke(skip_whitespace(), " \n\r\t x").unwrap().cursor.pos == 5

    def test_lexeme(self) -> None:
        result = invoke(lexeme(unsigned_integer()), "12   +").unwrap()

        assert result.value == 12
        assert result.cursor.pos == 5

    def test_spaced_list(self) -> None:
        """Lexemes compose into a whitespace-tolerant list grammar."""
        items = separated_by1(lexeme(signed_integer()), lexeme(char(",")))
        grammar = skip_left(skip_whitespace(), items)

        assert invoke(grammar, "  1 , -2,3 ").unwrap().value == [1, -2, 3]
