"""Ready-made grammars for common lexical forms.

Digits, integers, words and parenthesized groups, built only from the
public primitives and combinators. ASCII classification throughout:
``str.isdigit()`` accepts characters such as "²" that ``int()`` rejects.
"""

import string

from parselet.syntax.maybe import Maybe
from parselet.syntax.parser.combinators import (
    ParserLike,
    between,
    bind,
    collect,
    fold_while1,
    optional_match,
    transform,
)
from parselet.syntax.parser.core import Parser
from parselet.syntax.parser.primitives import any_char, char, literal, one_of

__all__ = [
    "digit",
    "keyword",
    "parenthesized",
    "signed_integer",
    "unsigned_integer",
    "word",
]

# ASCII digits only - "0123456789", not Unicode digits like ² or ³.
_ASCII_DIGITS: str = string.digits

_ASCII_LETTERS: str = string.ascii_letters


def _digit_value(element: str) -> int:
    return ord(element) - ord("0")


def _shift_in(accumulator: int, value: int) -> int:
    return accumulator * 10 + value


def digit() -> Parser[int]:
    """Match one ASCII digit and yield its integer value."""
    return transform(one_of(_ASCII_DIGITS), _digit_value).named("digit")


def unsigned_integer() -> Parser[int]:
    """One or more ASCII digits folded into an int (``acc * 10 + digit``).

    Example:
        >>> invoke(unsigned_integer(), "666a").unwrap().value
        666
    """
    return fold_while1(digit(), 0, _shift_in).named("unsigned_integer")


def signed_integer() -> Parser[int]:
    """Optional ``-`` followed by an unsigned integer.

    The sign is parsed first and the digits parser is chosen from it with
    :func:`bind`.

    Example:
        >>> invoke(signed_integer(), "-666a").unwrap().value
        -666
    """
    digits = unsigned_integer()

    def _apply_sign(sign: Maybe[str]) -> Parser[int]:
        if sign:
            return transform(digits, lambda value: -value)
        return digits

    return bind(optional_match(char("-")), _apply_sign).named("signed_integer")


def word() -> Parser[str]:
    """Zero or more ASCII letters joined into a string. Never fails."""
    return transform(collect(one_of(_ASCII_LETTERS)), "".join).named("word")


def keyword(text: str) -> Parser[str]:
    """Match ``text`` exactly and yield it."""
    return literal(any_char(), text).named(f"keyword({text!r})")


def parenthesized[V](parser: ParserLike[V]) -> Parser[V]:
    """Match ``( parser )`` and keep the inner value."""
    return between(char("("), parser, char(")")).named("parenthesized")
