"""Whitespace handling.

ASCII whitespace only: space, tab, line feed, carriage return, form feed and
vertical tab. Unicode spaces (e.g. U+00A0) are ordinary characters here.
"""

from parselet.syntax.parser.combinators import ParserLike, skip_right, skip_while
from parselet.syntax.parser.core import Parser
from parselet.syntax.parser.primitives import one_of

__all__ = ["ASCII_WHITESPACE", "lexeme", "skip_whitespace", "whitespace"]

ASCII_WHITESPACE: frozenset[str] = frozenset(" \t\n\r\f\v")

_WHITESPACE: Parser[str] = one_of(ASCII_WHITESPACE).named("whitespace")
_SKIP_WHITESPACE: Parser[None] = skip_while(_WHITESPACE).named("skip_whitespace")


def whitespace() -> Parser[str]:
    """Match one ASCII whitespace character."""
    return _WHITESPACE


def skip_whitespace() -> Parser[None]:
    """Skip zero or more ASCII whitespace characters. Never fails."""
    return _SKIP_WHITESPACE


def lexeme[V](parser: ParserLike[V]) -> Parser[V]:
    """Run ``parser`` then skip trailing whitespace, keeping its value."""
    return skip_right(parser, _SKIP_WHITESPACE)
