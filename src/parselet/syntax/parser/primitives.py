"""Primitive matchers.

This module provides the leaf parsers every grammar is built from:
single-element consumption, predicate filtering and literal matching,
plus the trivial parsers ``pure``, ``fail`` and ``eof``.

Backtracking:
    ``satisfy`` rejects a matched element by returning ``ABSENT``; the
    element it read is not consumed as far as the caller can tell, since the
    caller keeps the cursor it passed in. ``literal`` builds on ``satisfy``
    and so never exposes a partial match either.
"""

from collections.abc import Callable, Iterable, Sequence
from functools import partial
from operator import eq
from typing import Any

from parselet.syntax.cursor import Cursor, ParseResult
from parselet.syntax.maybe import ABSENT, Maybe, Present
from parselet.syntax.parser.core import ParseFn, Parser, as_parser

__all__ = [
    "MATCHED",
    "any_char",
    "char",
    "eof",
    "fail",
    "literal",
    "none_of",
    "one_of",
    "pure",
    "satisfy",
]


class _Matched:
    """Sentinel token: make ``literal`` return the matched elements."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "MATCHED"


MATCHED = _Matched()


def _any_char(cursor: Cursor) -> Maybe[ParseResult[str]]:
    if cursor.is_eof:
        return ABSENT
    return Present(ParseResult(cursor.current, cursor.advance()))


_ANY_CHAR: Parser[str] = Parser(_any_char, name="any_char")


def any_char() -> Parser[str]:
    """Consume exactly one element; fail at end of input.

    Example:
        >>> invoke(any_char(), "ab").unwrap().value
        'a'
        >>> invoke(any_char(), "")
        ABSENT
    """
    return _ANY_CHAR


def satisfy[V](parser: Parser[V] | ParseFn[V], predicate: Callable[[V], bool]) -> Parser[V]:
    """Run ``parser`` and keep the match only if ``predicate`` accepts its value.

    On rejection the result is ``ABSENT``: nothing the inner parser read is
    consumed.

    Args:
        parser: Parser producing the candidate value
        predicate: Test applied to the value

    Example:
        >>> is_digit = satisfy(any_char(), str.isdigit)
        >>> invoke(is_digit, "7x").unwrap().cursor.pos
        1
        >>> invoke(is_digit, "x7")
        ABSENT
    """
    inner = as_parser(parser)

    def _satisfy(cursor: Cursor) -> Maybe[ParseResult[V]]:
        result = inner(cursor)
        if result and predicate(result.value.value):
            return result
        return ABSENT

    name = f"satisfy({inner.name}, {getattr(predicate, '__name__', 'predicate')})"
    return Parser(_satisfy, name=name, children=(inner,))


def char(expected: str) -> Parser[str]:
    """Match one specific element."""
    return satisfy(_ANY_CHAR, partial(eq, expected)).named(f"char({expected!r})")


def one_of(elements: Iterable[str]) -> Parser[str]:
    """Match one element from ``elements``."""
    allowed = frozenset(elements)
    return satisfy(_ANY_CHAR, allowed.__contains__).named(f"one_of({''.join(sorted(allowed))!r})")


def none_of(elements: Iterable[str]) -> Parser[str]:
    """Match one element not in ``elements``; fails at end of input."""
    rejected = frozenset(elements)

    def _not_rejected(element: str) -> bool:
        return element not in rejected

    return satisfy(_ANY_CHAR, _not_rejected).named(f"none_of({''.join(sorted(rejected))!r})")


def literal(
    parser: Parser[Any] | ParseFn[Any],
    sequence: Sequence[Any],
    token: Any = MATCHED,
) -> Parser[Any]:
    """Match a fixed sequence element by element.

    Each element of ``sequence`` is matched with ``satisfy(parser, == element)``.
    The first mismatch (or end of input) fails the whole literal with no
    partial consumption visible to the caller.

    Args:
        parser: Element parser, normally any_char()
        sequence: Elements to match in order
        token: Value to return on success (default MATCHED: the matched
               slice of the source)

    Returns:
        Parser yielding ``token`` and the cursor just past the literal

    Example:
        >>> yes = literal(any_char(), "yes", token=True)
        >>> invoke(yes, "yes").unwrap()
        ParseResult(value=True, cursor=Cursor(source='yes', pos=3, end=3))
        >>> invoke(yes, "yea")
        ABSENT
    """
    inner = as_parser(parser)
    matchers = tuple(satisfy(inner, partial(eq, element)) for element in sequence)

    def _literal(cursor: Cursor) -> Maybe[ParseResult[Any]]:
        current = cursor
        for matcher in matchers:
            result = matcher(current)
            if not result:
                return ABSENT
            current = result.value.cursor
        value = cursor.slice_to(current.pos) if token is MATCHED else token
        return Present(ParseResult(value, current))

    return Parser(_literal, name=f"literal({sequence!r})", children=(inner,))


def pure[V](value: V) -> Parser[V]:
    """Succeed with ``value`` without consuming input."""

    def _pure(cursor: Cursor) -> Maybe[ParseResult[V]]:
        return Present(ParseResult(value, cursor))

    return Parser(_pure, name=f"pure({value!r})")


def _fail(_cursor: Cursor) -> Maybe[ParseResult[Any]]:
    return ABSENT


def fail() -> Parser[Any]:
    """Never match."""
    return Parser(_fail, name="fail")


def _eof(cursor: Cursor) -> Maybe[ParseResult[None]]:
    if cursor.is_eof:
        return Present(ParseResult(None, cursor))
    return ABSENT


def eof() -> Parser[None]:
    """Match only at end of input, consuming nothing."""
    return Parser(_eof, name="eof")
