"""Combinators: sequencing, ordered choice, repetition, transform, optional.

Each function takes one or more parsers and returns a new :class:`Parser`
describing their composition. No combinator raises on a non-match; failure
is always ``ABSENT``.

Backtracking:
    A failed parse returns no cursor, so whoever invoked it still holds the
    cursor it started from. Ordered choice, optional matching and the fold
    family rely on this: every alternative or repetition starts from a cursor
    the combinator kept, never from wherever a failed sub-parse stopped.

Naming:
    - bind / pair / chain / skip_left / skip_right / between: sequencing
    - choice: ordered (PEG-style), left-biased alternation
    - fold_while / fold_while1 / collect / collect_many / skip_while /
      skip_while1 / separated_by / separated_by1: repetition
    - transform: lift a pure function over a parser's value (``Parser.map``)
    - optional_match: turn failure into a successful ``ABSENT`` value
"""

from collections.abc import Callable
from operator import itemgetter
from typing import Any

from parselet.diagnostics import ErrorTemplate, GrammarError
from parselet.syntax.cursor import Cursor, ParseResult
from parselet.syntax.maybe import ABSENT, Maybe, Present
from parselet.syntax.parser.core import ParseFn, Parser, as_parser

__all__ = [
    "between",
    "bind",
    "chain",
    "choice",
    "collect",
    "collect_many",
    "fold_while",
    "fold_while1",
    "optional_match",
    "pair",
    "separated_by",
    "separated_by1",
    "skip_left",
    "skip_right",
    "skip_while",
    "skip_while1",
    "transform",
]

type ParserLike[V] = Parser[V] | ParseFn[V]


# ============================================================================
# SEQUENCING
# ============================================================================


def bind[V, U](parser: ParserLike[V], f: Callable[[V], ParserLike[U]]) -> Parser[U]:
    """Monadic sequencing: the second parser is built from the first value.

    Runs ``parser``; on a match with value ``v`` at cursor ``c``, runs
    ``f(v)`` from ``c``. This is the only combinator where the shape of a
    later parser depends on an earlier value.

    Example:
        >>> sign = optional_match(char("-"))
        >>> number = bind(sign, lambda s: unsigned_integer().map(
        ...     lambda i: -i if s else i))
    """
    first = as_parser(parser)

    def _bind(cursor: Cursor) -> Maybe[ParseResult[U]]:
        return first(cursor).bind(lambda step: as_parser(f(step.value))(step.cursor))

    return Parser(_bind, name=f"bind({first.name})", children=(first,))


def pair[V, U](first: ParserLike[V], second: ParserLike[U]) -> Parser[tuple[V, U]]:
    """Run two parsers in order and keep both values as a 2-tuple."""
    left = as_parser(first)
    right = as_parser(second)

    def _pair(cursor: Cursor) -> Maybe[ParseResult[tuple[V, U]]]:
        first_result = left(cursor)
        if not first_result:
            return ABSENT
        first_step = first_result.value
        second_result = right(first_step.cursor)
        if not second_result:
            return ABSENT
        second_step = second_result.value
        return Present(ParseResult((first_step.value, second_step.value), second_step.cursor))

    return Parser(_pair, name=f"pair({left.name}, {right.name})", children=(left, right))


def _splice(value: object) -> tuple[Any, ...]:
    # Tuples produced by pair/chain are flattened into the enclosing chain.
    if isinstance(value, tuple):
        return value
    return (value,)


def chain(*parsers: ParserLike[Any]) -> Parser[tuple[Any, ...]]:
    """Run parsers in order and collect their values into one flat tuple.

    Unlike :func:`pair`, tuple-valued sides are spliced rather than nested,
    so ``chain(chain(a, b), c)`` yields ``(va, vb, vc)``. Lists (as produced
    by the collect family) are kept as single elements.

    Raises:
        GrammarError: If called without parsers
    """
    if not parsers:
        raise GrammarError(ErrorTemplate.empty_sequence())
    steps = tuple(as_parser(p) for p in parsers)

    def _chain(cursor: Cursor) -> Maybe[ParseResult[tuple[Any, ...]]]:
        values: tuple[Any, ...] = ()
        current = cursor
        for step in steps:
            result = step(current)
            if not result:
                return ABSENT
            values += _splice(result.value.value)
            current = result.value.cursor
        return Present(ParseResult(values, current))

    name = "chain(" + ", ".join(step.name for step in steps) + ")"
    return Parser(_chain, name=name, children=steps)


def skip_left[U](first: ParserLike[Any], second: ParserLike[U]) -> Parser[U]:
    """Run both parsers, keep the second value (discard a leading delimiter)."""
    return transform(pair(first, second), itemgetter(1)).named("skip_left")


def skip_right[V](first: ParserLike[V], second: ParserLike[Any]) -> Parser[V]:
    """Run both parsers, keep the first value (discard a trailing delimiter)."""
    return transform(pair(first, second), itemgetter(0)).named("skip_right")


def between[V](
    opening: ParserLike[Any], parser: ParserLike[V], closing: ParserLike[Any]
) -> Parser[V]:
    """Match ``opening parser closing`` and keep the middle value."""
    return skip_right(skip_left(opening, parser), closing).named("between")


# ============================================================================
# ORDERED CHOICE
# ============================================================================


def choice(*parsers: ParserLike[Any]) -> Parser[Any]:
    """Ordered, left-biased alternation.

    Tries each alternative from the ORIGINAL cursor and returns the first
    match. A later alternative is never consulted once an earlier one
    matches, even if it would consume more input.

    Args:
        *parsers: Alternatives in priority order

    Returns:
        The single parser unchanged when given one alternative, otherwise a
        parser trying them in order

    Raises:
        GrammarError: If called without alternatives
    """
    if not parsers:
        raise GrammarError(ErrorTemplate.empty_choice())
    if len(parsers) == 1:
        return as_parser(parsers[0])
    alternatives = tuple(as_parser(p) for p in parsers)

    def _choice(cursor: Cursor) -> Maybe[ParseResult[Any]]:
        for alternative in alternatives:
            result = alternative(cursor)
            if result:
                return result
        return ABSENT

    name = "choice(" + ", ".join(alt.name for alt in alternatives) + ")"
    return Parser(_choice, name=name, children=alternatives)


# ============================================================================
# REPETITION
# ============================================================================


def _fold_from[V, A](
    parser: Parser[V],
    accumulator: A,
    cursor: Cursor,
    combine: Callable[[A, V], A],
) -> ParseResult[A]:
    """Fold matches of ``parser`` into ``accumulator`` until it fails.

    A match that consumes nothing is folded once and ends the loop;
    repeating it would never terminate.
    """
    current = cursor
    while True:
        result = parser(current)
        if not result:
            return ParseResult(accumulator, current)
        step = result.value
        accumulator = combine(accumulator, step.value)
        if step.cursor.pos == current.pos:
            return ParseResult(accumulator, step.cursor)
        current = step.cursor


def fold_while[V, A](
    parser: ParserLike[V], initial: A, combine: Callable[[A, V], A]
) -> Parser[A]:
    """Zero-or-more fold. Never fails.

    Repeatedly runs ``parser``, folding each value into the accumulator with
    ``combine(accumulator, value)``. Stops at the first non-match and returns
    the last accumulator with the cursor after the last match. With zero
    matches, returns ``initial`` at the original cursor.
    """
    repeated = as_parser(parser)

    def _fold_while(cursor: Cursor) -> Maybe[ParseResult[A]]:
        return Present(_fold_from(repeated, initial, cursor, combine))

    return Parser(_fold_while, name=f"fold_while({repeated.name})", children=(repeated,))


def fold_while1[V, A](
    parser: ParserLike[V], initial: A, combine: Callable[[A, V], A]
) -> Parser[A]:
    """One-or-more fold. Fails iff the first attempt of ``parser`` fails."""
    repeated = as_parser(parser)

    def _fold_while1(cursor: Cursor) -> Maybe[ParseResult[A]]:
        first = repeated(cursor)
        if not first:
            return ABSENT
        step = first.value
        accumulator = combine(initial, step.value)
        if step.cursor.pos == cursor.pos:
            return Present(ParseResult(accumulator, step.cursor))
        return Present(_fold_from(repeated, accumulator, step.cursor, combine))

    return Parser(_fold_while1, name=f"fold_while1({repeated.name})", children=(repeated,))


type _Cell = tuple[Any, _Cell] | None


def _cons(cell: _Cell, value: Any) -> _Cell:
    return (value, cell)


def _unwind(cell: _Cell) -> list[Any]:
    items: list[Any] = []
    while cell is not None:
        value, cell = cell
        items.append(value)
    items.reverse()
    return items


def collect[V](parser: ParserLike[V]) -> Parser[list[V]]:
    """Zero-or-more matches collected into a list in match order."""
    return transform(fold_while(parser, None, _cons), _unwind).named("collect")


def collect_many[V](parser: ParserLike[V]) -> Parser[list[V]]:
    """One-or-more matches collected into a list in match order.

    Fails if ``parser`` does not match at least once.
    """
    return transform(fold_while1(parser, None, _cons), _unwind).named("collect_many")


def _discard(_accumulator: None, _value: object) -> None:
    return None


def skip_while(parser: ParserLike[Any]) -> Parser[None]:
    """Zero-or-more matches, values discarded. Never fails."""
    return fold_while(parser, None, _discard)


def skip_while1(parser: ParserLike[Any]) -> Parser[None]:
    """One-or-more matches, values discarded."""
    return fold_while1(parser, None, _discard)


def separated_by1[V](parser: ParserLike[V], separator: ParserLike[Any]) -> Parser[list[V]]:
    """One or more ``parser`` matches separated by ``separator``.

    A trailing separator is not consumed: ``separator parser`` is tried as a
    unit, so a separator without a following item backtracks.
    """
    item = as_parser(parser)
    rest = collect(skip_left(separator, item))
    return transform(pair(item, rest), lambda items: [items[0], *items[1]]).named(
        "separated_by1"
    )


def separated_by[V](parser: ParserLike[V], separator: ParserLike[Any]) -> Parser[list[V]]:
    """Zero or more ``parser`` matches separated by ``separator``. Never fails."""
    return transform(
        optional_match(separated_by1(parser, separator)),
        lambda items: items.value_or([]),
    ).named("separated_by")


# ============================================================================
# TRANSFORM & OPTIONAL
# ============================================================================


def transform[V, U](parser: ParserLike[V], f: Callable[[V], U]) -> Parser[U]:
    """Apply pure function ``f`` to a match's value; consumption unchanged.

    The map combinator. ``transform(p, lambda v: v)`` behaves exactly like
    ``p``.
    """
    inner = as_parser(parser)

    def _transform(cursor: Cursor) -> Maybe[ParseResult[U]]:
        return inner(cursor).map(lambda step: ParseResult(f(step.value), step.cursor))

    return Parser(_transform, name=f"map({inner.name})", children=(inner,))


def optional_match[V](parser: ParserLike[V]) -> Parser[Maybe[V]]:
    """Never fails: a match yields ``Present(value)``, a non-match ``ABSENT``.

    On a non-match the returned cursor is the original cursor, so nothing is
    consumed.
    """
    inner = as_parser(parser)

    def _optional(cursor: Cursor) -> Maybe[ParseResult[Maybe[V]]]:
        result = inner(cursor)
        if result:
            step = result.value
            return Present(ParseResult(Present(step.value), step.cursor))
        return Present(ParseResult(ABSENT, cursor))

    return Parser(_optional, name=f"optional({inner.name})", children=(inner,))
