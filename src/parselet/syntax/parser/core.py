"""Parser abstraction and entry points.

This module provides the :class:`Parser` wrapper that every primitive and
combinator returns, the :func:`invoke` entry point, and :class:`ParseRunner`,
the configurable front door used by applications.

Architecture:
    A parser is any callable ``(Cursor) -> Maybe[ParseResult[V]]``. Wrapping
    it in :class:`Parser` gives combinators a uniform type to compose and
    records the node's name and children so the grammar graph can be
    inspected (:mod:`parselet.analysis.graph`).

    Combinators live in :mod:`~parselet.syntax.parser.combinators` and
    :mod:`~parselet.syntax.parser.primitives`; the fluent methods on
    :class:`Parser` delegate to them and exist purely for readability.

Thread Safety:
    A Parser is immutable after construction. The same grammar may be run
    from many threads once every Forward placeholder in it has been bound.

See Also:
    - :mod:`parselet.syntax.cursor` - Cursor and ParseResult types
    - :mod:`parselet.syntax.maybe` - Present/Absent result type
    - :mod:`parselet.syntax.parser.recursion` - Forward placeholders
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Sequence
from typing import Any

from parselet.constants import MAX_SOURCE_SIZE
from parselet.diagnostics import ErrorTemplate, GrammarError
from parselet.syntax.cursor import Cursor, ParseResult
from parselet.syntax.maybe import ABSENT, Maybe

__all__ = ["ParseFn", "ParseRunner", "Parser", "as_parser", "invoke"]

logger = logging.getLogger(__name__)

type ParseFn[V] = Callable[[Cursor], Maybe[ParseResult[V]]]


class Parser[V]:
    """Uniform wrapper around a parse function.

    Attributes:
        name: Label used in repr, diagnostics and graph analysis
        children: Parsers this node composes (empty for primitives)

    Example:
        >>> from parselet.syntax.parser.primitives import char
        >>> digits = char("1").or_else(char("2")).many1()
        >>> invoke(digits, "121x").unwrap().value
        ['1', '2', '1']
    """

    __slots__ = ("_children", "_fn", "_name")

    def __init__(
        self,
        fn: ParseFn[V],
        *,
        name: str | None = None,
        children: Iterable[Parser[Any]] = (),
    ) -> None:
        """Wrap a parse function.

        Args:
            fn: Callable taking a Cursor and returning Maybe[ParseResult[V]]
            name: Node label (default: the function's __name__)
            children: Parsers composed by this node

        Raises:
            GrammarError: If fn is not callable
        """
        if not callable(fn):
            raise GrammarError(ErrorTemplate.not_a_parser(type(fn).__name__))
        self._fn = fn
        self._name = name if name is not None else getattr(fn, "__name__", type(fn).__name__)
        self._children: tuple[Parser[Any], ...] = tuple(children)

    def __call__(self, cursor: Cursor) -> Maybe[ParseResult[V]]:
        return self._fn(cursor)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._name!r})"

    @property
    def name(self) -> str:
        return self._name

    @property
    def children(self) -> tuple[Parser[Any], ...]:
        return self._children

    def named(self, name: str) -> Parser[V]:
        """Return the same parser under a new name."""
        return Parser(self._fn, name=name, children=self._children)

    def parse(
        self, source: Sequence[str], *, start: int = 0, end: int | None = None
    ) -> Maybe[ParseResult[V]]:
        """Run this parser over ``source`` (see :func:`invoke`)."""
        return invoke(self, source, start=start, end=end)

    # ------------------------------------------------------------------
    # Fluent combinator methods
    # ------------------------------------------------------------------

    def bind[U](self, f: Callable[[V], Parser[U]]) -> Parser[U]:
        """Sequence with a parser chosen from this parser's value."""
        from parselet.syntax.parser import combinators  # noqa: PLC0415 - circular

        return combinators.bind(self, f)

    then = bind

    def pair[U](self, other: Parser[U]) -> Parser[tuple[V, U]]:
        from parselet.syntax.parser import combinators  # noqa: PLC0415 - circular

        return combinators.pair(self, other)

    def chain(self, *others: Parser[Any]) -> Parser[tuple[Any, ...]]:
        from parselet.syntax.parser import combinators  # noqa: PLC0415 - circular

        return combinators.chain(self, *others)

    def skip_left[U](self, other: Parser[U]) -> Parser[U]:
        """Run self then ``other``, keeping ``other``'s value."""
        from parselet.syntax.parser import combinators  # noqa: PLC0415 - circular

        return combinators.skip_left(self, other)

    def skip_right(self, other: Parser[Any]) -> Parser[V]:
        """Run self then ``other``, keeping this parser's value."""
        from parselet.syntax.parser import combinators  # noqa: PLC0415 - circular

        return combinators.skip_right(self, other)

    def or_else(self, *alternatives: Parser[Any]) -> Parser[Any]:
        from parselet.syntax.parser import combinators  # noqa: PLC0415 - circular

        return combinators.choice(self, *alternatives)

    def map[U](self, f: Callable[[V], U]) -> Parser[U]:
        from parselet.syntax.parser import combinators  # noqa: PLC0415 - circular

        return combinators.transform(self, f)

    def filter(self, predicate: Callable[[V], bool]) -> Parser[V]:
        from parselet.syntax.parser import primitives  # noqa: PLC0415 - circular

        return primitives.satisfy(self, predicate)

    def fold[A](self, initial: A, combine: Callable[[A, V], A]) -> Parser[A]:
        """Zero-or-more fold (see :func:`combinators.fold_while`)."""
        from parselet.syntax.parser import combinators  # noqa: PLC0415 - circular

        return combinators.fold_while(self, initial, combine)

    def fold1[A](self, initial: A, combine: Callable[[A, V], A]) -> Parser[A]:
        """One-or-more fold (see :func:`combinators.fold_while1`)."""
        from parselet.syntax.parser import combinators  # noqa: PLC0415 - circular

        return combinators.fold_while1(self, initial, combine)

    def many(self) -> Parser[list[V]]:
        from parselet.syntax.parser import combinators  # noqa: PLC0415 - circular

        return combinators.collect(self)

    def many1(self) -> Parser[list[V]]:
        from parselet.syntax.parser import combinators  # noqa: PLC0415 - circular

        return combinators.collect_many(self)

    def skip_many(self) -> Parser[None]:
        from parselet.syntax.parser import combinators  # noqa: PLC0415 - circular

        return combinators.skip_while(self)

    def skip_many1(self) -> Parser[None]:
        from parselet.syntax.parser import combinators  # noqa: PLC0415 - circular

        return combinators.skip_while1(self)

    def optional(self) -> Parser[Maybe[V]]:
        from parselet.syntax.parser import combinators  # noqa: PLC0415 - circular

        return combinators.optional_match(self)


def as_parser[V](obj: Parser[V] | ParseFn[V]) -> Parser[V]:
    """Coerce a Parser or plain parse function to a Parser.

    Raises:
        GrammarError: If obj is neither a Parser nor callable
    """
    if isinstance(obj, Parser):
        return obj
    if callable(obj):
        return Parser(obj)
    raise GrammarError(ErrorTemplate.not_a_parser(type(obj).__name__))


def invoke[V](
    parser: Parser[V] | ParseFn[V],
    source: Sequence[str],
    *,
    start: int = 0,
    end: int | None = None,
) -> Maybe[ParseResult[V]]:
    """Run a parser once over an in-memory source.

    Args:
        parser: Parser (or plain parse function) to run
        source: Random-access character sequence, supplied whole
        start: Position of the first element to parse (default: 0)
        end: Position bounding advancement (default: len(source))

    Returns:
        ``Present(ParseResult(value, remaining_cursor))`` on a match,
        ``ABSENT`` otherwise

    Raises:
        ValueError: If not 0 <= start <= end <= len(source)

    Example:
        >>> from parselet.syntax.parser.common import unsigned_integer
        >>> result = invoke(unsigned_integer(), "666a")
        >>> result.unwrap().value, result.unwrap().cursor.pos
        (666, 3)
    """
    cursor = Cursor(source, start, end)
    return as_parser(parser)(cursor)


class ParseRunner:
    """Configured entry point for running grammars.

    Security:
    - Configurable max_source_size rejects oversized input before parsing
    - Default limit: 10 MiB characters

    Grammar checks:
    - With validate_grammar enabled (default), every run first walks the
      grammar graph and raises UnboundParserError if any reachable Forward
      placeholder is unbound. This turns a construction-order bug into an
      immediate error instead of one that surfaces only on the input that
      happens to reach the placeholder.

    Attributes:
        max_source_size: Maximum allowed source length (0 disables the check)
        validate_grammar: Whether runs check the grammar graph first
    """

    __slots__ = ("_max_source_size", "_validate_grammar")

    def __init__(
        self,
        *,
        max_source_size: int | None = None,
        validate_grammar: bool = True,
    ) -> None:
        """Initialize runner with optional limits.

        Args:
            max_source_size: Maximum source length (default: 10 MiB).
                            Set to 0 to disable the limit.
            validate_grammar: Check for unbound placeholders before each run
        """
        self._max_source_size = (
            max_source_size if max_source_size is not None else MAX_SOURCE_SIZE
        )
        self._validate_grammar = validate_grammar

    @property
    def max_source_size(self) -> int:
        """Maximum allowed source length."""
        return self._max_source_size

    @property
    def validate_grammar(self) -> bool:
        """Whether runs check the grammar graph first."""
        return self._validate_grammar

    def run[V](
        self,
        parser: Parser[V] | ParseFn[V],
        source: Sequence[str],
        *,
        start: int = 0,
        end: int | None = None,
    ) -> Maybe[ParseResult[V]]:
        """Run ``parser`` over ``source``.

        Returns:
            Present(ParseResult) on a match, ABSENT otherwise

        Raises:
            ValueError: If source exceeds max_source_size or the span is invalid
            UnboundParserError: If validation finds an unbound placeholder
        """
        if self._max_source_size > 0 and len(source) > self._max_source_size:
            diagnostic = ErrorTemplate.source_too_large(len(source), self._max_source_size)
            raise ValueError(diagnostic.message)

        root = as_parser(parser)
        if self._validate_grammar:
            from parselet.analysis.graph import validate_grammar  # noqa: PLC0415 - circular

            validate_grammar(root)

        result = invoke(root, source, start=start, end=end)
        if result:
            logger.debug(
                "Parser '%s' matched %d of %d characters",
                root.name,
                result.value.cursor.pos - start,
                len(source),
            )
        else:
            logger.debug("Parser '%s' did not match (%d characters)", root.name, len(source))
        return result

    def run_complete[V](
        self,
        parser: Parser[V] | ParseFn[V],
        source: Sequence[str],
        *,
        start: int = 0,
        end: int | None = None,
    ) -> Maybe[ParseResult[V]]:
        """Run ``parser`` and require it to consume everything up to ``end``.

        A match that stops early is reported as ABSENT.
        """
        result = self.run(parser, source, start=start, end=end)
        if result and not result.value.cursor.is_eof:
            logger.debug(
                "Parser '%s' stopped at position %d before end %d",
                as_parser(parser).name,
                result.value.cursor.pos,
                result.value.cursor.end,
            )
            return ABSENT
        return result
