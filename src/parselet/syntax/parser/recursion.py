"""Forward placeholders for self-referential grammars.

Combinators close over finished parsers, so a rule that refers to itself
needs an indirection: create a :class:`Forward`, use it where the rule
recurses, then bind it to the assembled rule with :meth:`Forward.define`.

Example:
    >>> expr = Forward("expr")
    >>> expr.define(choice(parenthesized(expr), signed_integer()))
    Forward('expr')
    >>> invoke(expr, "((42))").unwrap().value
    42

Construction order:
    Invoking a placeholder before define() raises UnboundParserError. Binding
    must complete before the grammar is used from several threads; binding
    while another thread invokes the placeholder is undefined.

Depth limiting:
    Each placeholder counts its own re-entrancy per thread and raises
    DepthLimitExceededError past ``max_depth``. The count is the nesting
    depth of the input as seen by this rule, plus one for the outermost
    call: 3 for "((42))". The limit is clamped to what the interpreter
    recursion limit can hold at FRAMES_PER_LEVEL frames per level. A
    RecursionError raised below a placeholder, e.g. after the interpreter
    limit was lowered, surfaces as DepthLimitExceededError (STACK_EXHAUSTED).
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from typing import Any

from parselet.constants import FRAMES_PER_LEVEL, MAX_RECURSION_DEPTH
from parselet.core import DepthGuard, DepthLimitExceededError, depth_clamp
from parselet.diagnostics import ErrorTemplate, GrammarError, UnboundParserError
from parselet.syntax.cursor import Cursor, ParseResult
from parselet.syntax.maybe import Maybe
from parselet.syntax.parser.core import ParseFn, Parser, as_parser

__all__ = ["Forward", "recursive"]

logger = logging.getLogger(__name__)


class Forward[V](Parser[V]):
    """Placeholder parser bound to its definition after construction.

    Attributes:
        is_bound: Whether define() has been called
        max_depth: Re-entrancy limit per thread (clamped so that many levels
                   of FRAMES_PER_LEVEL frames fit the interpreter recursion
                   limit)
    """

    __slots__ = ("_local", "_max_depth", "_target")

    def __init__(self, name: str = "forward", *, max_depth: int | None = None) -> None:
        """Create an unbound placeholder.

        Args:
            name: Rule name used in diagnostics and graph analysis
            max_depth: Re-entrancy limit (default: MAX_RECURSION_DEPTH)
        """
        super().__init__(self._invoke, name=name)
        self._target: Parser[V] | None = None
        self._max_depth = depth_clamp(
            max_depth if max_depth is not None else MAX_RECURSION_DEPTH,
            frames_per_level=FRAMES_PER_LEVEL,
        )
        self._local = threading.local()

    @property
    def is_bound(self) -> bool:
        return self._target is not None

    @property
    def max_depth(self) -> int:
        return self._max_depth

    @property
    def children(self) -> tuple[Parser[Any], ...]:
        if self._target is None:
            return ()
        return (self._target,)

    def define(self, parser: Parser[V] | ParseFn[V]) -> Forward[V]:
        """Bind the placeholder to its definition.

        Returns:
            self, so a rule can be defined and returned in one expression

        Raises:
            GrammarError: If the placeholder is already bound
        """
        if self._target is not None:
            raise GrammarError(ErrorTemplate.parser_already_bound(self.name))
        self._target = as_parser(parser)
        logger.debug("Bound forward parser '%s' to %s", self.name, self._target.name)
        return self

    def named(self, name: str) -> Parser[V]:
        """Return a named wrapper; the placeholder itself keeps its name."""
        return Parser(self, name=name, children=(self,))

    def _guard(self) -> DepthGuard:
        guard: DepthGuard | None = getattr(self._local, "guard", None)
        if guard is None:
            guard = DepthGuard(max_depth=self._max_depth, name=self.name)
            self._local.guard = guard
        return guard

    def _invoke(self, cursor: Cursor) -> Maybe[ParseResult[V]]:
        target = self._target
        if target is None:
            raise UnboundParserError(ErrorTemplate.parser_unbound(self.name))
        with self._guard() as guard:
            try:
                return target(cursor)
            except RecursionError as error:
                raise DepthLimitExceededError(
                    ErrorTemplate.stack_exhausted(self.name, guard.depth)
                ) from error


def recursive[V](
    build: Callable[[Forward[V]], Parser[V] | ParseFn[V]],
    name: str = "recursive",
    *,
    max_depth: int | None = None,
) -> Forward[V]:
    """Create a self-referential rule in one step.

    ``build`` receives the placeholder and returns the rule's definition,
    which is then bound to it.

    Example:
        >>> nested = recursive(lambda expr: choice(parenthesized(expr), digit()))
        >>> invoke(nested, "(((7)))").unwrap().value
        7
    """
    placeholder: Forward[V] = Forward(name, max_depth=max_depth)
    return placeholder.define(build(placeholder))
