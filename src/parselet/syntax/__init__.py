"""Parselet syntax package.

Provides the cursor and result types and the combinator parser engine.

Python 3.13+.
"""

from .cursor import Cursor, ParseResult
from .maybe import ABSENT, Absent, Maybe, Present, from_optional
from .parser import Forward, ParseRunner, Parser, invoke

__all__ = [
    "ABSENT",
    "Absent",
    "Cursor",
    "Forward",
    "Maybe",
    "ParseResult",
    "ParseRunner",
    "Parser",
    "Present",
    "from_optional",
    "invoke",
    "parse",
]


def parse[V](parser: Parser[V], source: str) -> Maybe[ParseResult[V]]:
    """Run a grammar over a complete source with default limits.

    Convenience function for ParseRunner().run(). Validates the grammar
    graph and enforces the default source size limit.

    Example:
        >>> from parselet.syntax.parser import signed_integer
        >>> parse(signed_integer(), "-12").unwrap().value
        -12
    """
    runner = ParseRunner()
    return runner.run(parser, source)
