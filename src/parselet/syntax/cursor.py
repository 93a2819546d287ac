"""Immutable cursor infrastructure for combinator parsing.

Implements the immutable cursor pattern shared by every parser in the engine.
Python 3.13+. Zero external dependencies.

Design Philosophy:
    - Cursor is immutable (frozen dataclass)
    - The end sentinel travels with the position, so a parser is a function
      of one cursor rather than a (position, end) pair
    - EOF is a state (is_eof), not a return value
    - Every advance() returns NEW cursor (input is never mutated)
    - Failure carries no cursor: the caller keeps the cursor it passed in,
      which makes backtracking free

Pattern Reference:
    - Haskell Parsec
    - Rust nom parser combinator library
"""

from collections.abc import Sequence
from dataclasses import dataclass

from parselet.diagnostics import ErrorTemplate

__all__ = ["Cursor", "ParseResult"]


@dataclass(frozen=True, slots=True)
class Cursor:
    """Immutable position into a random-access character sequence.

    Key Design Decisions:
        1. Frozen dataclass - Immutability enforced by Python
        2. Slots - Memory efficiency (a cursor is created per matched element)
        3. Bounded - ``end`` limits advancement, so a sub-span of a larger
           source can be parsed without copying it
        4. current raises - No None handling needed

    Example:
        >>> cursor = Cursor("hello")
        >>> cursor.current
        'h'
        >>> cursor.advance().current
        'e'
        >>> cursor.current  # Original unchanged (immutability)
        'h'
        >>> Cursor("hello", 0, 2).advance(5).pos  # Clamped to end
        2
    """

    source: Sequence[str]
    pos: int = 0
    end: int | None = None  # resolved to len(source)

    def __post_init__(self) -> None:
        """Resolve the default end and validate the span.

        Raises:
            ValueError: If not 0 <= pos <= end <= len(source)
        """
        length = len(self.source)
        end = length if self.end is None else self.end
        if not 0 <= self.pos <= end <= length:
            raise ValueError(ErrorTemplate.invalid_span(self.pos, end, length).message)
        object.__setattr__(self, "end", end)

    @property
    def is_eof(self) -> bool:
        """True when no element remains before ``end``."""
        return self.pos >= self.end

    @property
    def current(self) -> str:
        """Get current element.

        Raises:
            EOFError: If at end of input
        """
        if self.is_eof:
            raise EOFError(ErrorTemplate.unexpected_eof(self.pos).message)
        return self.source[self.pos]

    @property
    def remaining(self) -> Sequence[str]:
        """Unconsumed elements between the position and ``end``."""
        return self.source[self.pos : self.end]

    def advance(self, count: int = 1) -> "Cursor":
        """Return new cursor advanced by count positions, clamped to end."""
        new_pos = min(self.pos + count, self.end)
        return Cursor(self.source, new_pos, self.end)

    def slice_to(self, end_pos: int) -> Sequence[str]:
        """Extract source slice from current position to end_pos.

        Usage:
            Recover the text a parser matched from its start and end cursors:

            >>> start = Cursor("hello world")
            >>> stop = start.advance(5)
            >>> start.slice_to(stop.pos)
            'hello'
        """
        return self.source[self.pos : end_pos]

    def _check_comparable(self, other: "Cursor") -> None:
        if self.source is not other.source and self.source != other.source:
            raise ValueError(ErrorTemplate.cursor_mismatch().message)
        if self.end != other.end:
            raise ValueError(ErrorTemplate.cursor_mismatch().message)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Cursor):
            return NotImplemented
        self._check_comparable(other)
        return self.pos < other.pos

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Cursor):
            return NotImplemented
        self._check_comparable(other)
        return self.pos <= other.pos

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Cursor):
            return NotImplemented
        self._check_comparable(other)
        return self.pos > other.pos

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Cursor):
            return NotImplemented
        self._check_comparable(other)
        return self.pos >= other.pos


@dataclass(frozen=True, slots=True)
class ParseResult[T]:
    """Parser result containing parsed value and new cursor position.

    Type Parameters:
        T: The type of the parsed value

    Pattern:
        Every parser has signature:
            def parse_foo(cursor: Cursor) -> Maybe[ParseResult[Foo]]:
                ...
                return Present(ParseResult(parsed_value, new_cursor))

    Example:
        >>> cursor = Cursor("hello")
        >>> result = ParseResult("h", cursor.advance())
        >>> result.value
        'h'
        >>> result.cursor.pos
        1
    """

    value: T
    cursor: Cursor
