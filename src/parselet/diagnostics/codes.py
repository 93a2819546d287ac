"""Diagnostic codes and data structures.

Defines error codes and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Grammar construction errors (malformed combinator graphs)
        2000-2999: Resource errors (limits exceeded while running a parser)
        3000-3999: Cursor errors (access outside the parsed span)

    Match failure is not listed here. A parser that does not match returns
    ``ABSENT``; it never produces a diagnostic.
    """

    # Grammar construction errors (1000-1999)
    ABSENT_UNWRAPPED = 1001
    PARSER_UNBOUND = 1002
    PARSER_ALREADY_BOUND = 1003
    NOT_A_PARSER = 1004
    EMPTY_CHOICE = 1005
    EMPTY_SEQUENCE = 1006

    # Resource errors (2000-2999)
    RECURSION_DEPTH_EXCEEDED = 2001
    SOURCE_TOO_LARGE = 2002
    STACK_EXHAUSTED = 2003

    # Cursor errors (3000-3999)
    UNEXPECTED_EOF = 3001
    INVALID_SPAN = 3002
    CURSOR_MISMATCH = 3003


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Provides rich error information
    for both humans and tools.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        parser_name: Name of the parser node involved (grammar errors)
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    parser_name: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Example output:
            error[PARSER_UNBOUND]: Parser 'expr' was invoked before being bound
              = parser: expr
              = help: Call define() on the placeholder before running the grammar

        Each field is truncated to the formatter's default content length.

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter(sanitize=True).format(self)
