"""Parselet exception hierarchy with structured diagnostics.

Exceptions are reserved for programming and resource errors. A parser that
does not match its input returns ``ABSENT`` instead of raising.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic

__all__ = [
    "AbsentValueError",
    "GrammarError",
    "ParseletError",
    "UnboundParserError",
]


class ParseletError(Exception):
    """Base exception for all parselet errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize ParseletError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class GrammarError(ParseletError):
    """Malformed grammar construction.

    Indicates a bug in the code that builds the combinator graph, not a
    property of the parsed input. Never caught or retried by the engine.
    """


class AbsentValueError(GrammarError):
    """Value requested from an absent result.

    Every combinator checks presence before unwrapping, so this is only
    reachable from caller code.
    """


class UnboundParserError(GrammarError):
    """Forward placeholder invoked before its target was bound."""
