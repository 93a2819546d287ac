"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    Keeps messages testable, consistently formatted, and documents every
    error case the engine can raise.
    """

    # =========================================================================
    # GRAMMAR CONSTRUCTION ERRORS (1000-1999)
    # =========================================================================

    @staticmethod
    def absent_unwrapped() -> Diagnostic:
        """Value requested from an absent result.

        Returns:
            Diagnostic for ABSENT_UNWRAPPED
        """
        return Diagnostic(
            code=DiagnosticCode.ABSENT_UNWRAPPED,
            message="Cannot unwrap an absent result",
            hint="Check is_present (or use value_or) before unwrapping",
        )

    @staticmethod
    def parser_unbound(name: str) -> Diagnostic:
        """Forward placeholder invoked before define().

        Args:
            name: Name of the placeholder

        Returns:
            Diagnostic for PARSER_UNBOUND
        """
        msg = f"Parser '{name}' was invoked before being bound"
        return Diagnostic(
            code=DiagnosticCode.PARSER_UNBOUND,
            message=msg,
            hint="Call define() on the placeholder before running the grammar",
            parser_name=name,
        )

    @staticmethod
    def parser_already_bound(name: str) -> Diagnostic:
        """Forward placeholder bound a second time.

        Args:
            name: Name of the placeholder

        Returns:
            Diagnostic for PARSER_ALREADY_BOUND
        """
        msg = f"Parser '{name}' is already bound"
        return Diagnostic(
            code=DiagnosticCode.PARSER_ALREADY_BOUND,
            message=msg,
            hint="Create a new placeholder for each recursive rule",
            parser_name=name,
        )

    @staticmethod
    def not_a_parser(received_type: str) -> Diagnostic:
        """Combinator argument is neither a Parser nor callable.

        Args:
            received_type: Type name of the rejected argument

        Returns:
            Diagnostic for NOT_A_PARSER
        """
        msg = f"Expected a parser or callable, got {received_type}"
        return Diagnostic(
            code=DiagnosticCode.NOT_A_PARSER,
            message=msg,
            hint="Wrap plain functions of (Cursor) -> Maybe[ParseResult] with Parser()",
        )

    @staticmethod
    def empty_choice() -> Diagnostic:
        """choice() called without alternatives.

        Returns:
            Diagnostic for EMPTY_CHOICE
        """
        return Diagnostic(
            code=DiagnosticCode.EMPTY_CHOICE,
            message="choice() requires at least one alternative",
            hint="Use fail() for a parser that never matches",
        )

    @staticmethod
    def empty_sequence() -> Diagnostic:
        """chain() called without parsers.

        Returns:
            Diagnostic for EMPTY_SEQUENCE
        """
        return Diagnostic(
            code=DiagnosticCode.EMPTY_SEQUENCE,
            message="chain() requires at least one parser",
            hint="Use pure(()) for a parser that matches nothing and yields an empty tuple",
        )

    # =========================================================================
    # RESOURCE ERRORS (2000-2999)
    # =========================================================================

    @staticmethod
    def recursion_depth_exceeded(name: str, max_depth: int) -> Diagnostic:
        """Forward placeholder re-entered too many times.

        Args:
            name: Name of the placeholder
            max_depth: Configured limit

        Returns:
            Diagnostic for RECURSION_DEPTH_EXCEEDED
        """
        msg = f"Recursion depth limit of {max_depth} exceeded in '{name}'"
        return Diagnostic(
            code=DiagnosticCode.RECURSION_DEPTH_EXCEEDED,
            message=msg,
            hint="Reduce input nesting or raise max_depth on the placeholder",
            parser_name=name,
        )

    @staticmethod
    def stack_exhausted(name: str, depth: int) -> Diagnostic:
        """Interpreter recursion limit reached inside a placeholder.

        Args:
            name: Name of the placeholder
            depth: Placeholder depth when the interpreter stack ran out

        Returns:
            Diagnostic for STACK_EXHAUSTED
        """
        msg = f"Interpreter stack exhausted at depth {depth} in '{name}'"
        return Diagnostic(
            code=DiagnosticCode.STACK_EXHAUSTED,
            message=msg,
            hint="Lower max_depth on the placeholder or raise sys.setrecursionlimit()",
            parser_name=name,
        )

    @staticmethod
    def source_too_large(size: int, max_size: int) -> Diagnostic:
        """Source exceeds the runner's size limit.

        Args:
            size: Length of the rejected source
            max_size: Configured limit

        Returns:
            Diagnostic for SOURCE_TOO_LARGE
        """
        msg = f"Source size ({size:,} characters) exceeds maximum ({max_size:,} characters)"
        return Diagnostic(
            code=DiagnosticCode.SOURCE_TOO_LARGE,
            message=msg,
            hint="Configure max_source_size in the ParseRunner constructor to increase the limit",
        )

    # =========================================================================
    # CURSOR ERRORS (3000-3999)
    # =========================================================================

    @staticmethod
    def unexpected_eof(position: int) -> Diagnostic:
        """Character requested at end of input.

        Args:
            position: The position where EOF was encountered

        Returns:
            Diagnostic for UNEXPECTED_EOF
        """
        msg = f"Unexpected EOF at position {position}"
        return Diagnostic(
            code=DiagnosticCode.UNEXPECTED_EOF,
            message=msg,
            hint="Check is_eof before reading current",
        )

    @staticmethod
    def invalid_span(pos: int, end: int, length: int) -> Diagnostic:
        """Cursor position or end outside the source.

        Args:
            pos: Requested position
            end: Requested end sentinel
            length: Length of the source

        Returns:
            Diagnostic for INVALID_SPAN
        """
        msg = f"Invalid cursor span: pos={pos}, end={end} for source of length {length}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_SPAN,
            message=msg,
            hint="Require 0 <= pos <= end <= len(source)",
        )

    @staticmethod
    def cursor_mismatch() -> Diagnostic:
        """Cursors over different inputs compared.

        Returns:
            Diagnostic for CURSOR_MISMATCH
        """
        return Diagnostic(
            code=DiagnosticCode.CURSOR_MISMATCH,
            message="Cannot compare cursors over different inputs",
            hint="Only compare cursors produced from the same invocation",
        )
