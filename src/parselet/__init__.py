"""Parselet - composable parser combinators.

A small parsing engine: parser primitives and combinators that build
recursive-descent grammars by composition. Ordered-choice, backtracking
parsing over an in-memory, random-access character sequence.

Public API:
    Parser - Uniform parser type with fluent combinator methods
    Forward - Placeholder for self-referential rules
    invoke - Run a parser once over a source
    ParseRunner - Configured entry point (size limit, grammar validation)
    Present / ABSENT - Result of every parser invocation

Exceptions:
    ParseletError - Base exception class
    GrammarError - Malformed grammar construction
    AbsentValueError - unwrap() on an absent result
    UnboundParserError - Forward placeholder used before define()
    DepthLimitExceededError - Recursion depth limit exceeded

Submodules:
    parselet.syntax.parser - Primitives, combinators and common grammars
    parselet.analysis - Grammar graph inspection and validation
    parselet.diagnostics - Error codes, templates and formatting
"""

from .core import DepthLimitExceededError
from .diagnostics import (
    AbsentValueError,
    GrammarError,
    ParseletError,
    UnboundParserError,
)
from .syntax import (
    ABSENT,
    Absent,
    Cursor,
    Forward,
    Maybe,
    ParseResult,
    ParseRunner,
    Parser,
    Present,
    invoke,
    parse,
)

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("parselet")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "ABSENT",
    "Absent",
    "AbsentValueError",
    "Cursor",
    "DepthLimitExceededError",
    "Forward",
    "GrammarError",
    "Maybe",
    "ParseResult",
    "ParseRunner",
    "ParseletError",
    "Parser",
    "Present",
    "UnboundParserError",
    "__version__",
    "invoke",
    "parse",
]
