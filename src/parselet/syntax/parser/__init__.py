"""Combinator parser module.

This module provides the Parser abstraction and the primitives and
combinators used to compose grammars, organized into focused submodules.

Module Organization:
- core.py: Parser wrapper, invoke() entry point, ParseRunner
- primitives.py: any_char, satisfy, literal and other leaf parsers
- combinators.py: sequencing, ordered choice, repetition, transform, optional
- recursion.py: Forward placeholders for self-referential rules
- whitespace.py: ASCII whitespace skipping
- common.py: digits, integers, words, parenthesized groups

Public API:
    Parser: Uniform parser type
    invoke: Run a parser once over a source
    ParseRunner: Configured entry point (size limit, grammar validation)
    Forward: Placeholder for recursive rules
"""

from parselet.syntax.parser.combinators import (
    between,
    bind,
    chain,
    choice,
    collect,
    collect_many,
    fold_while,
    fold_while1,
    optional_match,
    pair,
    separated_by,
    separated_by1,
    skip_left,
    skip_right,
    skip_while,
    skip_while1,
    transform,
)
from parselet.syntax.parser.common import (
    digit,
    keyword,
    parenthesized,
    signed_integer,
    unsigned_integer,
    word,
)
from parselet.syntax.parser.core import ParseFn, ParseRunner, Parser, as_parser, invoke
from parselet.syntax.parser.primitives import (
    MATCHED,
    any_char,
    char,
    eof,
    fail,
    literal,
    none_of,
    one_of,
    pure,
    satisfy,
)
from parselet.syntax.parser.recursion import Forward, recursive
from parselet.syntax.parser.whitespace import lexeme, skip_whitespace, whitespace

__all__ = [
    "MATCHED",
    "Forward",
    "ParseFn",
    "ParseRunner",
    "Parser",
    "any_char",
    "as_parser",
    "between",
    "bind",
    "chain",
    "char",
    "choice",
    "collect",
    "collect_many",
    "digit",
    "eof",
    "fail",
    "fold_while",
    "fold_while1",
    "invoke",
    "keyword",
    "lexeme",
    "literal",
    "none_of",
    "one_of",
    "optional_match",
    "pair",
    "parenthesized",
    "pure",
    "recursive",
    "satisfy",
    "separated_by",
    "separated_by1",
    "signed_integer",
    "skip_left",
    "skip_right",
    "skip_whitespace",
    "skip_while",
    "skip_while1",
    "transform",
    "unsigned_integer",
    "whitespace",
    "word",
]
