"""Quickstart Example - Building Grammars with parselet.

Demonstrates the core workflow:

1. Match numbers with ready-made grammars
2. Compose primitives into a list grammar
3. Define a recursive rule with a Forward placeholder
4. Run grammars through ParseRunner (size limit, validation)
5. Handle resource errors from deeply nested input

Python 3.13+.
"""

from __future__ import annotations


def example_1_numbers() -> None:
    """Parse integers and inspect the remaining cursor."""
    from parselet import invoke
    from parselet.syntax.parser import signed_integer, unsigned_integer

    print("=" * 60)
    print("Example 1: Numbers")
    print("=" * 60)

    for source in ("666a", "a666", "-666a"):
        result = invoke(signed_integer(), source)
        if result:
            step = result.unwrap()
            print(f"{source!r}: value={step.value} rest={step.cursor.remaining!r}")
        else:
            print(f"{source!r}: no match")

    # value_or() avoids unwrapping an absent result
    digits = invoke(unsigned_integer(), "abc").map(lambda step: step.value)
    print(f"digits of 'abc': {digits.value_or(None)}")
    print()


def example_2_lists() -> None:
    """Compose lexemes into a whitespace-tolerant list grammar."""
    from parselet import ParseRunner
    from parselet.syntax.parser import (
        between,
        char,
        lexeme,
        separated_by,
        signed_integer,
        skip_left,
        skip_whitespace,
    )

    print("=" * 60)
    print("Example 2: Lists")
    print("=" * 60)

    items = separated_by(lexeme(signed_integer()), lexeme(char(",")))
    array = skip_left(skip_whitespace(), between(lexeme(char("[")), items, char("]")))

    runner = ParseRunner()
    for source in ("[1, 2, -3]", " [ ]", "[1, 2,]"):
        result = runner.run_complete(array, source)
        print(f"{source!r}: {result.unwrap().value if result else 'no match'}")
    print()


def example_3_recursion() -> None:
    """Define a self-referential rule."""
    from parselet import Forward, invoke
    from parselet.analysis import detect_cycles
    from parselet.syntax.parser import choice, parenthesized, signed_integer

    print("=" * 60)
    print("Example 3: Recursive grammar")
    print("=" * 60)

    expr: Forward[int] = Forward("expr")
    expr.define(choice(parenthesized(expr), signed_integer()))

    for source in ("((42))", "((42)", "-7"):
        result = invoke(expr, source)
        print(f"{source!r}: {result.unwrap().value if result else 'no match'}")

    print(f"cycles: {detect_cycles(expr)}")
    print()


def example_4_errors() -> None:
    """Grammar and resource errors raise; non-matches never do."""
    from parselet import DepthLimitExceededError, Forward, ParseRunner, UnboundParserError
    from parselet.syntax.parser import char, choice, parenthesized, signed_integer

    print("=" * 60)
    print("Example 4: Errors")
    print("=" * 60)

    pending: Forward[str] = Forward("pending")
    try:
        ParseRunner().run(choice(char("a"), pending), "a")
    except UnboundParserError as error:
        print(error)

    shallow: Forward[int] = Forward("shallow", max_depth=3)
    shallow.define(choice(parenthesized(shallow), signed_integer()))
    try:
        ParseRunner().run(shallow, "((((1))))")
    except DepthLimitExceededError as error:
        print(error)
    print()


if __name__ == "__main__":
    example_1_numbers()
    example_2_lists()
    example_3_recursion()
    example_4_errors()
