"""Tests for sequencing, choice, repetition, transform and optional combinators."""

from __future__ import annotations

import pytest

from parselet.diagnostics import DiagnosticCode, GrammarError
from parselet.syntax.cursor import Cursor, ParseResult
from parselet.syntax.maybe import ABSENT, Maybe, Present
from parselet.syntax.parser import (
    any_char,
    between,
    bind,
    chain,
    char,
    choice,
    collect,
    collect_many,
    digit,
    fail,
    fold_while,
    fold_while1,
    invoke,
    keyword,
    optional_match,
    pair,
    pure,
    separated_by,
    separated_by1,
    skip_left,
    skip_right,
    skip_while,
    skip_while1,
    transform,
    unsigned_integer,
)

# ============================================================================
# SEQUENCING
# ============================================================================


class TestBind:
    """bind() chooses the next parser from the previous value."""

    def test_value_selects_next_parser(self) -> None:
        """A length prefix decides how many characters follow."""
        counted = bind(digit(), lambda n: collect(any_char()).map(lambda cs: cs[:n]))
        assert invoke(counted, "2ab").unwrap().value == ["a", "b"]

    def test_second_starts_where_first_ended(self) -> None:
        result = invoke(bind(char("a"), lambda _v: char("b")), "ab").unwrap()
        assert result.cursor.pos == 2

    def test_first_failure(self) -> None:
        calls: list[object] = []

        def build(value: object) -> object:
            calls.append(value)
            return pure(value)

        assert invoke(bind(char("a"), build), "b") is ABSENT  # type: ignore[arg-type]
        assert calls == []

    def test_second_failure(self) -> None:
        assert invoke(bind(char("a"), lambda _v: char("b")), "ac") is ABSENT

    def test_function_may_return_plain_parse_function(self) -> None:
        def end_here(cursor: Cursor) -> Maybe[ParseResult[str]]:
            return Present(ParseResult("done", cursor))

        assert invoke(bind(char("a"), lambda _v: end_here), "a").unwrap().value == "done"


class TestPair:
    """pair() keeps both values as a 2-tuple."""

    def test_both_match(self) -> None:
        result = invoke(pair(char("a"), char("b")), "abc").unwrap()

        assert result.value == ("a", "b")
        assert result.cursor.pos == 2

    @pytest.mark.parametrize("source", ["xb", "ax", "a", ""])
    def test_either_failure_fails(self, source: str) -> None:
        assert invoke(pair(char("a"), char("b")), source) is ABSENT

    def test_nested_pairs_stay_nested(self) -> None:
        parser = pair(pair(char("a"), char("b")), char("c"))
        assert invoke(parser, "abc").unwrap().value == (("a", "b"), "c")


class TestChain:
    """chain() flattens tuple-valued steps into one tuple."""

    def test_flat_values(self) -> None:
        parser = chain(char("a"), char("b"), char("c"))
        assert invoke(parser, "abc").unwrap().value == ("a", "b", "c")

    def test_nested_chain_is_spliced(self) -> None:
        parser = chain(chain(char("a"), char("b")), char("c"))
        assert invoke(parser, "abc").unwrap().value == ("a", "b", "c")

    def test_pair_is_spliced(self) -> None:
        parser = chain(pair(char("a"), char("b")), char("c"))
        assert invoke(parser, "abc").unwrap().value == ("a", "b", "c")

    def test_list_values_kept_whole(self) -> None:
        parser = chain(collect(char("a")), char("b"))
        assert invoke(parser, "aab").unwrap().value == (["a", "a"], "b")

    def test_single_parser(self) -> None:
        assert invoke(chain(char("a")), "a").unwrap().value == ("a",)

    def test_failure_in_middle(self) -> None:
        assert invoke(chain(char("a"), char("b"), char("c")), "axc") is ABSENT

    def test_empty_chain_rejected(self) -> None:
        with pytest.raises(GrammarError) as exc_info:
            chain()

        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.EMPTY_SEQUENCE


class TestSkipAndBetween:
    """skip_left(), skip_right() and between() discard delimiters."""

    def test_skip_left(self) -> None:
        result = invoke(skip_left(char("$"), unsigned_integer()), "$12").unwrap()

        assert result.value == 12
        assert result.cursor.pos == 3

    def test_skip_right(self) -> None:
        result = invoke(skip_right(unsigned_integer(), char(";")), "12;").unwrap()

        assert result.value == 12
        assert result.cursor.pos == 3

    def test_skip_right_requires_trailer(self) -> None:
        assert invoke(skip_right(unsigned_integer(), char(";")), "12") is ABSENT

    def test_between(self) -> None:
        parser = between(char("["), unsigned_integer(), char("]"))

        assert invoke(parser, "[7]").unwrap().value == 7
        assert invoke(parser, "[7") is ABSENT
        assert parser.name == "between"


# ============================================================================
# ORDERED CHOICE
# ============================================================================


class TestChoice:
    """choice() is ordered and backtracks to the original cursor."""

    def test_first_match_wins(self) -> None:
        assert invoke(choice(char("a"), any_char()), "a").unwrap().value == "a"

    def test_left_biased_even_if_later_is_longer(self) -> None:
        """The first success is final; a longer later match is never tried."""
        parser = choice(keyword("a"), keyword("ab"))
        result = invoke(parser, "ab").unwrap()

        assert result.value == "a"
        assert result.cursor.pos == 1

    def test_backtracks_after_partial_match(self) -> None:
        """The second alternative starts where the first one started."""
        parser = choice(keyword("abc"), keyword("abd"))
        assert invoke(parser, "abd").unwrap().value == "abd"

    def test_all_fail(self) -> None:
        assert invoke(choice(char("a"), char("b")), "c") is ABSENT

    def test_fail_is_identity(self) -> None:
        assert invoke(choice(fail(), char("a")), "a") == invoke(char("a"), "a")
        assert invoke(choice(char("a"), fail()), "b") is ABSENT

    def test_single_alternative_returned_as_is(self) -> None:
        parser = char("a")
        assert choice(parser) is parser

    def test_empty_choice_rejected(self) -> None:
        with pytest.raises(GrammarError) as exc_info:
            choice()

        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.EMPTY_CHOICE

    def test_children_in_order(self) -> None:
        a, b = char("a"), char("b")
        assert choice(a, b).children == (a, b)


# ============================================================================
# REPETITION
# ============================================================================


class TestFoldWhile:
    """fold_while() and fold_while1() accumulate repeated matches."""

    def test_fold_digits(self) -> None:
        result = invoke(fold_while(digit(), 0, lambda acc, d: acc * 10 + d), "123x").unwrap()

        assert result.value == 123
        assert result.cursor.pos == 3

    def test_zero_matches_returns_initial(self) -> None:
        result = invoke(fold_while(digit(), "init", lambda acc, _d: acc), "x").unwrap()

        assert result.value == "init"
        assert result.cursor.pos == 0

    def test_fold_while1_requires_one(self) -> None:
        assert invoke(fold_while1(digit(), 0, lambda acc, d: acc + d), "x") is ABSENT

    def test_fold_while1_one_match(self) -> None:
        result = invoke(fold_while1(digit(), 0, lambda acc, d: acc + d), "5x").unwrap()

        assert result.value == 5
        assert result.cursor.pos == 1

    def test_stops_at_end(self) -> None:
        parser = fold_while(any_char(), "", lambda acc, c: acc + c)
        assert invoke(parser, "abcdef", end=3).unwrap().value == "abc"

    def test_zero_width_match_terminates(self) -> None:
        """A parser that never consumes is folded once, then the loop stops."""
        parser = fold_while(pure(1), 0, lambda acc, v: acc + v)
        result = invoke(parser, "abc").unwrap()

        assert result.value == 1
        assert result.cursor.pos == 0

    def test_zero_width_fold_while1_terminates(self) -> None:
        parser = fold_while1(pure(1), 0, lambda acc, v: acc + v)
        assert invoke(parser, "").unwrap().value == 1

    def test_combine_order(self) -> None:
        """combine receives (accumulator, value) in match order."""
        parser = fold_while(any_char(), (), lambda acc, c: (*acc, c))
        assert invoke(parser, "xyz").unwrap().value == ("x", "y", "z")


class TestCollect:
    """collect() and collect_many() gather matches into lists."""

    def test_collect_in_order(self) -> None:
        assert invoke(collect(digit()), "314x").unwrap().value == [3, 1, 4]

    def test_collect_zero_matches(self) -> None:
        result = invoke(collect(digit()), "x").unwrap()

        assert result.value == []
        assert result.cursor.pos == 0

    def test_collect_many_requires_one(self) -> None:
        assert invoke(collect_many(digit()), "x") is ABSENT
        assert invoke(collect_many(digit()), "9").unwrap().value == [9]

    def test_results_are_independent(self) -> None:
        """Each invocation builds a fresh list."""
        parser = collect(digit())
        first = invoke(parser, "12").unwrap().value
        first.append(99)

        assert invoke(parser, "12").unwrap().value == [1, 2]

    def test_long_input_does_not_recurse(self) -> None:
        """Repetition is iterative; input length is not bounded by the stack."""
        result = invoke(collect(char("a")), "a" * 5000).unwrap()

        assert len(result.value) == 5000
        assert result.cursor.is_eof


class TestSkipWhile:
    """skip_while() and skip_while1() consume and discard."""

    def test_skip_while(self) -> None:
        result = invoke(skip_while(char(" ")), "   x").unwrap()

        assert result.value is None
        assert result.cursor.pos == 3

    def test_skip_while_zero(self) -> None:
        assert invoke(skip_while(char(" ")), "x").unwrap().cursor.pos == 0

    def test_skip_while1(self) -> None:
        assert invoke(skip_while1(char(" ")), "x") is ABSENT
        assert invoke(skip_while1(char(" ")), " x").unwrap().cursor.pos == 1


class TestSeparatedBy:
    """separated_by() and separated_by1() parse delimited lists."""

    def test_comma_list(self) -> None:
        result = invoke(separated_by1(unsigned_integer(), char(",")), "1,22,333").unwrap()

        assert result.value == [1, 22, 333]
        assert result.cursor.is_eof

    def test_trailing_separator_not_consumed(self) -> None:
        result = invoke(separated_by1(unsigned_integer(), char(",")), "1,2,").unwrap()

        assert result.value == [1, 2]
        assert result.cursor.pos == 3

    def test_separated_by1_requires_item(self) -> None:
        assert invoke(separated_by1(unsigned_integer(), char(",")), ",1") is ABSENT

    def test_separated_by_empty(self) -> None:
        result = invoke(separated_by(unsigned_integer(), char(",")), "x").unwrap()

        assert result.value == []
        assert result.cursor.pos == 0

    def test_separated_by_single(self) -> None:
        assert invoke(separated_by(unsigned_integer(), char(",")), "7").unwrap().value == [7]


# ============================================================================
# TRANSFORM & OPTIONAL
# ============================================================================


class TestTransform:
    """transform() changes the value, never the consumption."""

    def test_maps_value(self) -> None:
        result = invoke(transform(unsigned_integer(), lambda n: n * 2), "21x").unwrap()

        assert result.value == 42
        assert result.cursor.pos == 2

    def test_failure_passes_through(self) -> None:
        calls: list[object] = []
        assert invoke(transform(digit(), calls.append), "x") is ABSENT
        assert calls == []

    def test_name(self) -> None:
        assert transform(char("a"), str.upper).name == "map(char('a'))"


class TestOptionalMatch:
    """optional_match() never fails."""

    def test_match(self) -> None:
        result = invoke(optional_match(char("-")), "-5").unwrap()

        assert result.value == Present("-")
        assert result.cursor.pos == 1

    def test_no_match_keeps_cursor(self) -> None:
        result = invoke(optional_match(char("-")), "5").unwrap()

        assert result.value is ABSENT
        assert result.cursor.pos == 0

    def test_at_eof(self) -> None:
        assert invoke(optional_match(char("-")), "").unwrap().value is ABSENT

    def test_falsy_value_is_present(self) -> None:
        """A match yielding 0 is distinguishable from no match."""
        assert invoke(optional_match(digit()), "0").unwrap().value == Present(0)
