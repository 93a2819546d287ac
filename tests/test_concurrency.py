"""Concurrent access tests.

Tests for thread safety of shared grammars:
- Concurrent invocations of one grammar
- Per-thread depth counting in Forward placeholders
- Consistent results across threads

Structure:
    - TestConcurrentInvokeBasic: Essential tests (run in every CI build)
    - TestConcurrentInvokeIntensive: Property-based tests (fuzz-marked)
"""

from __future__ import annotations

import threading
from concurrent.futures import ThreadPoolExecutor

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from parselet.core import DepthLimitExceededError
from parselet.syntax.cursor import Cursor, ParseResult
from parselet.syntax.maybe import Maybe
from parselet.syntax.parser import (
    Forward,
    ParseRunner,
    choice,
    invoke,
    parenthesized,
    signed_integer,
)


def _nested_expr(max_depth: int | None = None) -> Forward[int]:
    expr: Forward[int] = Forward("expr", max_depth=max_depth)
    expr.define(choice(parenthesized(expr), signed_integer()))
    return expr


def _wrap(depth: int, number: int) -> str:
    return "(" * depth + str(number) + ")" * depth


# =============================================================================
# Essential Concurrency Tests (Run in every CI build)
# =============================================================================


class TestConcurrentInvokeBasic:
    """Essential thread safety tests that run in every CI build."""

    def test_shared_grammar_many_threads(self) -> None:
        """Many threads parsing different inputs with one grammar."""
        expr = _nested_expr()
        inputs = [(_wrap(i % 10, i), i) for i in range(200)]

        with ThreadPoolExecutor(max_workers=8) as executor:
            results = list(executor.map(lambda item: invoke(expr, item[0]), inputs))

        for result, (_source, expected) in zip(results, inputs, strict=True):
            assert result.unwrap().value == expected
            assert result.unwrap().cursor.is_eof

    def test_shared_runner(self) -> None:
        """A ParseRunner holds no per-run state."""
        runner = ParseRunner()
        expr = _nested_expr()

        with ThreadPoolExecutor(max_workers=4) as executor:
            values = list(
                executor.map(lambda n: runner.run(expr, _wrap(3, n)).unwrap().value, range(50))
            )

        assert values == list(range(50))

    def test_depth_is_counted_per_thread(self) -> None:
        """Threads nesting at the same time do not add to each other's depth.

        Each thread parses input just inside the limit while all threads are
        held at a barrier inside the grammar; a shared counter would exceed
        the limit.
        """
        thread_count = 4
        barrier = threading.Barrier(thread_count)
        expr: Forward[int] = Forward("expr", max_depth=4)

        def number_after_barrier(cursor: Cursor) -> Maybe[ParseResult[int]]:
            barrier.wait(timeout=10)
            return signed_integer()(cursor)

        expr.define(choice(parenthesized(expr), number_after_barrier))

        errors: list[BaseException] = []
        values: list[int] = []
        lock = threading.Lock()

        def worker() -> None:
            try:
                value = invoke(expr, _wrap(3, 7)).unwrap().value
            except (DepthLimitExceededError, threading.BrokenBarrierError) as error:
                with lock:
                    errors.append(error)
            else:
                with lock:
                    values.append(value)

        threads = [threading.Thread(target=worker) for _ in range(thread_count)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert errors == []
        assert values == [7] * thread_count

    def test_limit_error_in_one_thread_does_not_affect_others(self) -> None:
        expr = _nested_expr(max_depth=5)

        def parse(source: str) -> object:
            try:
                return invoke(expr, source).unwrap().value
            except DepthLimitExceededError:
                return "too deep"

        sources = [_wrap(10, 1), _wrap(2, 2)] * 20
        with ThreadPoolExecutor(max_workers=6) as executor:
            outcomes = list(executor.map(parse, sources))

        assert outcomes == ["too deep", 2] * 20


# =============================================================================
# Intensive Tests (fuzz-marked)
# =============================================================================


@pytest.mark.fuzz
class TestConcurrentInvokeIntensive:
    """Property-based concurrency tests. Run with: pytest -m fuzz"""

    @given(
        cases=st.lists(
            st.tuples(st.integers(0, 20), st.integers(-1000, 1000)), min_size=1, max_size=40
        )
    )
    @settings(max_examples=50, deadline=None)
    def test_results_match_sequential(self, cases: list[tuple[int, int]]) -> None:
        """PROPERTY: concurrent results equal sequential results."""
        expr = _nested_expr()
        sources = [_wrap(depth, number) for depth, number in cases]
        sequential = [invoke(expr, source) for source in sources]

        with ThreadPoolExecutor(max_workers=8) as executor:
            concurrent = list(executor.map(lambda source: invoke(expr, source), sources))

        assert concurrent == sequential
