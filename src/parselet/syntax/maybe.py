"""Present/Absent result type for parser outcomes.

A parser either matches (``Present`` carrying a value) or does not
(``ABSENT``). There is no third state: match failure is never an exception,
and a ``Present`` always carries its value, even when that value is ``None``
or otherwise falsy.

Design:
    - Both variants are frozen dataclasses (value semantics, hashable)
    - ``bool()`` reports presence, not the truthiness of the value
    - ``map``/``bind`` short-circuit on ``Absent`` so chains never unwrap
      an absent result
    - ``unwrap()`` on ``Absent`` is a programming error and raises

Example:
    >>> Present(2).map(lambda v: v * 10)
    Present(value=20)
    >>> ABSENT.map(lambda v: v * 10)
    ABSENT
    >>> Present(3).bind(lambda v: Present(v + 1) if v > 2 else ABSENT)
    Present(value=4)

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Literal, NoReturn

from parselet.diagnostics import AbsentValueError, ErrorTemplate

__all__ = ["ABSENT", "Absent", "Maybe", "Present", "from_optional"]


@dataclass(frozen=True, slots=True)
class Present[V]:
    """A result holding a value.

    Attributes:
        value: The carried value
    """

    value: V

    def __bool__(self) -> Literal[True]:
        return True

    @property
    def is_present(self) -> Literal[True]:
        return True

    @property
    def is_absent(self) -> Literal[False]:
        return False

    def map[U](self, f: Callable[[V], U]) -> "Present[U]":
        """Apply ``f`` to the value and wrap the outcome."""
        return Present(f(self.value))

    def bind[U](self, f: "Callable[[V], Maybe[U]]") -> "Maybe[U]":
        """Feed the value to ``f``, which produces the next result."""
        return f(self.value)

    then = bind

    def unwrap(self) -> V:
        return self.value

    def value_or[D](self, default: D) -> V:  # noqa: ARG002 - mirrors Absent.value_or
        return self.value


@dataclass(frozen=True, slots=True)
class Absent:
    """A result holding no value.

    All instances compare equal; use the module-level ``ABSENT`` singleton.
    """

    def __bool__(self) -> Literal[False]:
        return False

    def __repr__(self) -> str:
        return "ABSENT"

    @property
    def is_present(self) -> Literal[False]:
        return False

    @property
    def is_absent(self) -> Literal[True]:
        return True

    def map(self, f: Callable[..., object]) -> "Absent":  # noqa: ARG002
        return self

    def bind(self, f: Callable[..., object]) -> "Absent":  # noqa: ARG002
        return self

    then = bind

    def unwrap(self) -> NoReturn:
        """Raise: an absent result has no value.

        Raises:
            AbsentValueError: Always
        """
        raise AbsentValueError(ErrorTemplate.absent_unwrapped())

    def value_or[D](self, default: D) -> D:
        return default


ABSENT = Absent()

type Maybe[V] = Present[V] | Absent


def from_optional[V](value: V | None) -> Maybe[V]:
    """Convert ``None`` to ``ABSENT`` and anything else to ``Present``.

    Bridges plain functions that signal "no value" with ``None``.
    """
    if value is None:
        return ABSENT
    return Present(value)
