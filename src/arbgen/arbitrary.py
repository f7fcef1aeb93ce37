"""Arbitraries: generators paired with shrink and display functions.

An :class:`Arbitrary` is the unit handed to a property-test runner.  The
runner draws trial inputs from :attr:`Arbitrary.generator`; when a trial
fails it asks :meth:`Arbitrary.shrinks` for candidates and retries them in
order, recursing on the first candidate that still fails.

Shrink contract
---------------
A shrink function returns a finite list of candidates, each strictly smaller
than its input under some well-founded measure, and never the input itself.
Repeated application therefore always reaches a value with no candidates,
which is what guarantees the runner's minimization loop terminates.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from types import SimpleNamespace
from typing import Generic, TypeVar

from . import combinators, generator
from .generator import Generator

__all__ = [
    "Arbitrary",
    "smaller",
    "nat",
    "integer",
    "boolean",
    "ascii",
    "neascii",
    "array_of",
    "BUILTINS",
]

A = TypeVar("A")


@dataclass(frozen=True, slots=True)
class Arbitrary(Generic[A]):
    """A generator with an optional shrink strategy and display function."""

    generator: Generator[A]
    shrink: Callable[[A], list[A]] | None = None
    show: Callable[[A], str] | None = None

    def shrinks(self, value: A) -> list[A]:
        """Return shrink candidates for ``value``; empty without a strategy."""

        if self.shrink is None:
            return []
        return self.shrink(value)

    def display(self, value: A) -> str:
        """Render ``value`` for diagnostics, falling back to ``repr``."""

        if self.show is None:
            return repr(value)
        return self.show(value)


# ---------------------------------------------------------------------------
# Shrink strategies
# ---------------------------------------------------------------------------


def _shrink_nat(x: int) -> list[int]:
    """Halve by right shift down to and including zero: ``8 -> [4, 2, 1, 0]``."""

    output: list[int] = []
    i = int(x)
    while i > 0:
        i >>= 1
        output.append(i)
    return output


def _shrink_integer(x: int) -> list[int]:
    """Shrink the magnitude of ``x`` towards zero keeping its sign."""

    if x < 0:
        return [-c for c in _shrink_nat(-x)]
    return _shrink_nat(x)


def _shrink_boolean(x: bool) -> list[bool]:
    return [False] if x else []


def _shrink_string(x: str) -> list[str]:
    """Halve the prefix length down to the empty string."""

    output: list[str] = []
    i = len(x)
    while i > 0:
        i >>= 1
        output.append(x[:i])
    return output


def _shrink_nestring(x: str) -> list[str]:
    """Halve the prefix length down to a single character."""

    output: list[str] = []
    i = len(x)
    while i > 1:
        i >>= 1
        output.append(x[:i])
    return output


def _shrink_array(xs: list[A], shr: Callable[[A], list[A]] | None = None) -> list[list[A]]:
    """Shrink a list by removing chunks, then by shrinking single elements.

    Chunks of ``n, n // 2, ..., 1`` elements are removed at aligned offsets
    ``0, k, 2k, ...``, so the empty list is always the first candidate.  When
    ``shr`` is given, each element is then replaced by each of its own shrink
    candidates, in index order.  Every candidate is either shorter or has one
    strictly smaller element.
    """

    n = len(xs)
    output: list[list[A]] = []
    k = n
    while k > 0:
        for start in range(0, n - k + 1, k):
            output.append(xs[:start] + xs[start + k :])
        k >>= 1
    if shr is not None:
        for i, x in enumerate(xs):
            for candidate in shr(x):
                output.append(xs[:i] + [candidate] + xs[i + 1 :])
    return output


smaller = SimpleNamespace(
    nat=_shrink_nat,
    integer=_shrink_integer,
    boolean=_shrink_boolean,
    string=_shrink_string,
    nestring=_shrink_nestring,
    array=_shrink_array,
)


# ---------------------------------------------------------------------------
# Built-in arbitraries
# ---------------------------------------------------------------------------

nat: Arbitrary[int] = Arbitrary(generator.nat, smaller.nat)
integer: Arbitrary[int] = Arbitrary(generator.int_, smaller.integer)
boolean: Arbitrary[bool] = Arbitrary(generator.boolean, smaller.boolean)
ascii: Arbitrary[str] = Arbitrary(combinators.ascii, smaller.string)
neascii: Arbitrary[str] = Arbitrary(combinators.neascii, smaller.nestring)


def array_of(arb: Arbitrary[A]) -> Arbitrary[list[A]]:
    """Lists of ``arb`` values, shrinking both length and elements."""

    def shrink(xs: list[A]) -> list[list[A]]:
        return smaller.array(xs, arb.shrink)

    def show(xs: list[A]) -> str:
        return "[" + ", ".join(arb.display(x) for x in xs) + "]"

    return Arbitrary(combinators.array(arb.generator), shrink, show)


BUILTINS: dict[str, Arbitrary[object]] = {
    "nat": nat,
    "int": integer,
    "boolean": boolean,
    "ascii": ascii,
    "neascii": neascii,
    "nats": array_of(nat),
}
