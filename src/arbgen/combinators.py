"""Structural combinators built on :class:`~arbgen.generator.Generator`.

Composite combinators draw their parts from one shared state in a fixed
order:

- ``record``: field declaration (mapping iteration) order
- ``ap`` and ``traverse``: left to right
- ``partitions``: input order, one bucket draw per input

Changing that order changes every downstream value for a given seed.

Invalid arguments (empty choice lists, non-positive weight totals) raise
:class:`~arbgen.utils.errors.ConfigurationError` when the combinator is
built, never during a draw.
"""

from __future__ import annotations

from bisect import bisect_right
from collections.abc import Callable, Iterable, Mapping, Sequence
from itertools import accumulate
from typing import Any, TypeVar

from .generator import Generator, interval, logsize
from .rng import RngState
from .utils.errors import ConfigurationError

__all__ = [
    "frequency",
    "array",
    "nearray",
    "record",
    "elements",
    "one_of",
    "ap",
    "literals",
    "shuffle",
    "recursive",
    "partitions",
    "traverse",
    "ascii",
    "neascii",
]

A = TypeVar("A")
B = TypeVar("B")

_UNIFORM_WEIGHT = 100
_BASE_CASE_ODDS = 3


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _variadic(args: tuple[Any, ...]) -> tuple[Any, ...]:
    """Accept either ``f(a, b, c)`` or ``f([a, b, c])``.

    Only a ``list`` is unpacked; a lone tuple is a single argument.
    """

    if len(args) == 1 and isinstance(args[0], list):
        return tuple(args[0])
    return args


def _cumulative_weights(weights: Sequence[int], *, what: str) -> list[int]:
    """Validate ``weights`` and return their running totals."""

    if not weights:
        raise ConfigurationError(f"{what} requires at least one weight")
    for weight in weights:
        if weight < 0:
            raise ConfigurationError(f"{what} weights must be non-negative, got {weight}")
    totals = list(accumulate(weights))
    if totals[-1] <= 0:
        raise ConfigurationError(f"{what} weights must sum to a positive total")
    return totals


def _pick(totals: list[int], choice: int) -> int:
    """Index of the first running total strictly greater than ``choice``."""

    return bisect_right(totals, choice)


def _draw_length(rng: RngState, low: int, high: int) -> int:
    """Draw a length in ``[low, high)``; an empty range yields ``low``."""

    if high <= low:
        return low
    return interval(low, high).generate(rng)


# ---------------------------------------------------------------------------
# Weighted and uniform choice
# ---------------------------------------------------------------------------


def frequency(*pairs: Any) -> Generator[Any]:
    """Weighted choice between generators.

    Accepts ``(weight, generator)`` pairs either as separate arguments or as a
    single list.  A draw in ``[0, total)`` selects the first generator whose
    cumulative weight exceeds it, so ties resolve in declaration order and a
    zero weight is never chosen.
    """

    items = _variadic(pairs)
    if not items:
        raise ConfigurationError("frequency() requires at least one (weight, generator) pair")
    weights = [weight for weight, _ in items]
    gens = [gen for _, gen in items]
    totals = _cumulative_weights(weights, what="frequency()")
    choice_gen = interval(0, totals[-1])

    def draw(rng: RngState, size: int) -> Any:
        choice = choice_gen.generate(rng)
        return gens[_pick(totals, choice)].generate(rng, size)

    return Generator(draw)


def elements(values: Sequence[A]) -> Generator[A]:
    """Uniform choice over a non-empty sequence of values."""

    elems = tuple(values)
    if not elems:
        raise ConfigurationError("elements() requires a non-empty sequence")
    index_gen = interval(0, len(elems))
    return Generator(lambda rng, size: elems[index_gen.generate(rng)])


def literals(*values: Any) -> Generator[Any]:
    """Uniform choice over opaque caller-supplied values.

    Intended for discrete values owned by another library, such as syntax
    nodes.  Accepts the values variadically or as one list.
    """

    elems = _variadic(values)
    if not elems:
        raise ConfigurationError("literals() requires at least one value")
    return elements(elems)


def one_of(*gens: Any) -> Generator[Any]:
    """Uniform choice among generators, given variadically or as one list or tuple."""

    if len(gens) == 1 and isinstance(gens[0], (list, tuple)):
        choices = tuple(gens[0])
    else:
        choices = gens
    if not choices:
        raise ConfigurationError("one_of() requires at least one generator")
    for choice in choices:
        if not isinstance(choice, Generator):
            raise ConfigurationError(f"one_of() expects generators, got {type(choice).__name__}")
    index_gen = interval(0, len(choices))

    def draw(rng: RngState, size: int) -> Any:
        return choices[index_gen.generate(rng)].generate(rng, size)

    return Generator(draw)


# ---------------------------------------------------------------------------
# Collections
# ---------------------------------------------------------------------------


def array(gen: Generator[A]) -> Generator[list[A]]:
    """Lists of length in ``[0, logsize(size))``; elements share the size."""

    def draw(rng: RngState, size: int) -> list[A]:
        length = _draw_length(rng, 0, logsize(size))
        return [gen.generate(rng, size) for _ in range(length)]

    return Generator(draw)


def nearray(gen: Generator[A]) -> Generator[list[A]]:
    """Non-empty lists of length in ``[1, logsize(size) + 1)``."""

    def draw(rng: RngState, size: int) -> list[A]:
        length = _draw_length(rng, 1, logsize(size) + 1)
        return [gen.generate(rng, size) for _ in range(length)]

    return Generator(draw)


def record(fields: Mapping[str, Generator[Any]]) -> Generator[dict[str, Any]]:
    """Draw each field in declaration order into a new ``dict``."""

    items = list(fields.items())

    def draw(rng: RngState, size: int) -> dict[str, Any]:
        return {key: gen.generate(rng, size) for key, gen in items}

    return Generator(draw)


def ap(*args: Any) -> Generator[Any]:
    """Applicative lift: ``ap(g1, g2, ..., fn)`` draws ``g1, g2, ...`` then calls ``fn``."""

    if not args or not callable(args[-1]):
        raise ConfigurationError("ap() requires a function as its last argument")
    *gens, fn = args

    def draw(rng: RngState, size: int) -> Any:
        results = [gen.generate(rng, size) for gen in gens]
        return fn(*results)

    return Generator(draw)


def traverse(items: Iterable[A], f: Callable[[A], Generator[B]]) -> Generator[list[B]]:
    """Draw ``f(item)`` for every item in order on one threaded state."""

    values = list(items)
    return Generator(lambda rng, size: [f(item).generate(rng, size) for item in values])


def shuffle(values: Sequence[A]) -> Generator[list[A]]:
    """Uniform random permutation of ``values`` (Fisher–Yates on a copy)."""

    source = list(values)

    def draw(rng: RngState, size: int) -> list[A]:
        output = list(source)
        n = len(output)
        for i in range(n - 1):
            j = i + interval(0, n - i).generate(rng)
            output[i], output[j] = output[j], output[i]
        return output

    return Generator(draw)


def partitions(
    inputs: Sequence[A], count_or_weights: int | Sequence[int]
) -> Generator[list[list[A]]]:
    """Split ``inputs`` into buckets by independent weighted draws.

    An integer gives that many equally weighted buckets; a sequence gives one
    bucket per weight.  Every input lands in exactly one bucket and each
    bucket keeps the inputs' relative order.
    """

    if isinstance(count_or_weights, int):
        if count_or_weights < 1:
            raise ConfigurationError(
                f"partitions() requires at least one bucket, got {count_or_weights}"
            )
        weights = [_UNIFORM_WEIGHT] * count_or_weights
    else:
        weights = list(count_or_weights)
    totals = _cumulative_weights(weights, what="partitions()")
    choice_gen = interval(0, totals[-1])
    source = list(inputs)

    def draw(rng: RngState, size: int) -> list[list[A]]:
        buckets: list[list[A]] = [[] for _ in weights]
        for item in source:
            buckets[_pick(totals, choice_gen.generate(rng))].append(item)
        return buckets

    return Generator(draw)


# ---------------------------------------------------------------------------
# Recursion
# ---------------------------------------------------------------------------


def recursive(
    gen_z: Generator[A], gen_s: Callable[[Generator[A]], Generator[A]]
) -> Generator[A]:
    """Tree-shaped values with a depth cap of ``logsize(size)``.

    At each level a one-in-three draw falls back to the base case ``gen_z``;
    otherwise ``gen_s`` wraps the generator built one level deeper.  The
    nesting is built with a loop, so the cap alone bounds the stack whatever
    the size.  Adapted from jsverify's ``generator.recursive``.
    """

    chance_gen = interval(0, _BASE_CASE_ODDS)

    def draw(rng: RngState, size: int) -> A:
        depth = 0
        limit = logsize(size)
        while depth < limit and chance_gen.generate(rng) != 0:
            depth += 1
        gen = gen_z
        for _ in range(depth):
            gen = gen_s(gen)
        return gen.generate(rng, size)

    return Generator(draw)


# ---------------------------------------------------------------------------
# Strings
# ---------------------------------------------------------------------------


def _chars(codes: list[int]) -> str:
    return "".join(map(chr, codes))


ascii: Generator[str] = array(interval(32, 127)).map(_chars)
neascii: Generator[str] = nearray(interval(32, 127)).map(_chars)
