"""Generator core and primitive generators.

A :class:`Generator` wraps a deferred computation ``(state, size) -> value``.
Nothing is drawn until :meth:`Generator.generate` is called; combinators only
build new wrappers and never mutate the generators they compose.  Every
composite draw threads one :class:`~arbgen.rng.RngState` through its parts
sequentially, so the order of sub-draws is part of the determinism contract.

``size`` bounds structural complexity (collection lengths, recursion depth),
not numeric magnitude.  It defaults to :data:`DEFAULT_SIZE`.
"""

from __future__ import annotations

import math
from collections.abc import Callable
from typing import Final, Generic, TypeVar

from .rng import RngState, make_rng, random_int32
from .utils.errors import ConfigurationError, GenerationExhaustedError
from .utils.logging import get_logger

__all__ = [
    "DEFAULT_SIZE",
    "DEFAULT_MAX_ATTEMPTS",
    "Generator",
    "of",
    "interval",
    "logsize",
    "int_",
    "nat",
    "float_",
    "boolean",
]

A = TypeVar("A")
B = TypeVar("B")

DEFAULT_SIZE: Final = 100
DEFAULT_MAX_ATTEMPTS: Final = 100

_UINT32_OFFSET: Final = 2**31
_UINT32_RANGE: Final = 2**32

log = get_logger(__name__)


class Generator(Generic[A]):
    """Deferred, state-consuming computation producing one ``A`` per draw."""

    __slots__ = ("_generate",)

    def __init__(self, generate: Callable[[RngState, int], A]) -> None:
        self._generate = generate

    def generate(self, rng: RngState | None = None, size: int | None = None) -> A:
        """Draw one value.

        Parameters
        ----------
        rng:
            State to draw from; advanced in place.  When omitted a fresh
            entropy-seeded state is used and the draw is not reproducible.
        size:
            Non-negative complexity bound.  Defaults to :data:`DEFAULT_SIZE`.
        """

        if rng is None:
            rng = make_rng()
        if size is None:
            size = DEFAULT_SIZE
        elif size < 0:
            raise ConfigurationError(f"size must be non-negative, got {size}")
        return self._generate(rng, size)

    def map(self, f: Callable[[A], B]) -> "Generator[B]":
        """Return a generator applying ``f`` to each drawn value."""

        return Generator(lambda rng, size: f(self._generate(rng, size)))

    def chain(self, f: Callable[[A], "Generator[B]"]) -> "Generator[B]":
        """Monadic bind: draw, pick the next generator with ``f``, draw from it.

        Both draws use the same state and size.
        """

        return Generator(lambda rng, size: f(self._generate(rng, size))._generate(rng, size))

    def or_(self, that: "Generator[B]") -> "Generator[A | B]":
        """Choose between ``self`` and ``that`` with a fair coin."""

        return boolean.chain(lambda chance: self if chance else that)

    def __or__(self, that: "Generator[B]") -> "Generator[A | B]":
        return self.or_(that)

    def sized(self, size: int) -> "Generator[A]":
        """Return a generator that always draws with ``size``."""

        if size < 0:
            raise ConfigurationError(f"size must be non-negative, got {size}")
        return Generator(lambda rng, _size: self._generate(rng, size))

    def such_that(
        self, pred: Callable[[A], bool], max_attempts: int = DEFAULT_MAX_ATTEMPTS
    ) -> "Generator[A]":
        """Redraw until ``pred`` accepts a value.

        Raises :class:`~arbgen.utils.errors.GenerationExhaustedError` once
        ``max_attempts`` consecutive draws have been rejected.
        """

        if max_attempts < 1:
            raise ConfigurationError(f"max_attempts must be at least 1, got {max_attempts}")

        def draw(rng: RngState, size: int) -> A:
            for _ in range(max_attempts):
                output = self._generate(rng, size)
                if pred(output):
                    return output
            log.debug("such_that rejected %d consecutive draws", max_attempts)
            raise GenerationExhaustedError(max_attempts)

        return Generator(draw)

    def ntimes(self, n: int) -> "Generator[list[A]]":
        """Draw ``n`` values in sequence from the same state."""

        if n < 0:
            raise ConfigurationError(f"ntimes() count must be non-negative, got {n}")
        return Generator(lambda rng, size: [self._generate(rng, size) for _ in range(n)])


def of(value: A) -> Generator[A]:
    """Return a generator that always yields ``value`` without drawing."""

    return Generator(lambda rng, size: value)


def interval(min_value: int, max_value: int) -> Generator[int]:
    """Integers in the left-inclusive range ``[min_value, max_value)``.

    For magnitudes below ``2**32`` the unsigned draw is reduced modulo the
    magnitude.  This is slightly biased towards low values whenever the
    magnitude does not divide ``2**32``; the bias is accepted in exchange for
    a single draw per value.  Larger magnitudes scale the unsigned draw as a
    fraction of ``2**32``.
    """

    magnitude = max_value - min_value
    if magnitude <= 0:
        raise ConfigurationError(f"interval [{min_value}, {max_value}) is empty")

    if magnitude < _UINT32_RANGE:

        def draw(rng: RngState, size: int) -> int:
            return (random_int32(rng) + _UINT32_OFFSET) % magnitude + min_value

    else:

        def draw(rng: RngState, size: int) -> int:
            return (((random_int32(rng) + _UINT32_OFFSET) * magnitude) >> 32) + min_value

    return Generator(draw)


def logsize(size: int) -> int:
    """Compress ``size`` to roughly ``log2(size + 1)``.

    Collection and recursion combinators use this so that nested structures
    do not grow combinatorially with the size budget.
    """

    return max(round(math.log2(size + 1)), 0)


int_: Generator[int] = Generator(lambda rng, size: random_int32(rng))
nat: Generator[int] = Generator(lambda rng, size: random_int32(rng) + _UINT32_OFFSET)
float_: Generator[float] = Generator(
    lambda rng, size: (random_int32(rng) + _UINT32_OFFSET) / _UINT32_RANGE
)
boolean: Generator[bool] = interval(0, 2).map(lambda x: x != 0)

