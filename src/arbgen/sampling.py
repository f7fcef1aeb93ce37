"""Draw batches of values from one threaded generator state.

``sample`` draws ``count`` values in sequence from a single
:class:`~arbgen.rng.RngState`, so a batch is fully determined by its seed,
size and count.  ``sample_from_config`` does the same with the settings of a
loaded :class:`~arbgen.config.ConfigModel`.  The seed actually used is
returned with the values so callers can record it.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Generic, TypeVar

from .config import ConfigModel
from .generator import DEFAULT_SIZE, Generator
from .rng import entropy_seed, make_rng
from .utils.errors import ConfigurationError
from .utils.logging import get_logger

__all__ = ["Sample", "iter_values", "sample", "sample_from_config"]

A = TypeVar("A")

log = get_logger(__name__)


@dataclass(slots=True, frozen=True)
class Sample(Generic[A]):
    """A batch of drawn values together with the inputs that reproduce it."""

    seed: int
    size: int
    values: list[A] = field(default_factory=list)


def iter_values(gen: Generator[A], *, seed: int, size: int, count: int) -> Iterator[A]:
    """Yield ``count`` values drawn in order from one state seeded with ``seed``."""

    if count < 0:
        raise ConfigurationError(f"count must be non-negative, got {count}")
    rng = make_rng(seed)
    for _ in range(count):
        yield gen.generate(rng, size)


def sample(
    gen: Generator[A],
    *,
    count: int,
    seed: int | None = None,
    size: int = DEFAULT_SIZE,
) -> Sample[A]:
    """Draw ``count`` values; a missing ``seed`` is taken from entropy."""

    if seed is None:
        seed = entropy_seed()
    log.debug("sampling %d values with seed=%d size=%d", count, seed, size)
    values = list(iter_values(gen, seed=seed, size=size, count=count))
    return Sample(seed=seed, size=size, values=values)


def sample_from_config(gen: Generator[A], cfg: ConfigModel) -> Sample[A]:
    """Draw a batch using ``cfg.seed`` and ``cfg.sampling``."""

    return sample(
        gen,
        count=cfg.sampling.count,
        seed=cfg.seed.value,
        size=cfg.sampling.size,
    )
