"""Seeded generators and shrinkers for property-based testing.

The package provides a small deterministic PRNG (:mod:`arbgen.rng`), the
:class:`~arbgen.generator.Generator` combinator algebra
(:mod:`arbgen.generator`, :mod:`arbgen.combinators`) and
:class:`~arbgen.arbitrary.Arbitrary`, which pairs a generator with a shrink
strategy for use by an external property-test runner.
"""

from .arbitrary import Arbitrary, array_of, smaller
from .combinators import (
    ap,
    array,
    ascii,
    elements,
    frequency,
    literals,
    nearray,
    neascii,
    one_of,
    partitions,
    record,
    recursive,
    shuffle,
    traverse,
)
from .generator import (
    DEFAULT_MAX_ATTEMPTS,
    DEFAULT_SIZE,
    Generator,
    boolean,
    float_,
    int_,
    interval,
    logsize,
    nat,
    of,
)
from .rng import RngState, make_rng, random_int32
from .utils.errors import ArbgenError, ConfigurationError, GenerationExhaustedError

__version__ = "0.1.0"

__all__ = [
    "Arbitrary",
    "ArbgenError",
    "ConfigurationError",
    "DEFAULT_MAX_ATTEMPTS",
    "DEFAULT_SIZE",
    "GenerationExhaustedError",
    "Generator",
    "RngState",
    "ap",
    "array",
    "array_of",
    "ascii",
    "boolean",
    "elements",
    "float_",
    "frequency",
    "int_",
    "interval",
    "literals",
    "logsize",
    "make_rng",
    "nat",
    "nearray",
    "neascii",
    "of",
    "one_of",
    "partitions",
    "random_int32",
    "record",
    "recursive",
    "shuffle",
    "smaller",
    "traverse",
]
