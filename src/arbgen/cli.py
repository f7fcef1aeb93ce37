"""Typer-based command line interface for inspecting generators.

The commands are diagnostic helpers around the library: ``sample`` draws
values from a built-in arbitrary, ``shrink`` lists the shrink candidates of
a value and ``rng`` dumps raw generator words.  Given the printed seed, every
command's output can be reproduced exactly.

Exit codes
----------
0 success
2 usage error (unknown kind, value that cannot be parsed, seed out of range)
4 configuration error
5 generation error (filter exhaustion)
"""

from __future__ import annotations

import os
import sys
from collections.abc import Callable
from pathlib import Path
from typing import Any, Optional

import typer
import yaml
from pydantic import ValidationError

from .arbitrary import BUILTINS, Arbitrary
from .config import ConfigModel, load_config
from .rng import make_rng, random_int32
from .sampling import sample
from .utils.errors import ConfigurationError, GenerationExhaustedError
from .utils.logging import configure_logging, get_logger

if not sys.stdout.isatty():  # pragma: no cover - CLI test context
    os.environ.setdefault("NO_COLOR", "1")
    os.environ.setdefault("RICH_DISABLE_NO_COLOR", "1")

app = typer.Typer(
    name="arbgen",
    help="Inspect seeded generators. Use 'arbgen sample KIND' to draw values.",
)

log = get_logger(__name__)

EXIT_USAGE = 2
EXIT_CONFIG = 4
EXIT_GENERATION = 5

SEED_MAX = 2**32 - 1


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _safe_exit(code: int, msg: str | None = None) -> None:
    """Exit the CLI with ``code`` emitting ``msg`` to stderr if provided."""

    if msg:
        typer.echo(msg, err=True)
    raise typer.Exit(code)


def _parse_bool(raw: str) -> bool:
    lowered = raw.strip().lower()
    if lowered in {"true", "1", "yes"}:
        return True
    if lowered in {"false", "0", "no"}:
        return False
    raise ValueError(f"not a boolean: {raw!r}")


def _parse_ints(raw: str) -> list[int]:
    body = raw.strip().removeprefix("[").removesuffix("]")
    return [int(part) for part in body.split(",") if part.strip()]


_PARSERS: dict[str, Callable[[str], Any]] = {
    "nat": int,
    "int": int,
    "boolean": _parse_bool,
    "ascii": str,
    "neascii": str,
    "nats": _parse_ints,
}


def _lookup(kind: str) -> Arbitrary[Any]:
    arb = BUILTINS.get(kind)
    if arb is None:
        known = ", ".join(sorted(BUILTINS))
        _safe_exit(EXIT_USAGE, f"Unknown kind {kind!r}; expected one of: {known}")
    return arb  # type: ignore[return-value]


def _load(config_path: Path | None) -> ConfigModel:
    try:
        return load_config(config_path)
    except (OSError, yaml.YAMLError, ValidationError, ConfigurationError) as exc:
        _safe_exit(EXIT_CONFIG, f"Configuration error: {exc}")
        raise  # pragma: no cover - _safe_exit always raises


@app.callback()
def main() -> None:
    """Entry point for the arbgen command group."""
    pass


@app.command("sample")
def sample_cmd(
    kind: str = typer.Argument(..., help="Built-in arbitrary to draw from"),  # noqa: B008
    seed: Optional[int] = typer.Option(  # noqa: B008
        None,
        "--seed",
        min=0,
        max=SEED_MAX,
        help="32-bit seed; defaults to config, then entropy",
    ),
    size: Optional[int] = typer.Option(None, "--size", help="Size parameter"),  # noqa: B008
    count: Optional[int] = typer.Option(  # noqa: B008
        None, "--count", "-n", help="Number of values to draw"
    ),
    config_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--config", help="YAML config to override defaults"
    ),
    verbose: bool = typer.Option(  # noqa: B008
        False, "--verbose", "-v", help="Emit debug logging to stderr"
    ),
) -> None:
    """Draw values from ``kind`` and print one per line."""

    configure_logging(verbose)
    cfg = _load(config_path)
    arb = _lookup(kind)

    size = cfg.sampling.size if size is None else size
    count = cfg.sampling.count if count is None else count
    seed = cfg.seed.value if seed is None else seed
    if size < 0 or count < 0:
        _safe_exit(EXIT_CONFIG, "Configuration error: --size and --count must be non-negative")

    try:
        batch = sample(arb.generator, count=count, seed=seed, size=size)
    except ConfigurationError as exc:
        _safe_exit(EXIT_CONFIG, f"Configuration error: {exc}")
    except GenerationExhaustedError as exc:
        _safe_exit(EXIT_GENERATION, f"Generation error: {exc}")

    typer.echo(f"seed: {batch.seed}", err=True)
    for value in batch.values:
        typer.echo(arb.display(value))


@app.command("shrink")
def shrink_cmd(
    kind: str = typer.Argument(..., help="Built-in arbitrary owning the value"),  # noqa: B008
    value: str = typer.Argument(..., help="Value to shrink"),  # noqa: B008
) -> None:
    """Print the shrink candidates of ``value`` one per line."""

    arb = _lookup(kind)
    try:
        parsed = _PARSERS[kind](value)
    except ValueError as exc:
        _safe_exit(EXIT_USAGE, f"Cannot parse {value!r} as {kind}: {exc}")
    for candidate in arb.shrinks(parsed):
        typer.echo(arb.display(candidate))


@app.command("rng")
def rng_cmd(
    seed: int = typer.Option(  # noqa: B008
        ..., "--seed", min=0, max=SEED_MAX, help="32-bit seed"
    ),
    count: int = typer.Option(5, "--count", "-n", help="Number of words"),  # noqa: B008
) -> None:
    """Print raw signed 32-bit words for ``seed``."""

    if count < 0:
        _safe_exit(EXIT_CONFIG, "Configuration error: --count must be non-negative")
    state = make_rng(seed)
    log.debug("rng words after warm-up: %s", state.words())
    for _ in range(count):
        typer.echo(str(random_int32(state)))


if __name__ == "__main__":  # pragma: no cover
    app()
