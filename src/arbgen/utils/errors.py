"""Typed exceptions raised while building or drawing from generators."""


class ArbgenError(Exception):
    """Base class for all package errors."""


class ConfigurationError(ArbgenError, ValueError):
    """Raised when a generator is constructed or invoked with invalid arguments.

    Examples are empty choice lists, non-positive weight totals, empty
    intervals and negative sizes.  These are reported eagerly rather than
    during a draw whenever the arguments are known up front.
    """


class GenerationExhaustedError(ArbgenError, RuntimeError):
    """Raised when a filtered generator never produced an accepted value."""

    def __init__(self, attempts: int) -> None:
        super().__init__(f"generation exhausted after {attempts} attempts")
        self.attempts = attempts
