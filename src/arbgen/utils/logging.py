"""Logging utilities.

Purpose:
    Centralize logging configuration for the package.

Key responsibilities:
    - Provide a helper to obtain loggers namespaced under ``arbgen``.
    - Allow an optional verbose/debug mode for the command line.

Public contracts:
    - ``get_logger(name)``: Return a logger for the package.
    - ``configure_logging(verbose)``: Attach a single stderr handler.

Notes/Edge cases:
    - Library code never configures handlers; the package root carries a
      ``NullHandler`` so that records are dropped unless an application
      opts in.
    - ``configure_logging`` is idempotent; repeated calls leave exactly one
      handler attached.
"""

from __future__ import annotations

import logging
import sys

__all__ = ["ROOT_LOGGER_NAME", "get_logger", "configure_logging"]

ROOT_LOGGER_NAME = "arbgen"

_HANDLER_NAME = "arbgen-cli"
_FORMAT = "%(levelname)s %(name)s: %(message)s"

logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


def get_logger(name: str) -> logging.Logger:
    """Return a logger for ``name`` nested under the package root logger."""

    if name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def configure_logging(verbose: bool = False) -> logging.Logger:
    """Attach a single stderr handler to the package root logger.

    A handler installed by an earlier call is replaced so that it always
    writes to the current ``sys.stderr``.  ``verbose`` selects ``DEBUG``
    instead of ``WARNING``.
    """

    root = logging.getLogger(ROOT_LOGGER_NAME)
    level = logging.DEBUG if verbose else logging.WARNING
    for old in [h for h in root.handlers if h.get_name() == _HANDLER_NAME]:
        root.removeHandler(old)
    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter(_FORMAT))
    root.addHandler(handler)
    root.setLevel(level)
    return root
