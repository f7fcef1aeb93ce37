import logging

import pytest

from arbgen import GenerationExhaustedError, make_rng, nat
from arbgen.utils.logging import configure_logging, get_logger


def test_get_logger_namespaces() -> None:
    assert get_logger("foo").name == "arbgen.foo"
    assert get_logger("arbgen.rng").name == "arbgen.rng"
    assert get_logger("arbgen").name == "arbgen"


def test_configure_logging_is_idempotent() -> None:
    root = configure_logging(verbose=True)
    count = len(root.handlers)
    configure_logging(verbose=False)
    assert len(root.handlers) == count
    assert root.level == logging.WARNING


def test_entropy_seed_is_logged(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="arbgen"):
        make_rng()
    assert any("derived rng seed" in r.getMessage() for r in caplog.records)


def test_exhaustion_is_logged(caplog: pytest.LogCaptureFixture) -> None:
    gen = nat.such_that(lambda x: False, max_attempts=3)
    with caplog.at_level(logging.DEBUG, logger="arbgen"):
        with pytest.raises(GenerationExhaustedError):
            gen.generate(make_rng(1))
    assert any("rejected 3" in r.getMessage() for r in caplog.records)
