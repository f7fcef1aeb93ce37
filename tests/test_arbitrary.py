import pytest

from arbgen import Arbitrary, array_of, make_rng, smaller
from arbgen import arbitrary as arbs


def test_nat_shrink_sequence() -> None:
    assert smaller.nat(8) == [4, 2, 1, 0]
    assert smaller.nat(1) == [0]
    assert smaller.nat(0) == []


def test_integer_shrink_keeps_sign() -> None:
    assert smaller.integer(-8) == [-4, -2, -1, 0]
    assert smaller.integer(5) == [2, 1, 0]
    assert smaller.integer(0) == []


def test_string_shrink_strictly_decreasing() -> None:
    out = smaller.string("abcd")
    assert out == ["ab", "a", ""]
    lengths = [len(s) for s in out]
    assert all(a > b for a, b in zip([4] + lengths, lengths))
    assert smaller.string("") == []


def test_nestring_shrink_stays_non_empty() -> None:
    assert smaller.nestring("abcd") == ["ab", "a"]
    assert smaller.nestring("abc") == ["a"]
    assert smaller.nestring("a") == []
    assert smaller.nestring("") == []


def test_boolean_shrink() -> None:
    assert smaller.boolean(True) == [False]
    assert smaller.boolean(False) == []


def test_array_shrink_removes_chunks() -> None:
    out = smaller.array([1, 2, 3, 4])
    assert out[0] == []
    assert [3, 4] in out and [1, 2] in out
    assert [2, 3, 4] in out and [1, 2, 3] in out
    assert all(len(c) < 4 for c in out)


def test_array_shrink_with_element_strategy() -> None:
    out = smaller.array([4], smaller.nat)
    assert out == [[], [2], [1], [0]]


def test_array_shrink_empty() -> None:
    assert smaller.array([], smaller.nat) == []


@pytest.mark.parametrize(
    ("shrink", "value"),
    [
        (smaller.nat, 1000),
        (smaller.integer, -77),
        (smaller.string, "hello world"),
        (smaller.nestring, "hello"),
        (lambda xs: smaller.array(xs, smaller.nat), [5, 0, 9]),
    ],
)
def test_candidates_exclude_original_and_terminate(shrink: object, value: object) -> None:
    steps = 0
    current = value
    while True:
        candidates = shrink(current)  # type: ignore[operator]
        assert current not in candidates
        if not candidates:
            break
        current = candidates[-1] if isinstance(value, list) else candidates[0]
        steps += 1
        assert steps < 10_000


def test_arbitrary_defaults() -> None:
    arb = Arbitrary(arbs.nat.generator)
    assert arb.shrinks(5) == []
    assert arb.display(5) == "5"


def test_arbitrary_show() -> None:
    arb = Arbitrary(arbs.nat.generator, smaller.nat, show=lambda x: f"<{x}>")
    assert arb.display(3) == "<3>"
    assert arb.shrinks(2) == [1, 0]


def test_builtin_arbitraries_generate() -> None:
    rng = make_rng(1)
    assert isinstance(arbs.nat.generator.generate(rng), int)
    assert isinstance(arbs.ascii.generator.generate(rng), str)
    assert len(arbs.neascii.generator.generate(rng)) >= 1
    assert arbs.boolean.generator.generate(rng) in (True, False)


def test_array_of_shrinks_and_shows() -> None:
    arb = array_of(arbs.nat)
    assert arb.display([1, 2]) == "[1, 2]"
    assert arb.shrinks([2]) == [[], [1], [0]]
    value = arb.generator.generate(make_rng(3), 20)
    assert isinstance(value, list)


def test_builtin_registry() -> None:
    assert set(arbs.BUILTINS) == {"nat", "int", "boolean", "ascii", "neascii", "nats"}
    assert arbs.BUILTINS["nat"] is arbs.nat
