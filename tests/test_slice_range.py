import random
import sys
import pytest
from seq_slice.bounds.slice_bounds import InvalidRangeError
from seq_slice.containers.indexed.indexed_seq import IndexedSeq
from seq_slice.containers.linked.linked_seq import LinkedSeq
from seq_slice.slicing.slice_range import (
    DEFAULT_LINKED_STRATEGY,
    slice_range,
    slice_with,
)


def test_letters_scenario() -> None:
    letters = ["a", "b", "c", "d", "e", "f", "g", "h", "i", "j"]
    assert slice_range(letters, 2, 6) == ["c", "d", "e", "f", "g"]


def test_empty_list_scenario() -> None:
    assert slice_range([], 0, 3) == []


def test_start_past_length_scenario() -> None:
    assert slice_range([1, 2, 3], 5, 9) == []


def test_numbers_scenario() -> None:
    assert slice_range([1, 2, 3, 4, 5], 1, 3) == [2, 3, 4]


def test_negative_start_raises() -> None:
    with pytest.raises(InvalidRangeError):
        slice_range([1, 2, 3], -1, 1)
    with pytest.raises(InvalidRangeError):
        slice_range(LinkedSeq.of(1, 2, 3), -1, 1)
    with pytest.raises(InvalidRangeError):
        slice_range(IndexedSeq.from_iterable([1, 2, 3]), -1, 1)
    with pytest.raises(InvalidRangeError):
        slice_range(iter([1, 2, 3]), -1, 1)


def test_negative_end_is_empty() -> None:
    assert slice_range([1, 2, 3], 0, -1) == []


@pytest.mark.parametrize("source, expected", [
    ("abcdef", "bcd"),
    (b"abcdef", b"bcd"),
    (("a", "b", "c", "d", "e", "f"), ("b", "c", "d")),
    (["a", "b", "c", "d", "e", "f"], ["b", "c", "d"]),
])
def test_builtin_types_preserved(source, expected) -> None:
    result = slice_range(source, 1, 3)
    assert result == expected
    assert type(result) is type(source)


def test_linked_seq_in_linked_seq_out() -> None:
    result = slice_range(LinkedSeq.of(1, 2, 3, 4, 5), 1, 3)
    assert isinstance(result, LinkedSeq)
    assert result == [2, 3, 4]


def test_indexed_seq_in_indexed_seq_out() -> None:
    result = slice_range(IndexedSeq.from_iterable([1, 2, 3, 4, 5]), 1, 3)
    assert isinstance(result, IndexedSeq)
    assert result == [2, 3, 4]


def test_generic_iterable_returns_list() -> None:
    assert slice_range(range(10), 2, 4) == range(2, 5)
    assert slice_range((x for x in range(10)), 2, 4) == [2, 3, 4]
    assert slice_range({"a": 1}.keys(), 0, 5) == ["a"]


def test_generic_iterable_huge_end_truncates() -> None:
    assert slice_range(iter([1, 2, 3]), 1, sys.maxsize) == [2, 3]
    assert slice_range(iter([1, 2, 3]), 1, 2**64) == [2, 3]
    assert slice_range([1, 2, 3], 1, 2**64) == [2, 3]
    assert slice_range(IndexedSeq.from_iterable([1, 2, 3]), 1, 2**64) == [2, 3]


def test_non_iterable_raises() -> None:
    with pytest.raises(TypeError, match="expects an iterable"):
        slice_range(42, 0, 1)  # type: ignore[call-overload]


def test_input_not_mutated() -> None:
    data = [1, 2, 3, 4]
    slice_range(data, 1, 2)
    assert data == [1, 2, 3, 4]


def test_result_is_a_copy() -> None:
    data = [1, 2, 3, 4]
    result = slice_range(data, 0, 3)
    result.append(5)
    assert data == [1, 2, 3, 4]


def test_default_linked_strategy() -> None:
    assert DEFAULT_LINKED_STRATEGY == "accumulator"


@pytest.mark.parametrize("name", ["recursive", "drop_take", "fold", "continuation"])
def test_explicit_strategy(name: str) -> None:
    assert slice_range(LinkedSeq.of(1, 2, 3, 4, 5), 1, 3, strategy=name) == [2, 3, 4]


def test_unknown_strategy() -> None:
    with pytest.raises(KeyError):
        slice_range(LinkedSeq.of(1, 2, 3), 0, 1, strategy="nope")


def test_slice_with_converts_input() -> None:
    result = slice_with("drop_take", [1, 2, 3, 4, 5], 1, 3)
    assert isinstance(result, LinkedSeq)
    assert result == [2, 3, 4]


def test_linked_default_handles_long_input() -> None:
    long_seq = LinkedSeq.from_iterable(range(200_000))
    assert len(slice_range(long_seq, 0, 199_999)) == 200_000


def _containers(items: list[int]) -> list[object]:
    return [items, tuple(items), LinkedSeq.from_iterable(items), IndexedSeq.from_iterable(items)]


@pytest.mark.parametrize("seed", range(10))
def test_properties(seed: int) -> None:
    rng = random.Random(seed)
    for _ in range(30):
        length = rng.randint(0, 25)
        items = list(range(100, 100 + length))
        for s in _containers(items):
            n = len(s)  # type: ignore[arg-type]

            # full-range slice is identity
            assert list(slice_range(s, 0, n - 1)) == items  # type: ignore[call-overload]

            if n == 0:
                assert list(slice_range(s, 0, rng.randint(0, 5))) == []  # type: ignore[call-overload]
                continue

            i = rng.randint(0, n - 1)
            k = rng.randint(i, n - 1)
            part = slice_range(s, i, k)  # type: ignore[call-overload]

            # length of an in-range slice
            assert len(part) == k - i + 1

            # reversed bounds give an empty result
            assert list(slice_range(s, k + 1, i)) == []  # type: ignore[call-overload]

            # end past the sequence truncates
            beyond = n + rng.randint(0, 10)
            assert (list(slice_range(s, i, beyond))  # type: ignore[call-overload]
                    == list(slice_range(s, i, n - 1)))  # type: ignore[call-overload]

            # slicing a slice from 0 is idempotent
            assert list(slice_range(part, 0, k - i)) == list(part)


@pytest.mark.parametrize("source", [
    [1, 2, 3],
    "abc",
    IndexedSeq.from_iterable([1, 2, 3]),
    iter([1, 2, 3]),
])
def test_unknown_strategy_rejected_for_any_input(source) -> None:
    with pytest.raises(KeyError, match="Unknown slice strategy 'nope'"):
        slice_range(source, 0, 1, strategy="nope")


def test_known_strategy_accepted_for_builtin_input() -> None:
    assert slice_range([1, 2, 3, 4], 1, 2, strategy="fold") == [2, 3]
