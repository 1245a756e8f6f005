import pytest
from seq_slice.bounds.slice_bounds import InvalidRangeError, SliceBounds


def test_of_valid() -> None:
    bounds = SliceBounds.of(2, 6)
    assert bounds.start == 2
    assert bounds.end == 6
    assert bounds.count == 5
    assert not bounds.is_empty


def test_of_negative_start_raises() -> None:
    with pytest.raises(InvalidRangeError) as exc_info:
        SliceBounds.of(-1, 3)
    assert exc_info.value.start == -1
    assert exc_info.value.end == 3
    assert isinstance(exc_info.value, ValueError)


def test_negative_start_checked_before_empty_range() -> None:
    with pytest.raises(InvalidRangeError):
        SliceBounds.of(-5, -10)


def test_negative_end_is_empty() -> None:
    bounds = SliceBounds.of(0, -1)
    assert bounds.is_empty
    assert bounds.count == 0


def test_end_before_start_is_empty() -> None:
    bounds = SliceBounds.of(5, 2)
    assert bounds.is_empty
    assert bounds.count == 0
    assert not bounds.contains(3)


def test_of_rejects_non_int() -> None:
    with pytest.raises(TypeError):
        SliceBounds.of("0", 3)
    with pytest.raises(TypeError):
        SliceBounds.of(0, 3.5)


def test_contains() -> None:
    bounds = SliceBounds.of(1, 3)
    assert [p for p in range(6) if bounds.contains(p)] == [1, 2, 3]


@pytest.mark.parametrize("start, end, length, expected", [
    (2, 6, 10, (2, 7)),
    (0, 3, 0, (0, 0)),
    (5, 9, 3, (3, 3)),
    (1, 100, 5, (1, 5)),
    (4, 1, 10, (4, 4)),
    (0, -1, 10, (0, 0)),
])
def test_clip(start: int, end: int, length: int, expected: tuple[int, int]) -> None:
    assert SliceBounds.of(start, end).clip(length) == expected


def test_frozen() -> None:
    bounds = SliceBounds.of(0, 1)
    with pytest.raises(AttributeError):
        bounds.start = 3  # type: ignore[misc]


def test_str() -> None:
    assert str(SliceBounds.of(2, 6)) == "[2, 6]"
