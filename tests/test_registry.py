import pytest
from seq_slice.containers.linked.linked_seq import LinkedSeq
from seq_slice.strategies.registry import (
    SliceStrategy,
    get_strategy,
    registered_strategies,
    slice_strategy,
)
import seq_slice.strategies.linked_strategies  # pylint: disable=unused-import  # noqa: F401
import seq_slice.strategies.indexed_strategy  # pylint: disable=unused-import  # noqa: F401

# pylint: disable=protected-access
# pyright: reportPrivateUsage=false

import seq_slice.strategies.registry as registry_module


EXPECTED_NAMES = [
    "recursive",
    "accumulator",
    "drop_take",
    "index_filter",
    "fold",
    "continuation",
    "indexed",
]


def test_all_strategies_registered() -> None:
    assert set(EXPECTED_NAMES) <= set(registered_strategies())


def test_get_strategy_metadata() -> None:
    recursive = get_strategy("recursive")
    assert isinstance(recursive, SliceStrategy)
    assert recursive.strategy_name == "recursive"
    assert recursive.stack_safe is False

    accumulator = get_strategy("accumulator")
    assert accumulator.stack_safe is True
    assert not hasattr(accumulator, "lazy")


def test_get_unknown_strategy() -> None:
    with pytest.raises(KeyError, match="Unknown slice strategy 'nope'"):
        get_strategy("nope")


def test_duplicate_name_rejected() -> None:
    with pytest.raises(ValueError, match="Duplicate slice strategy name 'accumulator'"):
        @slice_strategy("accumulator")
        def _again(seq: LinkedSeq[int], start: int, end: int) -> LinkedSeq[int]:
            return seq


def test_register_custom_strategy() -> None:
    try:
        @slice_strategy("test_python_slice")
        def _python_slice(seq: LinkedSeq[int], start: int, end: int) -> LinkedSeq[int]:
            return LinkedSeq.from_iterable(list(seq)[start:end + 1])

        assert get_strategy("test_python_slice") is _python_slice
        assert _python_slice.strategy_name == "test_python_slice"
        assert get_strategy("test_python_slice")(LinkedSeq.of(1, 2, 3), 1, 2) == [2, 3]
    finally:
        with registry_module._registry_lock:
            registry_module._registry.pop("test_python_slice", None)


def test_registered_strategies_is_snapshot() -> None:
    snapshot = registered_strategies()
    snapshot.pop("accumulator")
    assert "accumulator" in registered_strategies()
