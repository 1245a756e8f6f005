"""
Public entry points for inclusive-range slicing.

`slice_range()` picks the cheapest correct strategy for the kind of container it is given:

  - `LinkedSeq`: traversal with `DEFAULT_LINKED_STRATEGY` (or the `strategy` argument)
  - `IndexedSeq`: `IndexedSeq.slice()`, a clamped sub-range copy
  - any other `collections.abc.Sequence`: native `seq[lo:hi]` over the clamped range, so `list`,
    `tuple`, `str` and `bytes` come back as the same type
  - any other iterable: consumed up to position `end` and returned as a `list`
"""

from collections.abc import Iterable, Sequence
from typing import Any, TypeVar, overload
from seq_slice.bounds.slice_bounds import SliceBounds
from seq_slice.containers.indexed.indexed_seq import IndexedSeq
from seq_slice.containers.linked.linked_seq import LinkedSeq
from seq_slice.strategies.registry import get_strategy
from seq_slice.strategies.linked_strategies import iter_range, slice_then
import seq_slice.strategies.indexed_strategy  # pylint: disable=unused-import  # noqa: F401

T = TypeVar('T')
S = TypeVar('S', str, bytes)

DEFAULT_LINKED_STRATEGY = "accumulator"

@overload
def slice_range(sequence: LinkedSeq[T], start: int, end: int, *,
                strategy: str | None = None) -> LinkedSeq[T]: ...

@overload
def slice_range(sequence: IndexedSeq[T], start: int, end: int, *,
                strategy: str | None = None) -> IndexedSeq[T]: ...

@overload
def slice_range(sequence: S, start: int, end: int, *,
                strategy: str | None = None) -> S: ...

@overload
def slice_range(sequence: tuple[T, ...], start: int, end: int, *,
                strategy: str | None = None) -> tuple[T, ...]: ...

@overload
def slice_range(sequence: Iterable[T], start: int, end: int, *,
                strategy: str | None = None) -> list[T]: ...

def slice_range(sequence: Any, start: int, end: int, *, strategy: str | None = None) -> Any:
    """
    Returns the elements of `sequence` at positions `start..end`, both inclusive.

    Positions past the end of the sequence are ignored, so an `end` larger than the sequence
    truncates instead of failing. `end < start` yields an empty result of the same kind.

    Args:
        sequence (Iterable[T]):
            The source. Never mutated.
        start (int):
            Inclusive start position. Must be non-negative.
        end (int):
            Inclusive end position.
        strategy (str | None):
            Name of a registered strategy to use for `LinkedSeq` input. Defaults to
            `DEFAULT_LINKED_STRATEGY`. For other inputs the name is still checked against the
            registry, but the container's own sub-range is used.

    Returns:
        The selected run, in the same container kind as the input (a `list` for plain
        iterables).

    Raises:
        TypeError:
            If a bound is not an integer, or `sequence` is not iterable.
        InvalidRangeError:
            If `start` is negative.
        KeyError:
            If `strategy` names no registered strategy.

    Example:
        >>> slice_range(["a", "b", "c", "d", "e", "f", "g", "h", "i", "j"], 2, 6)
        ['c', 'd', 'e', 'f', 'g']

        >>> slice_range(LinkedSeq.of(1, 2, 3, 4, 5), 1, 3)
        LinkedSeq([2, 3, 4])
    """
    linked_strategy = get_strategy(strategy or DEFAULT_LINKED_STRATEGY)

    if isinstance(sequence, LinkedSeq):
        return linked_strategy(sequence, start, end)

    bounds = SliceBounds.of(start, end)

    if isinstance(sequence, IndexedSeq):
        return sequence.slice(bounds.start, bounds.end)

    if isinstance(sequence, Sequence):
        lo, hi = bounds.clip(len(sequence))
        return sequence[lo:hi]

    if not isinstance(sequence, Iterable):
        raise TypeError(f"slice_range expects an iterable, got {type(sequence).__name__}")

    return slice_then(sequence, bounds.start, bounds.end, list)

def slice_with(name: str, seq: Iterable[T], start: int, end: int) -> LinkedSeq[T]:
    """
    Run one named strategy, converting `seq` to a `LinkedSeq` first if needed.

    Args:
        name (str):
            Registered strategy name.
        seq (Iterable[T]):
            The source sequence.
        start (int):
            Inclusive start position.
        end (int):
            Inclusive end position.

    Returns:
        LinkedSeq[T]:
            The selected run.
    """
    return get_strategy(name)(LinkedSeq.from_iterable(seq), start, end)

__all__ = [
    "DEFAULT_LINKED_STRATEGY",
    "slice_range",
    "slice_with",
    "slice_then",
    "iter_range",
]
