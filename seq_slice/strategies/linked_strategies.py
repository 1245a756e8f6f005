"""
Slicing strategies over `LinkedSeq`.

All strategies return the elements at positions `start..end` (both inclusive), truncated at the
end of the sequence, and all of them validate their bounds through `SliceBounds.of()`: a negative
`start` raises `InvalidRangeError`, `end < start` gives the empty sequence.

Only `recursive` grows the call stack with the input; it is kept for comparison and is never used
by `slice_range()`.
"""

from functools import reduce
from itertools import islice
import sys
from typing import Callable, Iterable, Iterator, TypeVar
from seq_slice.bounds.slice_bounds import SliceBounds
from seq_slice.containers.linked.linked_seq import LinkedSeq
from seq_slice.strategies.registry import slice_strategy
from seq_slice.strategies.take_drop import drop, drop_recursive, take, take_recursive

T = TypeVar('T')
R = TypeVar('R')

@slice_strategy("recursive", stack_safe=False)
def slice_recursive(seq: LinkedSeq[T], start: int, end: int) -> LinkedSeq[T]:
    """
    Recursive drop then recursive take. Stack depth is proportional to `end`.
    """
    bounds = SliceBounds.of(start, end)
    if bounds.is_empty:
        return LinkedSeq.empty()
    return take_recursive(bounds.count, drop_recursive(bounds.start, seq))

@slice_strategy("accumulator")
def slice_accumulator(seq: LinkedSeq[T], start: int, end: int) -> LinkedSeq[T]:
    """
    Single pass carrying the selected elements in a reversed accumulator.

    The accumulator is reversed once when position `end` is reached or the sequence runs out.
    Constant stack, O(result) auxiliary storage.
    """
    bounds = SliceBounds.of(start, end)
    acc: LinkedSeq[T] = LinkedSeq.empty()
    if bounds.is_empty:
        return acc

    skip, remaining = bounds.start, bounds.count
    rest = seq
    while remaining > 0 and not rest.is_empty:
        if skip > 0:
            skip -= 1
        else:
            acc = acc.cons(rest.head)
            remaining -= 1
        rest = rest.tail
    return acc.reverse()

@slice_strategy("drop_take")
def slice_drop_take(seq: LinkedSeq[T], start: int, end: int) -> LinkedSeq[T]:
    """
    Bounded drop of `start` elements followed by a bounded take of `end - start + 1`.
    """
    bounds = SliceBounds.of(start, end)
    if bounds.is_empty:
        return LinkedSeq.empty()
    return take(bounds.count, drop(bounds.start, seq))

@slice_strategy("index_filter")
def slice_index_filter(seq: LinkedSeq[T], start: int, end: int) -> LinkedSeq[T]:
    """
    Keep the elements whose position lies in range, stopping once position `end` is passed.
    """
    bounds = SliceBounds.of(start, end)
    if bounds.is_empty:
        return LinkedSeq.empty()

    def selected() -> Iterator[T]:
        for position, item in enumerate(seq):
            if position > bounds.end:
                return
            if bounds.contains(position):
                yield item

    return LinkedSeq.from_reversed(selected()).reverse()

@slice_strategy("fold")
def slice_fold(seq: LinkedSeq[T], start: int, end: int) -> LinkedSeq[T]:
    """
    Left fold carrying `(accumulator, position)` over the whole sequence.

    Visits every element even past `end`; kept because it is the natural shape when further
    per-element processing is folded into the same pass.
    """
    bounds = SliceBounds.of(start, end)

    def step(state: tuple[LinkedSeq[T], int], item: T) -> tuple[LinkedSeq[T], int]:
        acc, position = state
        if bounds.contains(position):
            return acc.cons(item), position + 1
        return acc, position + 1

    initial: tuple[LinkedSeq[T], int] = (LinkedSeq.empty(), 0)
    acc, _ = reduce(step, seq, initial)
    return acc.reverse()

def iter_range(items: Iterable[T], start: int, end: int) -> Iterator[T]:
    """
    Lazily yield the elements of `items` at positions `start..end` (both inclusive).

    Nothing is materialised: the source is consumed only up to position `end`, and elements are
    handed out one at a time. Bounds are validated eagerly, when `iter_range()` is called, not on
    the first `next()`.

    Args:
        items (Iterable[T]):
            Any iterable, linked or not.
        start (int):
            Inclusive start position, must be non-negative.
        end (int):
            Inclusive end position. Values past the end truncate.

    Returns:
        Iterator[T]:
            Iterator over the selected elements.

    Raises:
        TypeError: If a bound is not an integer.
        InvalidRangeError: If `start` is negative.
    """
    bounds = SliceBounds.of(start, end)
    if bounds.is_empty:
        return iter(())
    # islice only accepts positions up to sys.maxsize; no element can sit past that anyway
    return islice(items, min(bounds.start, sys.maxsize), min(bounds.end + 1, sys.maxsize))

def slice_then(seq: Iterable[T], start: int, end: int, then: Callable[[Iterator[T]], R]) -> R:
    """
    Continuation-style slicing: hand the selected range forward to `then` as a lazy iterator.

    This lets a caller chain further processing (`sum`, `max`, building another container, ...)
    onto the slice without an intermediate sequence being built.

    Args:
        seq (Iterable[T]):
            Source sequence.
        start (int):
            Inclusive start position.
        end (int):
            Inclusive end position.
        then (Callable[[Iterator[T]], R]):
            Consumer receiving the selected elements.

    Returns:
        R:
            Whatever `then` returns.

    Example:
        >>> slice_then(LinkedSeq.of(1, 2, 3, 4, 5), 1, 3, sum)
        9
    """
    return then(iter_range(seq, start, end))

@slice_strategy("continuation")
def slice_continuation(seq: LinkedSeq[T], start: int, end: int) -> LinkedSeq[T]:
    """
    `slice_then()` with `LinkedSeq.from_iterable` as the consumer.
    """
    build: Callable[[Iterator[T]], LinkedSeq[T]] = LinkedSeq.from_iterable
    return slice_then(seq, start, end, build)

__all__ = [
    "slice_recursive",
    "slice_accumulator",
    "slice_drop_take",
    "slice_index_filter",
    "slice_fold",
    "slice_continuation",
    "iter_range",
    "slice_then",
]
