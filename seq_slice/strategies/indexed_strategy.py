from typing import TypeVar
from seq_slice.containers.indexed.indexed_seq import IndexedSeq
from seq_slice.containers.linked.linked_seq import LinkedSeq
from seq_slice.strategies.registry import slice_strategy

T = TypeVar('T')

@slice_strategy("indexed")
def slice_indexed(seq: LinkedSeq[T], start: int, end: int) -> LinkedSeq[T]:
    """
    Convert to an `IndexedSeq` and take a clamped sub-range of the array.

    The conversion is O(n) and dominates a single call. Callers that slice the same source
    repeatedly should convert once with `IndexedSeq.from_iterable()` and call `IndexedSeq.slice()`
    directly, paying only for each slice's own length.
    """
    return LinkedSeq.from_iterable(IndexedSeq.from_iterable(seq).slice(start, end))
