from typing import TypeVar
from seq_slice.containers.linked.linked_seq import LinkedSeq

T = TypeVar('T')

def drop(n: int, seq: LinkedSeq[T]) -> LinkedSeq[T]:
    """
    Skip the first `n` elements of a linked sequence.

    Runs in a loop, so the call stack does not grow with `n`. The returned sequence shares its
    cells with `seq`; nothing is copied.

    Args:
        n (int):
            Number of elements to skip.
        seq (LinkedSeq[T]):
            The source sequence.

    Returns:
        LinkedSeq[T]:
            The suffix of `seq` after `n` elements, or the empty sequence if `seq` is shorter.

    Raises:
        ValueError: If `n` is negative.
    """
    if n < 0:
        raise ValueError(f"drop count must be >= 0, got {n}")
    rest = seq
    while n > 0 and not rest.is_empty:
        rest = rest.tail
        n -= 1
    return rest

def take(n: int, seq: LinkedSeq[T]) -> LinkedSeq[T]:
    """
    Keep the first `n` elements of a linked sequence.

    The prefix is collected into a reversed accumulator and reversed once, so the call stack does
    not grow with `n`.

    Args:
        n (int):
            Number of elements to keep.
        seq (LinkedSeq[T]):
            The source sequence.

    Returns:
        LinkedSeq[T]:
            A new sequence holding at most `n` elements.

    Raises:
        ValueError: If `n` is negative.
    """
    if n < 0:
        raise ValueError(f"take count must be >= 0, got {n}")
    if n >= len(seq):
        return seq
    acc: LinkedSeq[T] = LinkedSeq.empty()
    rest = seq
    while n > 0:
        acc = acc.cons(rest.head)
        rest = rest.tail
        n -= 1
    return acc.reverse()

def drop_recursive(n: int, seq: LinkedSeq[T]) -> LinkedSeq[T]:
    """
    Recursive form of `drop()`. Uses one stack frame per skipped element.
    """
    if n < 0:
        raise ValueError(f"drop count must be >= 0, got {n}")
    if n == 0 or seq.is_empty:
        return seq
    return drop_recursive(n - 1, seq.tail)

def take_recursive(n: int, seq: LinkedSeq[T]) -> LinkedSeq[T]:
    """
    Recursive form of `take()`. The result is built as the stack unwinds, one frame per kept
    element.
    """
    if n < 0:
        raise ValueError(f"take count must be >= 0, got {n}")
    if n == 0 or seq.is_empty:
        return LinkedSeq.empty()
    return take_recursive(n - 1, seq.tail).cons(seq.head)
