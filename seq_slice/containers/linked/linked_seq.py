from __future__ import annotations
from collections.abc import Iterable, Sequence
from typing import Any, Generic, Iterator, TypeVar, cast

T = TypeVar("T")

class LinkedSeq(Generic[T]):
    """
    An immutable singly-linked sequence made of cons cells.

    Each non-empty instance holds one element (`head`) and the rest of the sequence (`tail`).
    Prepending with `cons()` shares the existing cells, so building a sequence front-to-back is
    cheap while positional access is linear. The length is cached on every cell so `len()` is
    O(1).

    Instances cannot be mutated after construction. Nested contents are not frozen.

    Attributes:
        _head (T | None):
            The first element, `None` for the empty sequence.
        _tail (LinkedSeq[T] | None):
            The remaining cells, `None` for the empty sequence.
        _size (int):
            Number of elements reachable from this cell.
    """

    __slots__ = ("_head", "_tail", "_size")

    _head: T | None
    _tail: LinkedSeq[T] | None
    _size: int

    def __init__(self, head: T | None = None, tail: LinkedSeq[T] | None = None):
        # no tail means the empty sequence; `head` is ignored then
        object.__setattr__(self, "_head", head if tail is not None else None)
        object.__setattr__(self, "_tail", tail)
        object.__setattr__(self, "_size", 0 if tail is None else tail._size + 1)

    @classmethod
    def empty(cls) -> LinkedSeq[T]:
        return cast(LinkedSeq[T], _EMPTY)

    @classmethod
    def of(cls, *items: T) -> LinkedSeq[T]:
        return cls.from_iterable(items)

    @classmethod
    def from_iterable(cls, items: Iterable[T]) -> LinkedSeq[T]:
        """
        Build a linked sequence holding the given items in order.

        Args:
            items (Iterable[T]):
                Finite iterable of elements.

        Returns:
            LinkedSeq[T]:
                A new sequence, or the shared empty sequence if `items` is empty.
        """
        if isinstance(items, LinkedSeq):
            return cast(LinkedSeq[T], items)
        buffered = items if isinstance(items, Sequence) else list(items)
        result = cls.empty()
        for item in reversed(buffered):
            result = result.cons(item)
        return result

    @classmethod
    def from_reversed(cls, items: Iterable[T]) -> LinkedSeq[T]:
        """
        Build a linked sequence holding the given items in reverse order, in a single pass.
        """
        result = cls.empty()
        for item in items:
            result = result.cons(item)
        return result

    def cons(self, value: T) -> LinkedSeq[T]:
        """
        Returns a new sequence with `value` prepended, sharing this sequence as its tail.
        """
        return LinkedSeq(value, self)

    @property
    def is_empty(self) -> bool:
        return self._size == 0

    @property
    def head(self) -> T:
        """
        The first element.

        Raises:
            IndexError: If the sequence is empty.
        """
        if self._size == 0:
            raise IndexError("head of empty LinkedSeq")
        return cast(T, self._head)

    @property
    def tail(self) -> LinkedSeq[T]:
        """
        The sequence without its first element.

        Raises:
            IndexError: If the sequence is empty.
        """
        if self._tail is None:
            raise IndexError("tail of empty LinkedSeq")
        return self._tail

    def reverse(self) -> LinkedSeq[T]:
        return LinkedSeq.from_reversed(self)

    def to_list(self) -> list[T]:
        return list(self)

    def __iter__(self) -> Iterator[T]:
        node = self
        while node._tail is not None:
            yield cast(T, node._head)
            node = node._tail

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size != 0

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"LinkedSeq is immutable; cannot set '{name}'")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"LinkedSeq is immutable; cannot delete '{name}'")

    def __repr__(self) -> str:
        return f"LinkedSeq({list(self)!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, LinkedSeq):
            other_ = cast(LinkedSeq[T], other)
            if self is other_:
                return True
            if self._size != other_._size:
                return False
            return all(a == b for a, b in zip(self, other_))
        if isinstance(other, Sequence) and not isinstance(other, (str, bytes)):
            if self._size != len(other):
                return False
            return all(a == b for a, b in zip(self, other))
        return False

    def __hash__(self) -> int:
        return hash(tuple(self))

    def __contains__(self, item: object) -> bool:
        return any(x == item for x in self)


_EMPTY: LinkedSeq[Any] = LinkedSeq()
