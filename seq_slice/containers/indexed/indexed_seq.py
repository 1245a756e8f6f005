from __future__ import annotations
from collections.abc import Iterable, Sequence
from typing import Any, Generic, Iterator, TypeVar, cast, overload
import numpy as np
from numpy.typing import NDArray
from seq_slice.bounds.slice_bounds import SliceBounds

T = TypeVar("T")

_NUMPY_DTYPES: dict[str, np.dtype[Any]] = {
    "u8": np.dtype(np.uint8),
    "u16": np.dtype(np.uint16),
    "u32": np.dtype(np.uint32),
    "u64": np.dtype(np.uint64),
    "i8": np.dtype(np.int8),
    "i16": np.dtype(np.int16),
    "i32": np.dtype(np.int32),
    "i64": np.dtype(np.int64),
    "f32": np.dtype(np.float32),
    "f64": np.dtype(np.float64),
    "bool": np.dtype(np.bool_),
}

def _freeze(data: NDArray[Any]) -> NDArray[Any]:
    data.flags.writeable = False
    return data

class IndexedSeq(Sequence[T], Generic[T]):
    """
    An immutable sequence backed by a read-only 1-D NumPy array, giving O(1) positional access.

    Converting a linked or iterable source into an `IndexedSeq` costs O(n) once. After that,
    every call to `slice()` costs time proportional only to the length of the slice, which makes
    this the preferred representation when the same source is sliced repeatedly.

    By default elements are stored in an `object` array, so any Python value is accepted and
    returned unchanged. A fixed numeric dtype can be requested with a dtype key
    (`u8`, `u16`, `u32`, `u64`, `i8`, `i16`, `i32`, `i64`, `f32`, `f64`, `bool`).

    Attributes:
        _data (NDArray[Any]):
            The underlying read-only array.
    """

    _data: NDArray[Any]

    def __init__(self, data: NDArray[Any]):
        if data.ndim != 1:
            raise ValueError(f"IndexedSeq requires a 1-D array, got {data.ndim} dimensions")
        self._data = data if not data.flags.writeable else _freeze(data.copy())

    @classmethod
    def from_iterable(cls, items: Iterable[T], dtype: str | None = None) -> IndexedSeq[T]:
        """
        Copy the items of a finite iterable into a new `IndexedSeq`.

        Args:
            items (Iterable[T]):
                Source elements, in order.
            dtype (str | None):
                Optional dtype key for numeric storage. `None` stores arbitrary objects. Narrowing
                within a kind (`i64` to `i32`, `f64` to `f32`) is allowed; crossing kinds in the
                lossy direction (floats into an integer dtype) is rejected.

        Returns:
            IndexedSeq[T]:
                The new sequence.

        Raises:
            ValueError: If `dtype` is not a supported key, or the items cannot be stored in it
                without changing kind.
        """
        if isinstance(items, IndexedSeq) and dtype is None:
            return cast(IndexedSeq[T], items)

        buffered = list(items)

        if dtype is not None:
            np_dtype = _NUMPY_DTYPES.get(dtype)
            if np_dtype is None:
                raise ValueError(f"Unsupported dtype key {dtype!r}")
            if buffered:
                source_dtype = np.asarray(buffered).dtype
                if not np.can_cast(source_dtype, np_dtype, casting="same_kind"):
                    raise ValueError(
                        f"Cannot store {source_dtype.name} items as {dtype!r} without losing data"
                    )
            return cls(_freeze(np.array(buffered, dtype=np_dtype)))

        # filled element by element so nested sequences stay opaque objects
        data = np.empty(len(buffered), dtype=object)
        for i, item in enumerate(buffered):
            data[i] = item
        return cls(_freeze(data))

    @property
    def dtype(self) -> np.dtype[Any]:
        return self._data.dtype

    def slice(self, start: int, end: int) -> IndexedSeq[T]:
        """
        Returns the elements at positions `start..end` (both inclusive), clipped to the length.

        Only the selected elements are copied.

        Args:
            start (int):
                Inclusive start position, must be non-negative.
            end (int):
                Inclusive end position. Values past the end truncate.

        Returns:
            IndexedSeq[T]:
                A new sequence holding the selected run.

        Raises:
            TypeError: If a bound is not an integer.
            InvalidRangeError: If `start` is negative.
        """
        lo, hi = SliceBounds.of(start, end).clip(len(self._data))
        return IndexedSeq(_freeze(self._data[lo:hi].copy()))

    def to_list(self) -> list[T]:
        if self._data.dtype == object:
            return list(self._data)
        return cast(list[T], self._data.tolist())

    def to_numpy(self) -> NDArray[Any]:
        """
        Returns the underlying read-only array without copying.
        """
        return self._data

    @overload
    def __getitem__(self, index: int) -> T: ...

    @overload
    def __getitem__(self, index: slice) -> IndexedSeq[T]: ...

    def __getitem__(self, index: int | slice) -> T | IndexedSeq[T]:
        if isinstance(index, slice):
            return IndexedSeq(self._data[index])
        value = self._data[index]
        if self._data.dtype == object:
            return cast(T, value)
        return cast(T, value.item())

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[T]:
        return iter(self.to_list())

    def __repr__(self) -> str:
        if self._data.dtype == object:
            return f"IndexedSeq({self.to_list()!r})"
        return f"IndexedSeq({self.to_list()!r}, dtype={self._data.dtype.name})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, IndexedSeq):
            # Cast is for the type checker only; element types are not enforced at runtime
            return self.to_list() == cast(IndexedSeq[T], other).to_list()
        if isinstance(other, Sequence) and not isinstance(other, (str, bytes)):
            return self.to_list() == list(other)
        return False

    def __hash__(self) -> int:
        return hash(tuple(self.to_list()))

    def __contains__(self, item: object) -> bool:
        return item in self.to_list()
