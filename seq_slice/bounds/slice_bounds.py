"""
Inclusive position ranges and the single bounds policy shared by every slicing strategy.

Policy:
  - a negative `start` is a caller error and raises `InvalidRangeError`
  - `end < start` is an empty range, not an error
  - an `end` past the sequence length truncates, it never raises
"""

from __future__ import annotations
from dataclasses import dataclass
from seq_slice.typeutils.strict_index import strict_index


class InvalidRangeError(ValueError):
    """
    Raised when slice bounds violate the bounds policy.

    Attributes:
        start (int):
            The rejected start position.
        end (int):
            The end position that accompanied it.
    """

    def __init__(self, start: int, end: int):
        super().__init__(f"Invalid slice range [{start}, {end}]: start must be >= 0")
        self.start = start
        self.end = end


@dataclass(frozen=True, slots=True)
class SliceBounds:
    """
    A validated inclusive range `[start, end]` over sequence positions.

    Build instances with `SliceBounds.of()`, which applies the bounds policy. The constructor
    itself does not validate, so it can describe the result of clamping.

    Attributes:
        start (int):
            First position to keep. Never negative once built by `of()`.
        end (int):
            Last position to keep. May be smaller than `start`, in which case the range is empty.
    """
    start: int
    end: int

    @classmethod
    def of(cls, start: object, end: object) -> SliceBounds:
        """
        Validate raw bounds and build a `SliceBounds`.

        Args:
            start (object):
                Inclusive start position.
            end (object):
                Inclusive end position.

        Returns:
            SliceBounds:
                The validated bounds.

        Raises:
            TypeError: If either bound is not an integer.
            InvalidRangeError: If `start` is negative.
        """
        start_ = strict_index("start", start)
        end_ = strict_index("end", end)

        if start_ < 0:
            raise InvalidRangeError(start_, end_)

        return cls(start_, end_)

    @property
    def is_empty(self) -> bool:
        return self.end < self.start

    @property
    def count(self) -> int:
        """
        Number of positions covered before any clipping to a sequence length.
        """
        return max(0, self.end - self.start + 1)

    def contains(self, position: int) -> bool:
        return self.start <= position <= self.end

    def clip(self, length: int) -> tuple[int, int]:
        """
        Clip the range to a sequence of the given length.

        Args:
            length (int):
                Length of the sequence being sliced.

        Returns:
            tuple[int, int]:
                Half-open `(lo, hi)` positions with `0 <= lo <= hi <= length`, suitable for
                Python's native `seq[lo:hi]`.
        """
        lo = min(self.start, length)
        hi = min(self.end + 1, length)
        return lo, max(lo, hi)

    def __str__(self) -> str:
        return f"[{self.start}, {self.end}]"
