"""
Executable equivalence checks between slicing strategies.

For a concrete `(seq, start, end)` every registered strategy must return the same elements as the
reference strategy, and must agree with it on rejecting invalid bounds. `check_equivalence()` runs
them all and raises `StrategyMismatchError` on the first disagreement.
"""

import logging
from typing import Iterable, TypeVar
from seq_slice.containers.linked.linked_seq import LinkedSeq
from seq_slice.strategies.registry import get_strategy, registered_strategies
import seq_slice.slicing.slice_range  # pylint: disable=unused-import  # noqa: F401

logger = logging.getLogger(__name__)

T = TypeVar('T')

class StrategyMismatchError(AssertionError):
    """
    Raised when a strategy disagrees with the reference strategy.

    Attributes:
        strategy (str):
            Name of the disagreeing strategy.
        expected (object):
            The reference result, or the exception type it raised.
        actual (object):
            The strategy's result, or the exception type it raised.
    """

    def __init__(self, strategy: str, start: int, end: int, expected: object, actual: object):
        super().__init__(
            f"Strategy '{strategy}' disagrees on [{start}, {end}]: "
            f"expected {expected!r}, got {actual!r}"
        )
        self.strategy = strategy
        self.expected = expected
        self.actual = actual

def _run(name: str, seq: LinkedSeq[T], start: int, end: int) -> LinkedSeq[T] | type[Exception]:
    try:
        return get_strategy(name)(seq, start, end)
    except (TypeError, ValueError) as e:
        return type(e)

def check_equivalence(seq: Iterable[T], start: int, end: int, *, reference: str = "recursive",
                      names: Iterable[str] | None = None) -> LinkedSeq[T]:
    """
    Run several strategies on the same input and check they all agree with `reference`.

    A strategy agrees when it returns an equal `LinkedSeq`, or when it raises the same exception
    type as the reference (for example `InvalidRangeError` on a negative `start`).

    Args:
        seq (Iterable[T]):
            The input, converted to a `LinkedSeq` once.
        start (int):
            Inclusive start position.
        end (int):
            Inclusive end position.
        reference (str):
            Name of the strategy the others are compared against.
        names (Iterable[str] | None):
            Strategies to check. `None` checks every registered strategy.

    Returns:
        LinkedSeq[T]:
            The agreed result.

    Raises:
        StrategyMismatchError:
            If any strategy disagrees with the reference.
        KeyError:
            If a strategy name is unknown.
        TypeError | ValueError:
            Re-raised from the reference when every strategy agrees the bounds are invalid.
    """
    linked = LinkedSeq.from_iterable(seq)
    expected = _run(reference, linked, start, end)

    selected = list(registered_strategies()) if names is None else list(names)
    for name in selected:
        if name == reference:
            continue
        actual = _run(name, linked, start, end)
        logger.debug("strategy %r on [%s, %s]: %r", name, start, end, actual)
        if actual != expected:
            raise StrategyMismatchError(name, start, end, expected, actual)

    if isinstance(expected, type):
        # every strategy rejected the bounds; surface the reference's own error
        return get_strategy(reference)(linked, start, end)
    return expected

__all__ = [
    "check_equivalence",
    "StrategyMismatchError",
]
