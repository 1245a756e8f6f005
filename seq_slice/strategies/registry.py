"""
Decorator and registry for slicing strategies over `LinkedSeq`.

A strategy is a function `(seq, start, end) -> LinkedSeq` that returns the elements of `seq` at
positions `start..end` inclusive. Every registered strategy must produce identical results; they
differ only in how much stack and auxiliary storage they use.

  - `@slice_strategy(name, stack_safe=...)`: marks a function as a strategy, attaches
    its metadata and records it in the registry
  - `get_strategy(name)`: looks a strategy up by name
  - `registered_strategies()`: snapshot of all registered strategies, in registration order
"""

import logging
import threading
from typing import Any, Callable, Protocol, cast, runtime_checkable
from seq_slice.containers.linked.linked_seq import LinkedSeq

logger = logging.getLogger(__name__)

@runtime_checkable
class SliceStrategy(Protocol):
    strategy_name: str
    stack_safe: bool
    def __call__(self, seq: LinkedSeq[Any], start: int, end: int) -> LinkedSeq[Any]: ...

_registry_lock = threading.Lock()
_registry: dict[str, SliceStrategy] = {}

def slice_strategy(
    name: str, *, stack_safe: bool = True
) -> Callable[[Callable[..., LinkedSeq[Any]]], SliceStrategy]:
    """
    Decorator to register a slicing strategy under a unique name.

    This attaches two attributes to the target function:
      - `strategy_name`: the name the strategy is registered under
      - `stack_safe`: `False` if call-stack depth grows with the input

    Args:
        name (str):
            Unique name of the strategy.
        stack_safe (bool):
            Whether the strategy runs in constant call-stack depth.

    Returns:
        Callable: The original function, enriched with the attributes above and recognized as
        conforming to the SliceStrategy protocol.

    Raises:
        ValueError: If a strategy with the same name is already registered.
    """
    def decorator(fn: Callable[..., LinkedSeq[Any]]) -> SliceStrategy:
        strategy = cast(SliceStrategy, fn)

        setattr(strategy, "strategy_name", name)
        setattr(strategy, "stack_safe", stack_safe)

        with _registry_lock:
            if name in _registry:
                raise ValueError(f"Duplicate slice strategy name '{name}' for {fn.__qualname__}.")
            _registry[name] = strategy

        logger.debug("registered slice strategy %r (stack_safe=%s)", name, stack_safe)
        return strategy

    return decorator

def get_strategy(name: str) -> SliceStrategy:
    """
    Look up a registered strategy by name.

    Args:
        name (str):
            The strategy name.

    Returns:
        SliceStrategy:
            The registered strategy.

    Raises:
        KeyError: If no strategy is registered under `name`.
    """
    with _registry_lock:
        strategy = _registry.get(name)
        if strategy is None:
            known = ", ".join(sorted(_registry))
            raise KeyError(f"Unknown slice strategy '{name}'. Known strategies: {known}")
        return strategy

def registered_strategies() -> dict[str, SliceStrategy]:
    with _registry_lock:
        return dict(_registry)

__all__ = [
    "slice_strategy",
    "get_strategy",
    "registered_strategies",
    "SliceStrategy"
]
