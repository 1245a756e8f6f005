from typing import Type, Tuple

def _format_type_name(tp: Type[object] | Tuple[Type[object], ...]) -> str:
    """
    Helper to format type names nicely for error messages.
    """
    if isinstance(tp, tuple):
        return ", ".join(t.__name__ for t in tp)
    return tp.__name__

def strict_index(name: str, value: object) -> int:
    """
    Perform a runtime check that a value can be used as a sequence position.

    Unlike a plain `isinstance(value, int)` test, `bool` is rejected: `True` and `False` are
    `int` subclasses but passing one as a bound is almost always a caller bug. Objects
    implementing `__index__` (for example NumPy integer scalars) are accepted and converted to a
    plain `int`.

    Args:
        name (str):
            Name of the argument being checked, used in the error message.
        value (object):
            The value to check.

    Returns:
        int:
            The value as a plain `int`.

    Raises:
        TypeError:
            If the value is a `bool` or does not implement `__index__`.

    Example:
        >>> strict_index("start", 3)
        3

        >>> strict_index("end", np.int64(7))
        7

        >>> strict_index("start", "3")
        TypeError: strict_index failed for 'start': expected int, got str
    """
    if isinstance(value, bool) or not hasattr(type(value), "__index__"):
        raise TypeError(
            f"strict_index failed for '{name}': expected {_format_type_name(int)}, "
            f"got {type(value).__name__}"
        )

    return value.__index__()  # type: ignore[attr-defined]
