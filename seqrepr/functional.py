"""
Function composition and partial application helpers.
"""

# Standard library -----------------------------------------------------------------------------------------------------
from typing import Any, Callable

# Local ----------------------------------------------------------------------------------------------------------------
from .pack import Pack
from .sequences import Sequence, take


# Methods --------------------------------------------------------------------------------------------------------------

def bind_leading(func: Callable, *bound: Any, offset: int = 0) -> Callable:
    """
    Partially apply `func`, inserting `bound` after the first `offset` call arguments.

    Examples:
        >>> bind_leading(print, 1, 2, 3)(4, 5)
        1 2 3 4 5
        >>> bind_leading(print, 3, 4, 5, offset=2)(1, 2, 6)
        1 2 3 4 5 6
    """
    _check_offset(offset)

    def bound_func(*args: Any, **kwargs: Any) -> Any:
        return func(*_insert(args, bound, offset), **kwargs)

    return bound_func


def bind_trailing(func: Callable, *bound: Any, offset: int = 0) -> Callable:
    """
    Partially apply `func`, inserting `bound` before the last `offset` call arguments.

    Examples:
        >>> bind_trailing(print, 4, 5)(1, 2, 3)
        1 2 3 4 5
        >>> bind_trailing(print, 3, 4, offset=1)(1, 2, 5)
        1 2 3 4 5
    """
    _check_offset(offset)

    def bound_func(*args: Any, **kwargs: Any) -> Any:
        return func(*_insert(args, bound, max(len(args) - offset, 0)), **kwargs)

    return bound_func


def compose(*funcs: Callable) -> Callable:
    """
    Left-to-right composition: the first function receives the call arguments,
    every next one receives the previous result.

    Composing nothing returns a function that always returns None.
    """

    def composed(*args: Any, **kwargs: Any) -> Any:
        result = None
        for i, f in enumerate(funcs):
            result = f(*args, **kwargs) if i == 0 else f(result)
        return result

    return composed


def apply(func: Callable, *args: Any) -> Any:
    """
    Call `func` with leading arguments followed by the values of a sequence.

    The last positional argument must be a Sequence; it is drained with `take`.

    Examples:
        >>> from seqrepr.sequences import indexed
        >>> apply(max, 10, indexed([3, 42]))
        42
    """
    if not args or not isinstance(args[-1], Sequence):
        raise TypeError("apply() expects a Sequence as the last argument")
    leading = Pack(*args[:-1])
    return func(*(leading + take(args[-1])))


def ignore_if_not(flag: Any, func: Callable, *args: Any, **kwargs: Any) -> Any:
    """Call `func(*args, **kwargs)` when flag is truthy, otherwise return None."""
    if flag:
        return func(*args, **kwargs)
    return None


# Private Methods ------------------------------------------------------------------------------------------------------

def _check_offset(offset: int) -> None:
    if not isinstance(offset, int) or offset < 0:
        raise ValueError(f"offset must be a non-negative integer, got {offset!r}")


def _insert(args: tuple, bound: tuple, at: int) -> Pack:
    return Pack(*args[:at]) + Pack(*bound) + Pack(*args[at:])
