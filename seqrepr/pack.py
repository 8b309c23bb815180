"""
Ordered growable container for materialized sequences and variadic argument lists.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import collections.abc as abc
from typing import Any, Iterator

# Local ----------------------------------------------------------------------------------------------------------------
from .formatters import format_items


# Classes --------------------------------------------------------------------------------------------------------------

class Pack(abc.Sequence):
    """
    Ordered, growable sequence of values.

    Materialized sequences are returned as packs, and packs hold variadic
    argument lists for the binding helpers in `seqrepr.functional`.

    Supports push/pop at the end, len(), indexing, iteration and concatenation
    with another Pack via `+`. Compares equal to any non-text sequence holding
    the same values in the same order.

    Examples:
        >>> p = Pack(1, 2)
        >>> p.push(3)
        >>> str(p + Pack(4))
        '[1, 2, 3, 4]'
    """

    def __init__(self, *values: Any) -> None:
        self._values: list[Any] = list(values)

    def push(self, value: Any) -> None:
        """Append value to the end of the pack."""
        self._values.append(value)

    def pop(self) -> Any:
        """
        Remove and return the last value.

        Raises:
            IndexError: If the pack is empty.
        """
        if not self._values:
            raise IndexError("pop from empty pack")
        return self._values.pop()

    def __getitem__(self, index):
        if isinstance(index, slice):
            return Pack(*self._values[index])
        return self._values[index]

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._values)

    def __add__(self, other: "Pack") -> "Pack":
        if not isinstance(other, Pack):
            raise TypeError(f"expected Pack for concatenation, got {type(other).__name__}")
        return Pack(*self._values, *other._values)

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, Pack):
            return self._values == other._values
        if isinstance(other, abc.Sequence) and not isinstance(other, (str, bytes, bytearray)):
            return self._values == list(other)
        return NotImplemented

    __hash__ = None

    def __repr__(self) -> str:
        return f"Pack({', '.join(repr(v) for v in self._values)})"

    def __str__(self) -> str:
        return format_items([str(v) for v in self._values])
