"""
Lazy sequences built from (generator, target, state) triples.

A generator is a function `gen(target, state) -> (new_state, value)`. The target is
the immutable thing being walked and the state is an opaque cursor the generator
reinterprets on each call. A generator reports exhaustion by returning STOP as the
new state. A sequence with no generator is empty.

Sequences are immutable: advancing returns a new node and never touches a shared
cursor. Each node evaluates its generator at most once and remembers its successor,
so peeking with `has_next` and then reading with `first` or `rest` costs a single
generator call, and repeated `rest` calls on a node return the same node.

Example:
    >>> s = indexed("abcde")
    >>> head, tail = take_n(2, s)
    >>> list(head), list(take(tail))
    (['a', 'b'], ['c', 'd', 'e'])
"""

# Standard library -----------------------------------------------------------------------------------------------------
from dataclasses import dataclass
from functools import cached_property
from typing import Any, Callable, Iterable, Iterator, Tuple

# Local ----------------------------------------------------------------------------------------------------------------
from .pack import Pack
from .sentinels import STOP

Generator = Callable[[Any, Any], Tuple[Any, Any]]


# Classes --------------------------------------------------------------------------------------------------------------

@dataclass(frozen=True, eq=False)
class Sequence:
    """
    Immutable (generator, target, state) triple.

    Nodes compare by identity. A node remembers both its generator result and its
    successor, so every holder of a node observes the same future, including for
    iterator-backed sources. A node kept alive keeps the nodes it has produced.

    Attributes:
        gen: Generator function, or None for the empty sequence.
        target: Object walked by the generator.
        state: Cursor passed to the generator.
    """
    gen: Generator | None = None
    target: Any = None
    state: Any = None

    @cached_property
    def _next(self) -> Tuple[Any, Any]:
        # Evaluated once per node
        return self.gen(self.target, self.state)

    @cached_property
    def _tail(self) -> "Sequence":
        new_state, _ = self._next
        if new_state is STOP:
            return EMPTY
        return Sequence(self.gen, self.target, new_state)

    def __iter__(self) -> Iterator[Any]:
        seq = self
        while has_next(seq):
            value, seq = step(seq)
            yield value


EMPTY = Sequence()


# Sources --------------------------------------------------------------------------------------------------------------

def indexed(items: Any) -> Sequence:
    """Sequence over an indexable sized collection (list, tuple, str, Pack...)."""
    return Sequence(_index_gen, items, 0)


def count(start: int = 0, step: int = 1) -> Sequence:
    """Infinite sequence start, start + step, start + 2*step..."""
    return Sequence(_count_gen, step, start)


def iterate(iterable: Iterable[Any]) -> Sequence:
    """
    Sequence over a native Python iterable.

    The underlying iterator is advanced when a node is first evaluated. Nodes cache
    their values and successors, so the sequence can be walked again from any node
    already produced; a new `iterate()` over the same exhausted iterator is empty.
    """
    return Sequence(_iter_gen, iter(iterable), 0)


def _index_gen(items: Any, index: int) -> Tuple[Any, Any]:
    if index < len(items):
        return index + 1, items[index]
    return STOP, None


def _count_gen(step: int, current: int) -> Tuple[int, int]:
    return current + step, current


def _iter_gen(iterator: Iterator[Any], index: int) -> Tuple[Any, Any]:
    try:
        value = next(iterator)
    except StopIteration:
        return STOP, None
    return index + 1, value


# Methods --------------------------------------------------------------------------------------------------------------

def is_empty(seq: Sequence) -> bool:
    """True if the sequence has no generator."""
    return seq.gen is None


def has_next(seq: Sequence) -> bool:
    """True if stepping the sequence produces another element."""
    if is_empty(seq):
        return False
    new_state, _ = seq._next
    return new_state is not STOP


def step(seq: Sequence) -> Tuple[Any, Sequence]:
    """
    Make one step in a sequence.

    Returns:
        Tuple (value, rest). Once the generator reports exhaustion the rest is EMPTY
        and the value is whatever the generator returned along with STOP.
        Stepping an empty sequence returns (None, EMPTY).
    """
    if is_empty(seq):
        return None, EMPTY
    _, value = seq._next
    return value, seq._tail


def first(seq: Sequence) -> Any:
    """First value of a sequence."""
    value, _ = step(seq)
    return value


def rest(seq: Sequence) -> Sequence:
    """Sequence without its first element, EMPTY when exhausted."""
    _, tail = step(seq)
    return tail


def take(seq: Sequence) -> Pack:
    """
    Drain a sequence into a Pack, preserving order.

    Terminates only if the generator eventually reports exhaustion.
    """
    result = Pack()
    while has_next(seq):
        value, seq = step(seq)
        result.push(value)
    return result


def take_n(n: int, seq: Sequence) -> Tuple[Pack, Sequence]:
    """Take at most n elements, return them with the remaining sequence."""
    result = Pack()
    while n > 0 and has_next(seq):
        value, seq = step(seq)
        result.push(value)
        n -= 1
    return result, seq


def drop(n: int, seq: Sequence) -> Sequence:
    """Skip at most n elements."""
    while n > 0 and has_next(seq):
        seq = rest(seq)
        n -= 1
    return seq


def slice(n: int, seq: Sequence) -> Tuple[Pack, Pack]:
    """Split a finite sequence into (first n elements, all the remaining elements)."""
    head, seq = take_n(n, seq)
    return head, take(seq)


def map(func: Callable[[Any, Any, Any], Any], seq: Sequence) -> Sequence:
    """
    Lazily apply `func(value, state, target)` to each element of a sequence.

    `state` and `target` are those of the underlying node that produced `value`.
    No element is computed until it is consumed, and each consumed element
    calls `func` exactly once.
    """
    if is_empty(seq):
        return EMPTY
    return Sequence(_map_gen, func, seq)


def _map_gen(func: Callable[[Any, Any, Any], Any], node: Sequence) -> Tuple[Any, Any]:
    if not has_next(node):
        return STOP, None
    value, tail = step(node)
    return tail, func(value, tail.state, tail.target)
