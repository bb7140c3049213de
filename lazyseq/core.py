"""
Fluent interface over the functional API.

``lazy(data)`` wraps an iterable or an existing sequence in a
``LazyIterator`` so that adapters and terminal operations can be chained
as methods instead of nested calls.
"""

from collections.abc import Callable, Hashable, Iterable, Iterator
from typing import Any, TypeVar

from . import adapters, terminals
from .bridge import iterate
from .producers import sequence_from_list
from .protocols import Sequence

T = TypeVar("T")
U = TypeVar("U")
R = TypeVar("R")
K = TypeVar("K", bound=Hashable)


class LazyIterator[T]:
    """
    Chainable wrapper around a sequence.

    A LazyIterator is itself a sequence and, like the sequence it wraps,
    can be drained only once. Adapter methods return a new LazyIterator
    that takes ownership of this one.
    """

    def __init__(self, source: Sequence[T]):
        """
        Wrap a sequence.

        Args:
            source: The sequence to wrap (ownership is transferred)
        """
        self.source = source

    def __iter__(self) -> Iterator[T]:
        return iterate(self.source)

    def advance(self) -> bool:
        return self.source.advance()

    def current(self) -> T:
        return self.source.current()

    def map(self, func: Callable[[T], U]) -> "LazyIterator[U]":
        """
        Lazily apply a function to each element.

        Args:
            func: Function to apply to each element

        Returns:
            A new lazy iterator of transformed elements
        """
        return LazyIterator(adapters.map(self.source, func))

    def filter(self, predicate: Callable[[T], bool]) -> "LazyIterator[T]":
        """
        Lazily keep the elements that satisfy a predicate.

        Args:
            predicate: Function that returns True for elements to keep

        Returns:
            A new lazy iterator of the accepted elements
        """
        return LazyIterator(adapters.filter(self.source, predicate))

    def collect(self) -> list[T]:
        """Collect all elements into a list."""
        return terminals.collect(self.source)

    def reduce(self, func: Callable[[R, T], R], initial: R) -> R:
        """Left-fold the elements, starting from initial."""
        return terminals.reduce(self.source, func, initial)

    def sum(self, kind: type | None = None) -> Any:
        """Sum the elements from the zero value of their type."""
        return terminals.sum(self.source, kind)

    def max(self, kind: type = int) -> Any:
        """Largest element; an empty iterator gives ``zero(kind)``."""
        return terminals.max(self.source, kind)

    def min(self, kind: type = int) -> Any:
        """Smallest element; an empty iterator gives ``zero(kind)``."""
        return terminals.min(self.source, kind)

    def to_map(self, key: Callable[[T], K]) -> dict[K, T]:
        return terminals.to_map(self.source, key)

    def group_by(self, key: Callable[[T], K]) -> dict[K, list[T]]:
        return terminals.group_by(self.source, key)

    def index(self, value: Any) -> int:
        return terminals.index(self.source, value)

    def contains(self, value: Any) -> bool:
        return terminals.contain(self.source, value)

    def slice(self, start: int, end: int) -> "LazyIterator[T]":
        """Keep the elements at positions ``[start, end)``."""
        return LazyIterator(terminals.slice(self.source, start, end))

    def shuffle(self) -> "LazyIterator[T]":
        """Materialise and randomly permute the elements."""
        return LazyIterator(terminals.shuffle(self.source))

    def choice(self) -> T:
        """Pick one element uniformly at random."""
        return terminals.choice(self.source)


def lazy[T](data: Iterable[T] | Sequence[T]) -> LazyIterator[T]:
    """
    Wrap data in a chainable lazy iterator.

    Objects that already implement the sequence protocol (including
    generator sequences) are wrapped as-is; any other iterable is copied
    into a list-backed sequence.

    Args:
        data: A sequence, or any finite iterable

    Returns:
        A LazyIterator over the data

    Example:
        >>> from lazyseq import lazy
        >>> lazy(range(10)).filter(lambda x: x % 2 == 0).map(str).collect()
        ['0', '2', '4', '6', '8']
    """
    if isinstance(data, LazyIterator):
        return data
    if hasattr(data, "advance") and hasattr(data, "current"):
        return LazyIterator(data)  # type: ignore[arg-type]
    return LazyIterator(sequence_from_list(data))  # type: ignore[arg-type]
