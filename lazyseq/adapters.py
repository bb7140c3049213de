"""
Adapters that lazily transform one sequence into another.

Adapters never evaluate eagerly: nothing upstream is touched until the
adapter itself is advanced. Wrapping a sequence transfers ownership of it
to the adapter; the caller must not advance the upstream afterwards.
"""

from collections.abc import Callable
from typing import TypeVar

from .errors import CursorStateError
from .protocols import Sequence

T = TypeVar("T")
U = TypeVar("U")

_UNSET = object()


class MapSequence[T, U]:
    """
    Sequence that applies a function to each upstream element.

    The function runs on the first ``current()`` after an advance and the
    result is cached until the next advance, so it is evaluated at most
    once per element and never for elements that are skipped unread.
    """

    def __init__(self, source: Sequence[T], func: Callable[[T], U]):
        self.source = source
        self.func = func
        self._value: object = _UNSET
        self._valid = False

    def advance(self) -> bool:
        """Advance the upstream and drop the cached mapped value."""
        self._value = _UNSET
        self._valid = self.source.advance()
        return self._valid

    def current(self) -> U:
        """Return the mapped value, computing it on first read."""
        if not self._valid:
            raise CursorStateError(
                "current() called without a successful advance()"
            )
        if self._value is _UNSET:
            self._value = self.func(self.source.current())
        return self._value  # type: ignore[return-value]


class FilterSequence[T]:
    """Sequence that keeps only the upstream elements a predicate accepts."""

    def __init__(self, source: Sequence[T], predicate: Callable[[T], bool]):
        self.source = source
        self.predicate = predicate
        self._value: object = _UNSET
        self._valid = False

    def advance(self) -> bool:
        """Advance the upstream until the predicate accepts an element."""
        # pred sees each upstream element exactly once
        while self.source.advance():
            value = self.source.current()
            if self.predicate(value):
                self._value = value
                self._valid = True
                return True
        self._value = _UNSET
        self._valid = False
        return False

    def current(self) -> T:
        """Return the last element the predicate accepted."""
        if not self._valid:
            raise CursorStateError(
                "current() called without a successful advance()"
            )
        return self._value  # type: ignore[return-value]


def map[T, U](seq: Sequence[T], func: Callable[[T], U]) -> MapSequence[T, U]:
    """
    Lazily apply a function to every element of a sequence.

    Args:
        seq: The upstream sequence (ownership is transferred)
        func: Function to apply to each element

    Returns:
        A new sequence of transformed elements

    Example:
        >>> from lazyseq import collect, map, sequence_from_list
        >>> collect(map(sequence_from_list([1, 2, 3]), lambda x: x * 2))
        [2, 4, 6]
    """
    return MapSequence(seq, func)


def filter[T](
    seq: Sequence[T], predicate: Callable[[T], bool]
) -> FilterSequence[T]:
    """
    Lazily keep the elements of a sequence that satisfy a predicate.

    Args:
        seq: The upstream sequence (ownership is transferred)
        predicate: Function that returns True for elements to keep

    Returns:
        A new sequence of the accepted elements, in upstream order
    """
    return FilterSequence(seq, predicate)
