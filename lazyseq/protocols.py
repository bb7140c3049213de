"""
Core protocol definitions for lazy sequences.

A sequence is a pull-based cursor: callers ``advance()`` it and, only after
a successful advance, read the element under the cursor with ``current()``.
Consumers turn a sequence into a concrete result.
"""

from abc import abstractmethod
from collections.abc import Callable, Iterator
from typing import Any, Protocol, TypeVar

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)  # Covariant for Sequence (output only)
T_contra = TypeVar(
    "T_contra", contravariant=True
)  # Contravariant for Consumer (input only)
R_co = TypeVar("R_co", covariant=True)

# Zero-argument cancellation capability returned by the generators
Close = Callable[[], None]


class Sequence(Protocol[T_co]):
    """
    A stateful, single-consumer cursor over a stream of values.

    Every sequence in this package raises ``CursorStateError`` when
    ``current()`` is called without a preceding successful ``advance()``.
    """

    @abstractmethod
    def advance(self) -> bool:
        """
        Move the cursor to the next element.

        Returns:
            True if an element is now under the cursor, False once the
            sequence is exhausted
        """
        ...

    @abstractmethod
    def current(self) -> T_co:
        """
        Return the element under the cursor.

        Raises:
            CursorStateError: If the last advance did not succeed
        """
        ...


class Consumer(Protocol[T_contra, R_co]):
    """
    A consumer drains (part of) an iterator and produces a result.

    The iterator handed to ``consume_iter`` advances the underlying
    sequence only when the consumer asks for the next item, so a consumer
    that stops early leaves the rest of the sequence untouched.
    """

    @abstractmethod
    def consume_iter(self, iterator: Iterator[T_contra]) -> R_co:
        """
        Consume elements from the iterator and produce a result.

        Args:
            iterator: An iterator producing elements to consume

        Returns:
            The result of consuming the elements
        """
        ...


class Comparable(Protocol):
    """Values with a natural ordering (numbers, strings)."""

    def __lt__(self, other: Any, /) -> bool: ...


class Addable(Protocol):
    """Values that can be summed with ``+`` (numbers, strings)."""

    def __add__(self, other: Any, /) -> Any: ...


C = TypeVar("C", bound=Comparable)
A = TypeVar("A", bound=Addable)
