"""
Sequence sources backed by a finite, in-memory snapshot.

These are the leaves of every pipeline: adapters wrap them and terminal
operations drain them.
"""

from collections.abc import Iterable
from typing import TypeVar

from .errors import CursorStateError

T = TypeVar("T")


class ListSequence[T]:
    """
    Sequence over a private copy of an ordered collection.

    The snapshot is taken at construction, so later changes to the
    caller's list are never observed.
    """

    def __init__(self, items: Iterable[T]):
        """
        Create a list-backed sequence.

        Args:
            items: Any finite iterable; it is copied immediately
        """
        self._elements: list[T] = list(items)
        self._index = 0
        self._valid = False

    def __len__(self) -> int:
        """Return the number of elements in the snapshot."""
        return len(self._elements)

    def __repr__(self) -> str:
        return (
            f"ListSequence(len={len(self._elements)}, index={self._index})"
        )

    def advance(self) -> bool:
        """Move to the next element of the snapshot."""
        if self._index < len(self._elements):
            self._index += 1
            self._valid = True
            return True
        self._valid = False
        return False

    def current(self) -> T:
        """Return the element under the cursor."""
        if not self._valid:
            raise CursorStateError(
                "current() called without a successful advance()"
            )
        return self._elements[self._index - 1]

    def remaining(self) -> int:
        """Return how many elements have not been advanced over yet."""
        return len(self._elements) - self._index


def sequence_from_list[T](items: Iterable[T]) -> ListSequence[T]:
    """
    Create a sequence that yields the items in order, once each.

    Args:
        items: A list, tuple, range or any other finite iterable

    Returns:
        A ListSequence over a copy of the items

    Example:
        >>> from lazyseq import collect, sequence_from_list
        >>> collect(sequence_from_list([1, 2, 3]))
        [1, 2, 3]
    """
    return ListSequence(items)
