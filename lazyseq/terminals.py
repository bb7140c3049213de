"""
Terminal operations: functions that drain a sequence into a value.

A sequence can be drained once. After a terminal operation returns, the
sequence must not be reused, even when the operation stopped early
(``index``, ``contain``, ``slice``).
"""

from collections.abc import Callable, Hashable
from typing import Any, TypeVar

from .bridge import drive
from .config import random_index
from .consumers import (
    ChoiceConsumer,
    CollectConsumer,
    GroupByConsumer,
    IndexConsumer,
    MaxConsumer,
    MinConsumer,
    ReduceConsumer,
    ShuffleConsumer,
    SliceConsumer,
    SumConsumer,
    ToMapConsumer,
)
from .producers import ListSequence
from .protocols import A, C, Sequence

T = TypeVar("T")
R = TypeVar("R")
K = TypeVar("K", bound=Hashable)


def collect(seq: Sequence[T]) -> list[T]:
    """Drain a sequence into a list, preserving order."""
    return drive(seq, CollectConsumer())


def reduce(seq: Sequence[T], func: Callable[[R, T], R], initial: R) -> R:
    """
    Left-fold a sequence.

    Args:
        seq: The sequence to fold
        func: Function of (accumulator, element) returning the new accumulator
        initial: Starting accumulator

    Returns:
        The final accumulator

    Example:
        >>> import operator
        >>> from lazyseq import reduce, sequence_from_list
        >>> reduce(sequence_from_list([1, 2, 3, 4]), operator.add, 0)
        10
    """
    return drive(seq, ReduceConsumer(func, initial))


def max(seq: Sequence[C], kind: type = int) -> C:
    """
    Return the largest element.

    An empty sequence returns ``zero(kind)`` rather than raising, so pass
    ``kind=str`` or ``kind=float`` to get the matching zero value.
    """
    return drive(seq, MaxConsumer(kind))


def min(seq: Sequence[C], kind: type = int) -> C:
    """
    Return the smallest element.

    An empty sequence returns ``zero(kind)`` rather than raising.
    """
    return drive(seq, MinConsumer(kind))


def sum(seq: Sequence[A], kind: type | None = None) -> A:
    """
    Add up the elements, starting from the zero value of their type.

    Without ``kind`` the zero is taken from the first element's type, so
    strings concatenate and floats stay floats; an empty sequence then
    gives ``0``. Pass ``kind`` to fix the zero value explicitly, which
    also sets the result for an empty sequence.
    """
    return drive(seq, SumConsumer(kind))


def to_map(seq: Sequence[T], key: Callable[[T], K]) -> dict[K, T]:
    """
    Index elements by a derived key.

    When two elements share a key, the later one wins.
    """
    return drive(seq, ToMapConsumer(key))


def group_by(seq: Sequence[T], key: Callable[[T], K]) -> dict[K, list[T]]:
    """
    Group elements by a derived key.

    Elements keep their original relative order within each group.

    Example:
        >>> from lazyseq import group_by, sequence_from_list
        >>> group_by(sequence_from_list(["a", "bb", "cc", "d"]), len)
        {1: ['a', 'd'], 2: ['bb', 'cc']}
    """
    return drive(seq, GroupByConsumer(key))


def index(seq: Sequence[T], value: Any) -> int:
    """
    Return the zero-based position of the first element equal to value.

    The sequence is consumed up to and including the match. Returns -1
    (after draining everything) when there is no match.
    """
    return drive(seq, IndexConsumer(value))


def contain(seq: Sequence[T], value: Any) -> bool:
    """Return True if some element equals value; see ``index``."""
    return index(seq, value) != -1


def slice(seq: Sequence[T], start: int, end: int) -> ListSequence[T]:
    """
    Return the elements at positions ``[start, end)`` as a new sequence.

    A source shorter than ``end`` yields whatever was available. Elements
    after position ``end - 1`` are never read, so this is safe on infinite
    generators.

    Raises:
        ValueError: If a bound is negative or start > end
    """
    return drive(seq, SliceConsumer(start, end))


def shuffle(seq: Sequence[T]) -> ListSequence[T]:
    """
    Return a uniformly random permutation of the elements.

    Uses a Fisher-Yates shuffle driven by the configured random source
    (see ``set_seed``).
    """
    return drive(seq, ShuffleConsumer(random_index))


def choice(seq: Sequence[T]) -> T:
    """
    Return one element chosen uniformly at random.

    Raises:
        EmptySequenceError: If the sequence has no elements
    """
    return drive(seq, ChoiceConsumer(random_index))
