"""
Consumer implementations for the terminal operations.

Each consumer pulls from an iterator view of a sequence and turns what it
sees into a concrete value. Consumers that can answer early (``index``,
``slice``) stop pulling as soon as they have their answer, leaving the rest
of the sequence unread.
"""

from collections.abc import Callable, Hashable, Iterator
from typing import Any, TypeVar

from .errors import EmptySequenceError
from .producers import ListSequence
from .utils import zero

T = TypeVar("T")
R = TypeVar("R")

_MISSING = object()


class CollectConsumer[T]:
    """Consumer that collects all elements into a list."""

    def consume_iter(self, iterator: Iterator[T]) -> list[T]:
        """Collect all elements into a list."""
        return list(iterator)


class ReduceConsumer[T, R]:
    """Consumer that left-folds elements into an accumulator."""

    def __init__(self, func: Callable[[R, T], R], initial: R):
        self.func = func
        self.initial = initial

    def consume_iter(self, iterator: Iterator[T]) -> R:
        """Fold each element into the accumulator, left to right."""
        accumulator = self.initial
        for item in iterator:
            accumulator = self.func(accumulator, item)
        return accumulator


class MaxConsumer[T]:
    """
    Consumer that finds the largest element.

    The first element seeds the result and later elements replace it only
    when strictly greater, so ties keep the earliest element. An empty
    iterator yields ``zero(kind)``.
    """

    def __init__(self, kind: type = int):
        self.kind = kind

    def consume_iter(self, iterator: Iterator[T]) -> T:
        """Keep the largest element seen so far."""
        result = next(iterator, _MISSING)
        if result is _MISSING:
            return zero(self.kind)
        for item in iterator:
            if result < item:  # type: ignore[operator]
                result = item
        return result  # type: ignore[return-value]


class MinConsumer[T]:
    """Consumer that finds the smallest element; see ``MaxConsumer``."""

    def __init__(self, kind: type = int):
        self.kind = kind

    def consume_iter(self, iterator: Iterator[T]) -> T:
        """Keep the smallest element seen so far."""
        result = next(iterator, _MISSING)
        if result is _MISSING:
            return zero(self.kind)
        for item in iterator:
            if item < result:  # type: ignore[operator]
                result = item
        return result  # type: ignore[return-value]


class SumConsumer[T]:
    """
    Consumer that adds elements together.

    With an explicit ``kind`` the total starts from ``zero(kind)``.
    Otherwise it starts from the zero value of the first element's type,
    and an empty iterator yields ``0``.
    """

    def __init__(self, kind: type | None = None):
        self.kind = kind

    def consume_iter(self, iterator: Iterator[T]) -> T:
        """Add every element to the zero value of the element type."""
        if self.kind is not None:
            total = zero(self.kind)
        else:
            first = next(iterator, _MISSING)
            if first is _MISSING:
                return zero(int)  # type: ignore[return-value]
            total = zero(type(first)) + first
        for item in iterator:
            total = total + item
        return total


class ToMapConsumer[T, K: Hashable]:
    """Consumer that indexes elements by a derived key, last write wins."""

    def __init__(self, key: Callable[[T], K]):
        self.key = key

    def consume_iter(self, iterator: Iterator[T]) -> dict[K, T]:
        """Map each derived key to the last element that produced it."""
        result: dict[K, T] = {}
        for item in iterator:
            result[self.key(item)] = item
        return result


class GroupByConsumer[T, K: Hashable]:
    """Consumer that groups elements by a derived key, keeping their order."""

    def __init__(self, key: Callable[[T], K]):
        self.key = key

    def consume_iter(self, iterator: Iterator[T]) -> dict[K, list[T]]:
        """Append each element to the group of its derived key."""
        groups: dict[K, list[T]] = {}
        for item in iterator:
            groups.setdefault(self.key(item), []).append(item)
        return groups


class IndexConsumer[T]:
    """Consumer that finds the position of the first equal element."""

    def __init__(self, value: Any):
        self.value = value

    def consume_iter(self, iterator: Iterator[T]) -> int:
        """Stop at the first element equal to the target value."""
        for position, item in enumerate(iterator):
            if item == self.value:
                return position
        return -1


class SliceConsumer[T]:
    """
    Consumer that skips ``start`` elements and keeps the next
    ``end - start``.

    It never pulls past the ``end``-th element.
    """

    def __init__(self, start: int, end: int):
        if start < 0 or end < 0:
            raise ValueError(f"Invalid slice bounds: [{start}, {end})")
        if start > end:
            raise ValueError(f"Start index {start} > end index {end}")
        self.start = start
        self.end = end

    def consume_iter(self, iterator: Iterator[T]) -> ListSequence[T]:
        """Skip the leading elements, then keep at most end - start."""
        for _ in range(self.start):
            if next(iterator, _MISSING) is _MISSING:
                return ListSequence([])

        kept: list[T] = []
        for _ in range(self.end - self.start):
            item = next(iterator, _MISSING)
            if item is _MISSING:
                break
            kept.append(item)  # type: ignore[arg-type]
        return ListSequence(kept)


class ShuffleConsumer[T]:
    """Consumer that materialises elements and applies a Fisher-Yates shuffle."""

    def __init__(self, random_index: Callable[[int], int]):
        self.random_index = random_index

    def consume_iter(self, iterator: Iterator[T]) -> ListSequence[T]:
        """Materialise the elements and permute them in place."""
        items = list(iterator)
        for i in range(len(items) - 1, 0, -1):
            j = self.random_index(i + 1)
            items[i], items[j] = items[j], items[i]
        return ListSequence(items)


class ChoiceConsumer[T]:
    """Consumer that materialises elements and picks one uniformly."""

    def __init__(self, random_index: Callable[[int], int]):
        self.random_index = random_index

    def consume_iter(self, iterator: Iterator[T]) -> T:
        """Materialise the elements and pick one of them."""
        items = list(iterator)
        if not items:
            raise EmptySequenceError("choice() from an empty sequence")
        return items[self.random_index(len(items))]
