"""
Bridge functions that connect sequences and consumers.

Sequences speak the advance/current cursor protocol; consumers work on
ordinary Python iterators. The bridge translates between the two without
reading ahead.
"""

from collections.abc import Iterator
from typing import TypeVar

from .protocols import Consumer, Sequence

T = TypeVar("T")
R = TypeVar("R")


def iterate(seq: Sequence[T]) -> Iterator[T]:
    """
    View a sequence as a Python iterator.

    The sequence is advanced only when the next item is requested, so
    abandoning the iterator leaves the sequence positioned on the last
    item handed out.

    Args:
        seq: The sequence to read from

    Yields:
        The elements of the sequence, in order
    """
    while seq.advance():
        yield seq.current()


def drive(seq: Sequence[T], consumer: Consumer[T, R]) -> R:
    """
    Drive a consumer with the elements of a sequence.

    Args:
        seq: The sequence generating elements
        consumer: The consumer processing elements

    Returns:
        The result from the consumer
    """
    return consumer.consume_iter(iterate(seq))
