"""
Cancellable generator sources backed by producer threads.

Each generator returns a ``(sequence, close)`` pair. The producer blocks on
a single-slot channel until the consumer reads, so it never runs ahead of
the consumer by more than one value. Calling ``close`` stops the producer
and waits a bounded time for its thread to exit: the generator's
``cancel_timeout`` if given, otherwise ``config.cancel_timeout`` seconds.
"""

import logging

from .channel import Channel, ChannelSequence, spawn
from .protocols import A, Close, Sequence

logger = logging.getLogger(__name__)


def count(
    start: A = 0, step: A = 1, *, cancel_timeout: float | None = None
) -> tuple[ChannelSequence[A], Close]:
    """
    Produce start, start + step, start + 2 * step, ... without end.

    A step of zero repeats ``start`` forever.

    Args:
        start: First value
        step: Increment between consecutive values
        cancel_timeout: Seconds close() waits for the producer to exit,
            or None for the configured default

    Returns:
        A tuple of (sequence, close)

    Example:
        >>> from lazyseq import collect, count, slice
        >>> seq, close = count(10, 5)
        >>> collect(slice(seq, 0, 3))
        [10, 15, 20]
        >>> close()
    """

    def produce(channel: Channel[A]) -> None:
        value = start
        while channel.send(value):
            value = value + step

    sequence = spawn("count", produce, cancel_timeout=cancel_timeout)
    return sequence, sequence.cancel


def cycle[T](
    seq: Sequence[T], *, cancel_timeout: float | None = None
) -> tuple[ChannelSequence[T], Close]:
    """
    Republish the elements of a sequence in order, forever.

    The first pass forwards upstream elements as they arrive and remembers
    them; later passes replay the saved elements. An empty source produces
    an empty sequence instead of spinning.

    Closing the cycle also cancels the generator at the root of the
    upstream chain, if any, so a producer waiting on a slow or
    all-rejecting upstream still exits.

    Args:
        seq: The upstream sequence (ownership is transferred; it is drained
            on the producer thread)
        cancel_timeout: Seconds close() waits for the producer to exit,
            or None for the configured default

    Returns:
        A tuple of (sequence, close)
    """

    def produce(channel: Channel[T]) -> None:
        saved: list[T] = []
        while not channel.cancelled and seq.advance():
            value = seq.current()
            saved.append(value)
            if not channel.send(value):
                return
        if not saved:
            if not channel.cancelled:
                logger.debug("cycle() source was empty; closing")
            return
        while True:
            for value in saved:
                if not channel.send(value):
                    return

    sequence = spawn(
        "cycle", produce, upstream=seq, cancel_timeout=cancel_timeout
    )
    return sequence, sequence.cancel


def repeat[T](
    value: T, times: int = -1, *, cancel_timeout: float | None = None
) -> tuple[ChannelSequence[T], Close]:
    """
    Publish the same value ``times`` times, or forever when ``times`` is -1.

    Args:
        value: The value to publish
        times: Number of repetitions, or -1 for no limit
        cancel_timeout: Seconds close() waits for the producer to exit,
            or None for the configured default

    Returns:
        A tuple of (sequence, close)

    Raises:
        ValueError: If times < -1
    """
    if times < -1:
        raise ValueError(f"times must be -1 or non-negative, got {times}")

    def produce(channel: Channel[T]) -> None:
        if times == -1:
            while channel.send(value):
                pass
        else:
            for _ in range(times):
                if not channel.send(value):
                    return

    sequence = spawn("repeat", produce, cancel_timeout=cancel_timeout)
    return sequence, sequence.cancel
