"""
Single-slot rendezvous channel and the sequence view over it.

A background producer thread sends values into a ``Channel`` one at a
time; the consumer pulls them through a ``ChannelSequence``. The slot holds
at most one value, so the producer never runs more than one element ahead
of the consumer. Cancellation wakes both sides immediately.
"""

import logging
import threading
import weakref
from collections.abc import Callable

from .config import SequenceConfig
from .errors import CursorStateError

logger = logging.getLogger(__name__)


class Channel[T]:
    """
    Bounded channel of capacity one with a cancellation flag.

    Lifecycle: open -> closed (producer finished) or open -> cancelled
    (consumer gave up). Both are final; cancelling a closed channel still
    marks it cancelled so pending values are dropped.
    """

    def __init__(self):
        self._cond = threading.Condition()
        self._item: T | None = None
        self._full = False
        self._closed = False
        self._cancelled = False
        self._error: BaseException | None = None

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    @property
    def closed(self) -> bool:
        return self._closed

    def send(self, item: T) -> bool:
        """
        Block until the slot is free, then store the item.

        Returns:
            True if the item was stored, False if the channel was
            cancelled first (the producer must stop)
        """
        with self._cond:
            while self._full and not self._cancelled:
                self._cond.wait()
            if self._cancelled:
                return False
            if self._closed:
                raise RuntimeError("send on closed channel")
            self._item = item
            self._full = True
            self._cond.notify_all()
            return True

    def receive(self) -> tuple[bool, T | None]:
        """
        Block until a value is available or no more can arrive.

        Returns:
            ``(True, value)`` for a delivered value, ``(False, None)`` once
            the channel is cancelled or closed and drained

        Raises:
            BaseException: The error the producer closed the channel with,
                raised once after the buffered values are drained
        """
        with self._cond:
            while not self._full and not self._closed and not self._cancelled:
                self._cond.wait()
            if self._cancelled:
                return False, None
            if self._full:
                item = self._item
                self._item = None
                self._full = False
                self._cond.notify_all()
                return True, item
            error, self._error = self._error, None
        if error is not None:
            raise error
        return False, None

    def close(self, error: BaseException | None = None) -> None:
        """Mark the producer side as finished, optionally with an error."""
        with self._cond:
            self._closed = True
            self._error = error
            self._cond.notify_all()

    def cancel(self) -> bool:
        """
        Cancel the channel and drop any buffered value.

        Returns:
            True on the first call, False if already cancelled
        """
        with self._cond:
            if self._cancelled:
                return False
            self._cancelled = True
            self._item = None
            self._full = False
            self._cond.notify_all()
            return True


class ChannelSequence[T]:
    """
    Sequence whose elements come from a background producer thread.

    The sequence is also a context manager; leaving the ``with`` block
    cancels the producer. If the sequence is garbage collected without
    being cancelled, the channel is cancelled so the thread can exit.

    A producer that reads from another sequence (``cycle``) owns it, and
    cancelling the producer cancels that upstream too. A producer blocked
    inside the upstream's ``advance()`` is woken that way.
    """

    def __init__(
        self,
        channel: Channel[T],
        thread: threading.Thread,
        cancel_timeout: float | None = None,
        upstream: object | None = None,
    ):
        """
        Wrap a channel fed by a producer thread.

        Args:
            channel: The channel the producer sends into
            thread: The producer thread
            cancel_timeout: Seconds ``cancel`` waits for the thread to exit,
                or None to use the global configuration
            upstream: The sequence the producer reads from, if any
        """
        self._channel = channel
        self._thread = thread
        self._cancel_timeout = cancel_timeout
        self._upstream = upstream
        self._value: T | None = None
        self._valid = False
        # Must not reference self, or the sequence would never be collected
        self._finalizer = weakref.finalize(
            self, _cancel_producer, channel, upstream
        )

    def __repr__(self) -> str:
        state = "cancelled" if self._channel.cancelled else (
            "closed" if self._channel.closed else "running"
        )
        return f"ChannelSequence({self._thread.name!r}, {state})"

    def __enter__(self) -> "ChannelSequence[T]":
        return self

    def __exit__(self, *exc_info) -> None:
        self.cancel()

    @property
    def cancelled(self) -> bool:
        return self._channel.cancelled

    @property
    def thread(self) -> threading.Thread:
        """The producer thread feeding this sequence."""
        return self._thread

    def advance(self) -> bool:
        """Wait for the next value from the producer."""
        self._valid = False
        self._value = None
        ok, item = self._channel.receive()
        if ok:
            self._value = item
            self._valid = True
        return ok

    def current(self) -> T:
        """Return the value delivered by the last advance."""
        if not self._valid:
            raise CursorStateError(
                "current() called without a successful advance()"
            )
        return self._value  # type: ignore[return-value]

    def cancel(self) -> None:
        """
        Stop the producer and wait (bounded) for its thread to exit.

        Calling this more than once is a no-op.
        """
        if not self._channel.cancel():
            return
        self._valid = False
        self._value = None
        self._finalizer.detach()
        if self._upstream is not None:
            cancel_upstream(self._upstream)
        logger.debug("Cancelled generator %s", self._thread.name)

        timeout = self._cancel_timeout
        if timeout is None:
            timeout = SequenceConfig.global_config().cancel_timeout
        if timeout > 0 and self._thread is not threading.current_thread():
            self._thread.join(timeout)
            if self._thread.is_alive():
                logger.warning(
                    "Generator %s still running %.3fs after cancellation",
                    self._thread.name,
                    timeout,
                )


def cancel_upstream(seq: object) -> bool:
    """
    Cancel the generator at the root of an adapter chain, if there is one.

    Adapters and lazy iterators expose the sequence they wrap as
    ``source``; the chain is followed until an object with a ``cancel``
    method is found.

    Returns:
        True if a cancellable sequence was found and cancelled
    """
    while seq is not None:
        cancel = getattr(seq, "cancel", None)
        if callable(cancel):
            cancel()
            return True
        seq = getattr(seq, "source", None)
    return False


def _cancel_producer(channel: Channel, upstream: object | None) -> None:
    if channel.cancel() and upstream is not None:
        cancel_upstream(upstream)


def spawn[T](
    name: str,
    produce: Callable[[Channel[T]], None],
    *,
    upstream: object | None = None,
    cancel_timeout: float | None = None,
) -> ChannelSequence[T]:
    """
    Start a producer on a daemon thread and return its sequence.

    ``produce`` receives the channel and must return as soon as a send
    reports cancellation. The channel is always closed when it returns.
    An exception it raises is handed to the consumer on its next advance.

    Args:
        name: Short name of the generator, used in the thread name
        produce: Function that feeds the channel
        upstream: The sequence ``produce`` reads from, cancelled together
            with the producer
        cancel_timeout: Seconds cancellation waits for the thread to exit,
            or None to use the global configuration

    Returns:
        A running ChannelSequence
    """
    config = SequenceConfig.global_config()
    channel: Channel[T] = Channel()

    def run() -> None:
        logger.debug("Generator %s started", threading.current_thread().name)
        error: BaseException | None = None
        try:
            produce(channel)
        except BaseException as exc:
            logger.exception(
                "Generator %s failed", threading.current_thread().name
            )
            error = exc
        finally:
            channel.close(error)
        logger.debug("Generator %s exited", threading.current_thread().name)

    thread = threading.Thread(
        target=run,
        name=f"{config.thread_name_prefix}-{name}",
        daemon=True,
    )
    sequence = ChannelSequence(
        channel, thread, cancel_timeout=cancel_timeout, upstream=upstream
    )
    thread.start()
    return sequence
